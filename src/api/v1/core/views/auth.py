from drf_spectacular.utils import extend_schema
from rest_framework_simplejwt.serializers import (
    TokenObtainPairSerializer,
    TokenVerifySerializer,
)
from rest_framework_simplejwt.tokens import Token
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
    TokenVerifyView,
)

from api.v1.account.serializers import UserSerializer
from core.api.views import BaseAPIView


def attach_account_claims(token: Token, user) -> None:
    token["user_type"] = user.type
    token["company_id"] = user.company_id


class EmailLoginSerializer(TokenObtainPairSerializer):
    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        attach_account_claims(token, user)
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        data["user"] = UserSerializer(self.user).data
        return data


@extend_schema(
    tags=["Auth"],
    summary="Login with email and password",
    description=(
        "Authenticates email/password credentials and returns JWT access and "
        "refresh tokens together with the user profile."
    ),
)
class EmailLoginAPIView(TokenObtainPairView, BaseAPIView):
    serializer_class = EmailLoginSerializer


@extend_schema(
    tags=["Auth"],
    summary="Refresh JWT access token",
    description="Validates a refresh token and issues a new access token.",
)
class AccessTokenRefreshAPIView(TokenRefreshView, BaseAPIView):
    pass


@extend_schema(
    tags=["Auth"],
    summary="Verify JWT token",
    description="Checks whether the provided JWT token is valid and not expired.",
)
class AccessTokenVerifyAPIView(TokenVerifyView, BaseAPIView):
    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)

        if response.status_code == 200:
            serializer = TokenVerifySerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            response.data = {"detail": "Token is valid"}

        return response
