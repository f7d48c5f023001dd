from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.filters import SearchFilter
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from account.services import AccountService
from api.v1.account.serializers import (
    EmployeeCreateSerializer,
    EmployeeSerializer,
    RegisterSerializer,
    UserSerializer,
)
from core.api.permissions import IsEmployer
from core.api.views import BaseAPIView, ListAPIView


@extend_schema(
    tags=["Users / Profile"],
    summary="Register a new account",
    description=(
        "Creates an employee or employer account. Employers may pass "
        "company_name to create their company at the same time."
    ),
    request=RegisterSerializer,
    responses={201: UserSerializer},
)
class RegisterAPIView(BaseAPIView):
    serializer_class = RegisterSerializer
    permission_classes = (AllowAny,)
    authentication_classes = ()

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user = AccountService.register_user(
            name=data["name"],
            email=data["email"],
            password=data["password"],
            user_type=data["type"],
            company_name=data.get("company_name"),
        )
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@extend_schema(
    tags=["Users / Profile"],
    summary="Get current user profile",
    description="Returns the authenticated user's profile with account type and company.",
)
class MeAPIView(BaseAPIView):
    serializer_class = UserSerializer
    permission_classes = (IsAuthenticated,)

    def get(self, request, *args, **kwargs):
        serializer = self.get_serializer(request.user)
        return Response(serializer.data, status=status.HTTP_200_OK)


@extend_schema(
    tags=["Users / Employees"],
    summary="List or add employees",
    description=(
        "Employers list the employees of their company, or add a new employee "
        "account that joins the employer's company. `search` matches name "
        "or email, case-insensitively."
    ),
)
class EmployeeListCreateAPIView(ListAPIView):
    serializer_class = EmployeeSerializer
    permission_classes = (IsAuthenticated, IsEmployer)
    filter_backends = (SearchFilter,)
    search_fields = ("name", "email")

    def get_queryset(self):
        return AccountService.list_employees(employer=self.request.user)

    def get_serializer_class(self):
        if self.request.method == "POST":
            return EmployeeCreateSerializer
        return EmployeeSerializer

    @extend_schema(request=EmployeeCreateSerializer, responses={201: EmployeeSerializer})
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        employee = AccountService.add_employee(
            employer=request.user,
            name=data["name"],
            email=data["email"],
            password=data["password"],
        )
        return Response(
            EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED
        )
