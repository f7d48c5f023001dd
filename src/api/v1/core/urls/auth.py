from django.urls import path

from api.v1.core.views.auth import (
    AccessTokenRefreshAPIView,
    AccessTokenVerifyAPIView,
    EmailLoginAPIView,
)

app_name = "auth"

urlpatterns = [
    path("login/", EmailLoginAPIView.as_view(), name="email-login"),
    path("refresh/", AccessTokenRefreshAPIView.as_view(), name="token-refresh"),
    path("verify/", AccessTokenVerifyAPIView.as_view(), name="token-verify"),
]
