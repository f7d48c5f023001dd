from django.urls import path

from api.v1.account.views import (
    EmployeeListCreateAPIView,
    MeAPIView,
    RegisterAPIView,
)

app_name = "account"

urlpatterns = [
    path("register/", RegisterAPIView.as_view(), name="register"),
    path("me/", MeAPIView.as_view(), name="me"),
    path("employees/", EmployeeListCreateAPIView.as_view(), name="employees"),
]
