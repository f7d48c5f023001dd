from django.urls import include, path

app_name = "v1"

urlpatterns = [
    path("auth/", include("api.v1.core.urls.auth", namespace="auth")),
    path("users/", include("api.v1.account.urls", namespace="account")),
    path("attendance/", include("api.v1.attendance.urls", namespace="attendance")),
    path("misc/", include("api.v1.core.urls.misc", namespace="misc")),
]
