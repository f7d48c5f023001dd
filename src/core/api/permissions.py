from rest_framework.permissions import BasePermission

from core.utils.constants import UserType


class HasUserType(BasePermission):
    """
    Permission that grants access if the user is one of the required account types.

    Checks the type from:
    1. JWT token claim 'user_type' (set by attach_account_claims during login)
    2. The user row itself
    3. User is_superuser flag

    Usage:
        permission_classes = [HasUserType.as_any(UserType.EMPLOYER)]
    """

    required_types: tuple[UserType, ...] = ()

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if user.is_superuser:
            return True

        user_type = None
        if hasattr(request, "auth") and request.auth:
            try:
                user_type = request.auth.get("user_type")
            except AttributeError:
                user_type = None

        if not user_type:
            user_type = getattr(user, "type", None)

        return user_type in self.required_types

    @classmethod
    def as_any(cls, *user_types: UserType) -> "HasUserType":
        class _Inner(cls):
            required_types = user_types

        _Inner.__name__ = f"HasUserType_{'_'.join(user_types) or 'None'}"
        return _Inner


IsEmployee = HasUserType.as_any(UserType.EMPLOYEE)
IsEmployer = HasUserType.as_any(UserType.EMPLOYER)
