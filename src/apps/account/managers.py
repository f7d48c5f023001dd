from django.contrib.auth.base_user import BaseUserManager

from core.utils.constants import UserType


class UserManager(BaseUserManager):
    def get_queryset(self):
        return super().get_queryset().filter(deleted_at__isnull=True)

    @staticmethod
    def normalize_login_email(email: str | None) -> str:
        return str(email or "").strip().lower()

    def get_by_natural_key(self, email):
        """Returns the user by their email, ignoring case."""
        return self.get(
            **{
                f"{self.model.USERNAME_FIELD}__iexact": self.normalize_login_email(
                    email
                )
            }
        )

    def create_user(self, email, password=None, **extra_fields):
        """
        Creates and returns a user with given email and password.
        """
        email = self.normalize_login_email(email)
        if not email:
            raise ValueError(
                f"The login field must be set: {self.model.USERNAME_FIELD}"
            )

        user = self.model(**{self.model.USERNAME_FIELD: email}, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Creates and returns a superuser with email and password.
        """
        extra_fields["is_staff"] = True
        extra_fields["is_superuser"] = True
        extra_fields.setdefault("type", UserType.EMPLOYER)

        return self.create_user(email, password, **extra_fields)

    def email_in_use(self, *, email: str | None) -> bool:
        if not email:
            return False
        return self.model.all_objects.filter(
            email__iexact=self.normalize_login_email(email)
        ).exists()

    def employees(self):
        return self.get_queryset().filter(type=UserType.EMPLOYEE, is_active=True)

    def employees_for(self, employer):
        """
        Employees an employer may see: those sharing the employer's company, or
        only company-less employees when the employer has no company.
        """
        company_id = getattr(employer, "company_id", None)
        if company_id:
            queryset = self.employees().filter(company_id=company_id)
        else:
            queryset = self.employees().filter(company__isnull=True)
        return queryset.order_by("name", "id")
