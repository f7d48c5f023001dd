from django.contrib.auth.base_user import AbstractBaseUser
from django.db import models

from account import managers
from core.models import SoftDeleteModel, TimestampedModel
from core.utils.constants import UserType


class Company(TimestampedModel):
    name = models.CharField(max_length=150)

    class Meta:
        verbose_name_plural = "companies"

    def __str__(self) -> str:
        return self.name


class User(AbstractBaseUser, TimestampedModel, SoftDeleteModel):
    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    type = models.CharField(
        max_length=20,
        choices=UserType.choices,
        default=UserType.EMPLOYEE,
        db_index=True,
    )
    company = models.ForeignKey(
        Company,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="users",
    )

    # For Django Admin
    is_staff = models.BooleanField(default=False)
    is_superuser = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    objects = managers.UserManager()

    def __str__(self):
        return f"{self.name} <{self.email}>"

    @property
    def is_employee(self) -> bool:
        return self.type == UserType.EMPLOYEE

    @property
    def is_employer(self) -> bool:
        return self.type == UserType.EMPLOYER

    def get_navigation_title(self):
        return self.name

    def has_perm(self, perm, obj=None):
        return self.is_superuser

    def has_module_perms(self, app_label):
        return self.is_superuser
