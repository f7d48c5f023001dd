import logging

from django.db import IntegrityError, transaction

from account.models import Company, User
from core.api.exceptions import DomainConflictError, DomainValidationError
from core.utils.constants import UserType

logger = logging.getLogger(__name__)


class AccountService:
    """Registration and employer-side employee management."""

    DUPLICATE_EMAIL_MESSAGE = "This email is already in use."

    @classmethod
    def _create_user(
        cls,
        *,
        name: str,
        email: str,
        password: str,
        user_type: str,
        company: Company | None,
    ) -> User:
        if User.objects.email_in_use(email=email):
            raise DomainConflictError(cls.DUPLICATE_EMAIL_MESSAGE)

        try:
            # Savepoint so a lost race on the unique email index stays recoverable.
            with transaction.atomic():
                return User.objects.create_user(
                    email=email,
                    password=password,
                    name=name.strip(),
                    type=user_type,
                    company=company,
                )
        except IntegrityError as exc:
            raise DomainConflictError(cls.DUPLICATE_EMAIL_MESSAGE) from exc

    @classmethod
    @transaction.atomic
    def register_user(
        cls,
        *,
        name: str,
        email: str,
        password: str,
        user_type: str,
        company_name: str | None = None,
    ) -> User:
        if user_type not in UserType.values:
            raise DomainValidationError("Invalid user type.")

        company = None
        if user_type == UserType.EMPLOYER and company_name:
            company = Company.objects.create(name=company_name.strip())

        user = cls._create_user(
            name=name,
            email=email,
            password=password,
            user_type=user_type,
            company=company,
        )
        logger.info(
            "Registered user id=%s type=%s company=%s",
            user.pk,
            user.type,
            user.company_id,
        )
        return user

    @classmethod
    @transaction.atomic
    def add_employee(
        cls,
        *,
        employer: User,
        name: str,
        email: str,
        password: str,
    ) -> User:
        if not employer.is_employer and not employer.is_superuser:
            raise DomainValidationError("Only employers can add employees.")

        employee = cls._create_user(
            name=name,
            email=email,
            password=password,
            user_type=UserType.EMPLOYEE,
            company=employer.company,
        )
        logger.info(
            "Employer id=%s added employee id=%s company=%s",
            employer.pk,
            employee.pk,
            employee.company_id,
        )
        return employee

    @staticmethod
    def list_employees(*, employer: User):
        return User.objects.employees_for(employer)
