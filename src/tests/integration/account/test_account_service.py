import pytest

from account.models import User
from account.services import AccountService
from core.api.exceptions import DomainConflictError, DomainValidationError
from core.utils.constants import UserType

pytestmark = pytest.mark.django_db


def test_register_employer_without_company_name_has_no_company():
    user = AccountService.register_user(
        name="Boss",
        email="boss@example.com",
        password="secret1",
        user_type=UserType.EMPLOYER,
        company_name="",
    )

    assert user.is_employer
    assert user.company is None


def test_register_rejects_unknown_type():
    with pytest.raises(DomainValidationError):
        AccountService.register_user(
            name="Someone",
            email="someone@example.com",
            password="secret1",
            user_type="admin",
        )


def test_soft_deleted_email_is_still_taken(user_factory):
    user = user_factory(email="gone@example.com")
    user.delete()

    assert not User.objects.filter(pk=user.pk).exists()
    with pytest.raises(DomainConflictError):
        AccountService.register_user(
            name="Again",
            email="gone@example.com",
            password="secret1",
            user_type=UserType.EMPLOYEE,
        )


def test_add_employee_requires_employer(employee_factory):
    with pytest.raises(DomainValidationError):
        AccountService.add_employee(
            employer=employee_factory(),
            name="Nope",
            email="nope@example.com",
            password="secret1",
        )


def test_employer_without_company_sees_only_company_less_employees(
    employer_factory, employee_factory, company_factory
):
    employer = employer_factory()
    employee_factory(name="Ana", company=company_factory())
    loose = employee_factory(name="Bia")
    employee_factory(name="Inactive", is_active=False)

    employees = list(AccountService.list_employees(employer=employer))

    assert employees == [loose]
