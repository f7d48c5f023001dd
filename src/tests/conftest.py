import itertools
from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from rest_framework.test import APIClient

from account.models import Company, User
from attendance.services import AttendanceService
from core.utils.constants import UserType

BUSINESS_TZ = ZoneInfo("America/Sao_Paulo")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def authed_client_factory() -> Callable[[User], APIClient]:
    def _make(user: User) -> APIClient:
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return _make


@pytest.fixture
def company_factory(db) -> Callable[..., Company]:
    seq = itertools.count(1)

    def _create_company(**overrides) -> Company:
        payload = {"name": f"Company {next(seq)}"}
        payload.update(overrides)
        return Company.objects.create(**payload)

    return _create_company


@pytest.fixture
def user_factory(db) -> Callable[..., User]:
    seq = itertools.count(1)

    def _create_user(**overrides) -> User:
        idx = next(seq)
        payload = {
            "email": f"user_{idx}@example.com",
            "password": "pass1234",
            "name": f"User {idx}",
            "type": UserType.EMPLOYEE,
        }
        payload.update(overrides)
        return User.objects.create_user(**payload)

    return _create_user


@pytest.fixture
def employee_factory(user_factory) -> Callable[..., User]:
    def _create_employee(**overrides) -> User:
        overrides["type"] = UserType.EMPLOYEE
        return user_factory(**overrides)

    return _create_employee


@pytest.fixture
def employer_factory(user_factory) -> Callable[..., User]:
    def _create_employer(**overrides) -> User:
        overrides["type"] = UserType.EMPLOYER
        return user_factory(**overrides)

    return _create_employer


@pytest.fixture
def clock(monkeypatch) -> Callable[..., datetime]:
    """
    Pins AttendanceService.local_now to a business-timezone wall clock.
    Call ``clock("2024-03-11 08:00")`` to move it.
    """

    def _set(value: str) -> datetime:
        now_dt = datetime.strptime(value, "%Y-%m-%d %H:%M").replace(tzinfo=BUSINESS_TZ)
        monkeypatch.setattr(AttendanceService, "local_now", classmethod(lambda cls: now_dt))
        return now_dt

    return _set
