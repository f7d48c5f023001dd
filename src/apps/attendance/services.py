import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from zoneinfo import ZoneInfo

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from account.models import User
from attendance.hours import calculate_total_hours, format_clock_time
from attendance.models import TimeEntry
from core.api.exceptions import (
    DomainNotFoundError,
    DomainValidationError,
)
from core.utils.constants import NegativeHoursPolicy, UserType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeoLocation:
    latitude: float
    longitude: float
    address: str

    @classmethod
    def fallback(cls) -> "GeoLocation":
        return cls(
            latitude=float(settings.ATTENDANCE_FALLBACK_LATITUDE),
            longitude=float(settings.ATTENDANCE_FALLBACK_LONGITUDE),
            address=str(settings.ATTENDANCE_FALLBACK_ADDRESS),
        )

    @classmethod
    def from_payload(cls, payload: Mapping | None) -> "GeoLocation":
        """
        Client coordinates are kept as sent; the configured fallback applies
        only when both coordinates are missing.
        """
        payload = payload or {}
        latitude = payload.get("latitude")
        longitude = payload.get("longitude")
        if latitude is None and longitude is None:
            return cls.fallback()
        if latitude is None or longitude is None:
            raise DomainValidationError(
                "latitude and longitude must be provided together."
            )
        address = str(payload.get("address") or "").strip()
        return cls(
            latitude=float(latitude),
            longitude=float(longitude),
            address=address or str(settings.ATTENDANCE_CURRENT_LOCATION_LABEL),
        )


class AttendanceService:
    """Daily check-in/out for employees with worked-hours calculation."""

    DEFAULT_TIMEZONE = "America/Sao_Paulo"

    @classmethod
    def business_timezone(cls) -> ZoneInfo:
        timezone_name = getattr(settings, "ATTENDANCE_TIME_ZONE", cls.DEFAULT_TIMEZONE)
        return ZoneInfo(str(timezone_name))

    @classmethod
    def local_now(cls) -> datetime:
        return timezone.now().astimezone(cls.business_timezone())

    @classmethod
    def business_date(cls, now_dt: datetime | None = None) -> date:
        return (now_dt or cls.local_now()).date()

    @staticmethod
    def _clock_time(now_dt: datetime) -> time:
        return now_dt.time().replace(second=0, microsecond=0, tzinfo=None)

    @staticmethod
    def _ensure_employee(user) -> None:
        if getattr(user, "type", None) != UserType.EMPLOYEE:
            raise DomainValidationError("Only employees can check in or out.")

    @staticmethod
    def negative_hours_policy() -> str:
        policy = str(
            getattr(
                settings,
                "ATTENDANCE_NEGATIVE_HOURS_POLICY",
                NegativeHoursPolicy.REJECT,
            )
        ).lower()
        if policy not in NegativeHoursPolicy.values:
            return NegativeHoursPolicy.REJECT
        return policy

    @classmethod
    def resolve_total_hours(cls, *, check_in: time, check_out: time) -> Decimal:
        total_hours = calculate_total_hours(check_in, check_out)
        if total_hours >= 0:
            return total_hours

        policy = cls.negative_hours_policy()
        if policy == NegativeHoursPolicy.CLAMP:
            return Decimal("0.00")
        if policy == NegativeHoursPolicy.PRESERVE:
            return total_hours
        raise DomainValidationError(
            f"Check-out time {format_clock_time(check_out)} is earlier than "
            f"check-in time {format_clock_time(check_in)}."
        )

    @classmethod
    @transaction.atomic
    def check_in(
        cls, *, employee, location: Mapping | None = None
    ) -> tuple[TimeEntry, bool]:
        cls._ensure_employee(employee)
        now_dt = cls.local_now()
        today = cls.business_date(now_dt)

        entry, created = TimeEntry.domain.lock_or_create_for_employee_on_date(
            employee_id=employee.pk,
            work_date=today,
        )
        entry.mark_check_in(
            check_in=cls._clock_time(now_dt),
            location=GeoLocation.from_payload(location),
        )
        logger.info(
            "Check-in employee=%s date=%s time=%s created=%s",
            employee.pk,
            today.isoformat(),
            format_clock_time(entry.check_in),
            created,
        )
        return entry, created

    @classmethod
    @transaction.atomic
    def check_out(cls, *, employee, location: Mapping | None = None) -> TimeEntry:
        cls._ensure_employee(employee)
        now_dt = cls.local_now()
        today = cls.business_date(now_dt)

        entry = TimeEntry.domain.lock_for_employee_on_date(
            employee_id=employee.pk,
            work_date=today,
        )
        if not entry or not entry.check_in:
            raise DomainNotFoundError("No check-in found for today.")

        check_out = cls._clock_time(now_dt)
        total_hours = cls.resolve_total_hours(
            check_in=entry.check_in, check_out=check_out
        )
        entry.mark_check_out(
            check_out=check_out,
            location=GeoLocation.from_payload(location),
            total_hours=total_hours,
        )
        logger.info(
            "Check-out employee=%s date=%s time=%s total_hours=%s",
            employee.pk,
            today.isoformat(),
            format_clock_time(check_out),
            total_hours,
        )
        return entry

    @classmethod
    def today_entry(cls, *, employee) -> TimeEntry | None:
        return TimeEntry.domain.for_employee_on_date(
            employee_id=employee.pk,
            work_date=cls.business_date(),
        )

    @staticmethod
    def visible_entries(user):
        """Entries a user may read: their own, or their employees' for employers."""
        queryset = TimeEntry.domain.get_queryset().select_related("employee")
        if user.is_superuser:
            return queryset
        if user.type == UserType.EMPLOYER:
            return queryset.for_employees(employees=User.objects.employees_for(user))
        return queryset.for_employee(employee_id=user.pk)

    @staticmethod
    def resolve_visible_employee(user, employee_id: int):
        if user.is_superuser:
            queryset = User.objects.employees()
        elif user.type == UserType.EMPLOYER:
            queryset = User.objects.employees_for(user)
        else:
            queryset = User.objects.filter(pk=user.pk)

        employee = queryset.filter(pk=employee_id).first()
        if not employee:
            raise DomainNotFoundError("Employee not found.")
        return employee
