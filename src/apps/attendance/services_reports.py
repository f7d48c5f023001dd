from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from account.models import User
from attendance.hours import format_clock_time
from attendance.models import TimeEntry
from core.api.exceptions import DomainValidationError
from core.utils.constants import DateRangePreset, TimeEntryStatus

ZERO_HOURS = Decimal("0.00")
HOURS_QUANTUM = Decimal("0.01")
WORK_DAYS_PER_WEEK = 5


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class DateRange:
    """Half-open ``[start, end)`` range of work dates; ``start=None`` is unbounded."""

    start: date | None
    end: date | None

    def contains(self, value: date) -> bool:
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value >= self.end:
            return False
        return True

    def as_dict(self) -> dict[str, str | None]:
        return {
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    total_hours: Decimal
    working_days: int
    active_employees: int
    average_hours: Decimal

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TimesheetStats:
    month: str
    total_hours: Decimal
    worked_days: int
    partial_days: int
    average_hours: Decimal
    total_entries: int
    projected_weekly_hours: Decimal

    def as_dict(self) -> dict:
        return asdict(self)


class AttendanceReportService:
    """Read-side reductions over time entries for dashboards and timesheets."""

    @staticmethod
    def resolve_date_range(preset: str, *, today: date) -> DateRange:
        if preset == DateRangePreset.TODAY:
            return DateRange(start=today, end=today + timedelta(days=1))
        if preset == DateRangePreset.THIS_WEEK:
            # Weeks start on Sunday.
            start = today - timedelta(days=(today.weekday() + 1) % 7)
            return DateRange(start=start, end=start + timedelta(days=7))
        if preset == DateRangePreset.THIS_MONTH:
            start = today.replace(day=1)
            return DateRange(start=start, end=AttendanceReportService._next_month(start))
        if preset == DateRangePreset.LAST_MONTH:
            end = today.replace(day=1)
            start = (end - timedelta(days=1)).replace(day=1)
            return DateRange(start=start, end=end)
        if preset == DateRangePreset.ALL:
            return DateRange(start=None, end=today + timedelta(days=1))
        raise DomainValidationError(f"Unknown period {preset!r}.")

    @staticmethod
    def _next_month(month_start: date) -> date:
        if month_start.month == 12:
            return date(month_start.year + 1, 1, 1)
        return date(month_start.year, month_start.month + 1, 1)

    @staticmethod
    def parse_month_token(month_token: str) -> date:
        try:
            parsed = datetime.strptime(str(month_token), "%Y-%m")
        except ValueError as exc:
            raise DomainValidationError("month must be in YYYY-MM format.") from exc
        return date(parsed.year, parsed.month, 1)

    @classmethod
    def month_range(cls, month_start: date) -> DateRange:
        return DateRange(start=month_start, end=cls._next_month(month_start))

    @staticmethod
    def summarize(
        entries: Iterable,
        *,
        date_range: DateRange | None = None,
        employee_id: int | None = None,
    ) -> AttendanceSummary:
        """
        Reduce entries to total hours, distinct working days and employees.

        Entries outside ``date_range`` or not owned by ``employee_id`` are
        skipped. Missing ``total_hours`` counts as zero; a working day is any
        date with an entry, complete or not.
        """
        total_hours = ZERO_HOURS
        work_dates: set[date] = set()
        employee_ids: set[int] = set()

        for entry in entries:
            if date_range is not None and not date_range.contains(entry.work_date):
                continue
            if employee_id is not None and entry.employee_id != employee_id:
                continue
            total_hours += Decimal(entry.total_hours or 0)
            work_dates.add(entry.work_date)
            employee_ids.add(entry.employee_id)

        working_days = len(work_dates)
        average_hours = (
            _quantize(total_hours / working_days) if working_days else ZERO_HOURS
        )
        return AttendanceSummary(
            total_hours=_quantize(total_hours),
            working_days=working_days,
            active_employees=len(employee_ids),
            average_hours=average_hours,
        )

    @classmethod
    def monthly_timesheet(cls, entries: Iterable, *, month_start: date) -> TimesheetStats:
        month_range = cls.month_range(month_start)
        month_entries = [e for e in entries if month_range.contains(e.work_date)]

        total_hours = sum(
            (Decimal(e.total_hours or 0) for e in month_entries), ZERO_HOURS
        )
        worked_days = sum(1 for e in month_entries if e.check_in and e.check_out)
        partial_days = sum(1 for e in month_entries if e.check_in and not e.check_out)
        average_hours = (
            _quantize(total_hours / worked_days) if worked_days else ZERO_HOURS
        )
        return TimesheetStats(
            month=month_start.strftime("%Y-%m"),
            total_hours=_quantize(total_hours),
            worked_days=worked_days,
            partial_days=partial_days,
            average_hours=average_hours,
            total_entries=len(month_entries),
            projected_weekly_hours=_quantize(average_hours * WORK_DAYS_PER_WEEK),
        )

    @staticmethod
    def status_board(*, employees: Iterable[User], today: date) -> list[dict]:
        employees = list(employees)
        entries_by_employee = {
            entry.employee_id: entry
            for entry in TimeEntry.domain.get_queryset()
            .on_work_date(work_date=today)
            .filter(employee__in=employees)
        }

        board = []
        for employee in employees:
            entry = entries_by_employee.get(employee.pk)
            board.append(
                {
                    "employee_id": employee.pk,
                    "name": employee.name,
                    "email": employee.email,
                    "status": entry.status if entry else TimeEntryStatus.ABSENT,
                    "check_in": format_clock_time(entry.check_in) if entry else None,
                    "check_out": format_clock_time(entry.check_out) if entry else None,
                    "total_hours": entry.total_hours if entry else None,
                }
            )
        return board
