from __future__ import annotations

from datetime import date

from django.db import models


class TimeEntryQuerySet(models.QuerySet):
    def for_employee(self, *, employee_id: int):
        return self.filter(employee_id=employee_id)

    def for_employees(self, *, employees):
        return self.filter(employee__in=employees)

    def on_work_date(self, *, work_date: date):
        return self.filter(work_date=work_date)

    def in_range(self, *, start: date | None = None, end: date | None = None):
        """Entries with ``start <= work_date < end``; either bound may be open."""
        queryset = self
        if start is not None:
            queryset = queryset.filter(work_date__gte=start)
        if end is not None:
            queryset = queryset.filter(work_date__lt=end)
        return queryset

    def open(self):
        return self.filter(check_in__isnull=False, check_out__isnull=True)

    def completed(self):
        return self.filter(check_in__isnull=False, check_out__isnull=False)


class TimeEntryDomainManager(models.Manager.from_queryset(TimeEntryQuerySet)):
    def for_employee_on_date(self, *, employee_id: int, work_date: date):
        return (
            self.get_queryset()
            .for_employee(employee_id=employee_id)
            .on_work_date(work_date=work_date)
            .first()
        )

    def lock_for_employee_on_date(self, *, employee_id: int, work_date: date):
        return (
            self.get_queryset()
            .select_for_update()
            .for_employee(employee_id=employee_id)
            .on_work_date(work_date=work_date)
            .first()
        )

    def lock_or_create_for_employee_on_date(self, *, employee_id: int, work_date: date):
        """
        Fetch the (employee, work_date) row under a row lock, creating it if missing.
        Must run inside a transaction; the unique constraint settles creation races.
        """
        return (
            self.get_queryset()
            .select_for_update()
            .get_or_create(employee_id=employee_id, work_date=work_date)
        )
