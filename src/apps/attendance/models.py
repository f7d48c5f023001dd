from django.db import models

from attendance.managers import TimeEntryDomainManager
from core.api.exceptions import DomainNotFoundError
from core.models import TimestampedModel
from core.utils.constants import TimeEntryStatus


class TimeEntry(TimestampedModel):
    objects = models.Manager()
    domain = TimeEntryDomainManager()

    employee = models.ForeignKey(
        "account.User", on_delete=models.CASCADE, related_name="time_entries"
    )
    work_date = models.DateField(db_index=True)
    check_in = models.TimeField(null=True, blank=True)
    check_out = models.TimeField(null=True, blank=True)

    # Location of the most recent action (check-in or check-out).
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    address = models.CharField(max_length=255, blank=True, default="")

    total_hours = models.DecimalField(
        max_digits=5, decimal_places=2, null=True, blank=True
    )

    class Meta:
        verbose_name_plural = "time entries"
        indexes = [
            models.Index(
                fields=["employee", "work_date"], name="time_entry_employee_date_idx"
            ),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["employee", "work_date"],
                name="unique_time_entry_per_employee_date",
            )
        ]

    @property
    def status(self) -> str:
        if not self.check_in:
            return TimeEntryStatus.ABSENT
        if not self.check_out:
            return TimeEntryStatus.WORKING
        return TimeEntryStatus.FINISHED

    def _apply_location(self, location) -> None:
        self.latitude = location.latitude
        self.longitude = location.longitude
        self.address = location.address

    def mark_check_in(self, *, check_in, location) -> None:
        # A new check-in starts the day over: the old check-out and hours are stale.
        self.check_in = check_in
        self.check_out = None
        self.total_hours = None
        self._apply_location(location)
        self.save(
            update_fields=[
                "check_in",
                "check_out",
                "total_hours",
                "latitude",
                "longitude",
                "address",
                "updated_at",
            ]
        )

    def mark_check_out(self, *, check_out, location, total_hours) -> None:
        if not self.check_in:
            raise DomainNotFoundError("Cannot check out before check in.")
        self.check_out = check_out
        self.total_hours = total_hours
        self._apply_location(location)
        self.save(
            update_fields=[
                "check_out",
                "total_hours",
                "latitude",
                "longitude",
                "address",
                "updated_at",
            ]
        )

    def __str__(self) -> str:
        return f"TimeEntry#{self.pk} employee={self.employee_id} date={self.work_date}"
