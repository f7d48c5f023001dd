from django.db import models
from django.utils.translation import gettext_lazy as _


class UserType(models.TextChoices):
    EMPLOYEE = "employee", _("Employee")
    EMPLOYER = "employer", _("Employer")


class TimeEntryStatus(models.TextChoices):
    ABSENT = "absent", _("Absent")
    WORKING = "working", _("Working")
    FINISHED = "finished", _("Finished")


class DateRangePreset(models.TextChoices):
    TODAY = "today", _("Today")
    THIS_WEEK = "this-week", _("This week")
    THIS_MONTH = "this-month", _("This month")
    LAST_MONTH = "last-month", _("Last month")
    ALL = "all", _("All time")


class NegativeHoursPolicy(models.TextChoices):
    REJECT = "reject", _("Reject")
    CLAMP = "clamp", _("Clamp to zero")
    PRESERVE = "preserve", _("Preserve negative value")
