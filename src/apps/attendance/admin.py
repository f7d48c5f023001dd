from django.contrib import admin

from attendance.models import TimeEntry
from core.admin import BaseModelAdmin


@admin.register(TimeEntry)
class TimeEntryAdmin(BaseModelAdmin):
    list_display = (
        "id",
        "employee",
        "work_date",
        "check_in",
        "check_out",
        "total_hours",
        "created_at",
    )
    search_fields = ("id", "employee__email", "employee__name")
    list_filter = ("work_date",)
    list_select_related = ("employee",)
    ordering = ("-work_date", "-id")
