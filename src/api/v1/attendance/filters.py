from django_filters import rest_framework as filters

from attendance.models import TimeEntry
from attendance.services import AttendanceService
from attendance.services_reports import AttendanceReportService
from core.utils.constants import DateRangePreset, TimeEntryStatus


class TimeEntryFilterSet(filters.FilterSet):
    employee_id = filters.NumberFilter(field_name="employee_id")
    start = filters.DateFilter(field_name="work_date", lookup_expr="gte")
    end = filters.DateFilter(field_name="work_date", lookup_expr="lte")
    period = filters.ChoiceFilter(
        method="filter_period",
        choices=DateRangePreset.choices,
    )
    status = filters.ChoiceFilter(
        method="filter_status",
        choices=TimeEntryStatus.choices,
    )
    ordering = filters.ChoiceFilter(
        method="filter_ordering",
        choices=(
            ("work_date", "work_date"),
            ("-work_date", "-work_date"),
            ("employee_id", "employee_id"),
            ("-employee_id", "-employee_id"),
            ("total_hours", "total_hours"),
            ("-total_hours", "-total_hours"),
        ),
    )

    class Meta:
        model = TimeEntry
        fields = ("employee_id", "start", "end", "period", "status", "ordering")

    def filter_period(self, queryset, name, value):
        date_range = AttendanceReportService.resolve_date_range(
            value, today=AttendanceService.business_date()
        )
        return queryset.in_range(start=date_range.start, end=date_range.end)

    def filter_status(self, queryset, name, value):
        if value == TimeEntryStatus.WORKING:
            return queryset.open()
        if value == TimeEntryStatus.FINISHED:
            return queryset.completed()
        return queryset.filter(check_in__isnull=True)

    def filter_ordering(self, queryset, name, value):
        return queryset.order_by(value, "id")
