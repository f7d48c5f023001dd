from rest_framework import serializers

from attendance.models import TimeEntry
from core.utils.constants import DateRangePreset, TimeEntryStatus

CLOCK_TIME_FORMAT = "%H:%M"


class TimeEntrySerializer(serializers.ModelSerializer):
    employee_name = serializers.CharField(source="employee.name", read_only=True)
    check_in = serializers.TimeField(format=CLOCK_TIME_FORMAT, read_only=True)
    check_out = serializers.TimeField(format=CLOCK_TIME_FORMAT, read_only=True)
    total_hours = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )
    status = serializers.ChoiceField(choices=TimeEntryStatus.choices, read_only=True)

    class Meta:
        model = TimeEntry
        fields = (
            "id",
            "employee",
            "employee_name",
            "work_date",
            "check_in",
            "check_out",
            "latitude",
            "longitude",
            "address",
            "total_hours",
            "status",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class LocationInputSerializer(serializers.Serializer):
    latitude = serializers.FloatField(
        min_value=-90, max_value=90, required=False, allow_null=True
    )
    longitude = serializers.FloatField(
        min_value=-180, max_value=180, required=False, allow_null=True
    )
    address = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True
    )

    def validate(self, attrs):
        has_latitude = attrs.get("latitude") is not None
        has_longitude = attrs.get("longitude") is not None
        if has_latitude != has_longitude:
            raise serializers.ValidationError(
                "latitude and longitude must be provided together."
            )
        return attrs


class AttendanceActionInputSerializer(serializers.Serializer):
    location = LocationInputSerializer(required=False, allow_null=True)


class SummaryQuerySerializer(serializers.Serializer):
    period = serializers.ChoiceField(
        choices=DateRangePreset.choices,
        required=False,
        default=DateRangePreset.THIS_MONTH,
    )
    employee_id = serializers.IntegerField(min_value=1, required=False)


class SummarySerializer(serializers.Serializer):
    period = serializers.CharField()
    start = serializers.DateField(allow_null=True)
    end = serializers.DateField(allow_null=True)
    total_hours = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )
    working_days = serializers.IntegerField()
    active_employees = serializers.IntegerField()
    average_hours = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )


class TimesheetQuerySerializer(serializers.Serializer):
    month = serializers.RegexField(
        regex=r"^\d{4}-(0[1-9]|1[0-2])$",
        required=False,
        error_messages={"invalid": "month must be in YYYY-MM format."},
    )
    employee_id = serializers.IntegerField(min_value=1, required=False)


class TimesheetStatsSerializer(serializers.Serializer):
    month = serializers.CharField()
    total_hours = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )
    worked_days = serializers.IntegerField()
    partial_days = serializers.IntegerField()
    average_hours = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )
    total_entries = serializers.IntegerField()
    projected_weekly_hours = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )


class TimesheetSerializer(serializers.Serializer):
    employee = serializers.DictField()
    stats = TimesheetStatsSerializer()
    entries = TimeEntrySerializer(many=True)


class StatusBoardRowSerializer(serializers.Serializer):
    employee_id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()
    status = serializers.ChoiceField(choices=TimeEntryStatus.choices)
    check_in = serializers.CharField(allow_null=True)
    check_out = serializers.CharField(allow_null=True)
    total_hours = serializers.DecimalField(
        max_digits=5, decimal_places=2, coerce_to_string=False, allow_null=True
    )


class ExportQuerySerializer(serializers.Serializer):
    period = serializers.ChoiceField(
        choices=DateRangePreset.choices,
        required=False,
        default=DateRangePreset.THIS_MONTH,
    )
    employee_id = serializers.IntegerField(min_value=1, required=False)
