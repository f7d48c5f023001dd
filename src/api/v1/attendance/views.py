from django.http import HttpResponse
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from account.models import User
from api.v1.attendance.filters import TimeEntryFilterSet
from api.v1.attendance.renderers import XLSXRenderer
from api.v1.attendance.serializers import (
    AttendanceActionInputSerializer,
    ExportQuerySerializer,
    StatusBoardRowSerializer,
    SummaryQuerySerializer,
    SummarySerializer,
    TimeEntrySerializer,
    TimesheetQuerySerializer,
    TimesheetSerializer,
)
from attendance.services import AttendanceService
from attendance.services_export import XLSX_CONTENT_TYPE, AttendanceExportService
from attendance.services_reports import AttendanceReportService
from core.api.permissions import IsEmployee, IsEmployer
from core.api.views import BaseAPIView, ListAPIView


class AttendanceActionMixin:
    def _location_payload(self, request):
        serializer = AttendanceActionInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data.get("location")


@extend_schema(
    tags=["Attendance"],
    summary="List time entries",
    description=(
        "Employees see their own entries; employers see entries of their "
        "employees. Supports filters by employee, date range (`start`/`end`, "
        "inclusive), `period` preset, status and ordering."
    ),
)
class TimeEntryListAPIView(ListAPIView):
    permission_classes = (IsAuthenticated,)
    serializer_class = TimeEntrySerializer
    filter_backends = (DjangoFilterBackend,)
    filterset_class = TimeEntryFilterSet

    def get_queryset(self):
        return AttendanceService.visible_entries(self.request.user).order_by(
            "-work_date", "employee__name", "id"
        )


@extend_schema(
    tags=["Attendance"],
    summary="Get today's time entry",
    description="Returns the employee's entry for the current business date, or null.",
    responses={200: TimeEntrySerializer},
)
class TodayTimeEntryAPIView(BaseAPIView):
    permission_classes = (IsAuthenticated, IsEmployee)
    serializer_class = TimeEntrySerializer

    def get(self, request, *args, **kwargs):
        entry = AttendanceService.today_entry(employee=request.user)
        data = self.get_serializer(entry).data if entry else None
        return Response(data, status=status.HTTP_200_OK)


@extend_schema(
    tags=["Attendance"],
    summary="Check in for today",
    description=(
        "Records the current business time as today's check-in. A repeated "
        "check-in overwrites the previous one and clears check-out and hours. "
        "Location is optional; a configured fallback is stored when omitted."
    ),
    request=AttendanceActionInputSerializer,
    responses={201: TimeEntrySerializer, 200: TimeEntrySerializer},
)
class AttendanceCheckInAPIView(AttendanceActionMixin, BaseAPIView):
    permission_classes = (IsAuthenticated, IsEmployee)
    serializer_class = AttendanceActionInputSerializer

    def post(self, request, *args, **kwargs):
        entry, created = AttendanceService.check_in(
            employee=request.user,
            location=self._location_payload(request),
        )
        return Response(
            TimeEntrySerializer(entry).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


@extend_schema(
    tags=["Attendance"],
    summary="Check out for today",
    description=(
        "Records the current business time as today's check-out and computes "
        "total hours. Fails with 404 when there is no check-in for today."
    ),
    request=AttendanceActionInputSerializer,
    responses={
        200: TimeEntrySerializer,
        404: OpenApiResponse(description="No check-in for today."),
    },
)
class AttendanceCheckOutAPIView(AttendanceActionMixin, BaseAPIView):
    permission_classes = (IsAuthenticated, IsEmployee)
    serializer_class = AttendanceActionInputSerializer

    def post(self, request, *args, **kwargs):
        entry = AttendanceService.check_out(
            employee=request.user,
            location=self._location_payload(request),
        )
        return Response(TimeEntrySerializer(entry).data, status=status.HTTP_200_OK)


@extend_schema(
    tags=["Attendance / Reports"],
    summary="Aggregate hours for a period",
    description=(
        "Returns total hours, distinct working days, active employees and the "
        "average hours per working day for the selected period. Employers may "
        "narrow to one employee with `employee_id`."
    ),
    parameters=[SummaryQuerySerializer],
    responses={200: SummarySerializer},
)
class AttendanceSummaryAPIView(BaseAPIView):
    permission_classes = (IsAuthenticated,)
    serializer_class = SummarySerializer

    def get(self, request, *args, **kwargs):
        query = SummaryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        period = query.validated_data["period"]
        employee_id = query.validated_data.get("employee_id")

        if employee_id is not None:
            AttendanceService.resolve_visible_employee(request.user, employee_id)

        date_range = AttendanceReportService.resolve_date_range(
            period, today=AttendanceService.business_date()
        )
        entries = AttendanceService.visible_entries(request.user).in_range(
            start=date_range.start, end=date_range.end
        )
        summary = AttendanceReportService.summarize(
            entries, date_range=date_range, employee_id=employee_id
        )
        payload = {"period": period, **date_range.as_dict(), **summary.as_dict()}
        return Response(self.get_serializer(payload).data, status=status.HTTP_200_OK)


@extend_schema(
    tags=["Attendance / Reports"],
    summary="Monthly timesheet",
    description=(
        "Returns one employee's entries for a month (`YYYY-MM`, defaults to the "
        "current month) with worked/partial days, averages and projected "
        "weekly hours. Employers must pass `employee_id`."
    ),
    parameters=[TimesheetQuerySerializer],
    responses={200: TimesheetSerializer},
)
class AttendanceTimesheetAPIView(BaseAPIView):
    permission_classes = (IsAuthenticated,)
    serializer_class = TimesheetSerializer

    def get(self, request, *args, **kwargs):
        query = TimesheetQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        employee_id = query.validated_data.get("employee_id")
        if employee_id is None:
            if not request.user.is_employee:
                raise ValidationError({"employee_id": "employee_id is required."})
            employee = request.user
        else:
            employee = AttendanceService.resolve_visible_employee(
                request.user, employee_id
            )

        month_token = query.validated_data.get("month")
        if month_token:
            month_start = AttendanceReportService.parse_month_token(month_token)
        else:
            month_start = AttendanceService.business_date().replace(day=1)

        month_range = AttendanceReportService.month_range(month_start)
        entries = list(
            AttendanceService.visible_entries(request.user)
            .for_employee(employee_id=employee.pk)
            .in_range(start=month_range.start, end=month_range.end)
            .order_by("work_date", "id")
        )
        stats = AttendanceReportService.monthly_timesheet(
            entries, month_start=month_start
        )
        payload = {
            "employee": {
                "id": employee.pk,
                "name": employee.name,
                "email": employee.email,
            },
            "stats": stats.as_dict(),
            "entries": entries,
        }
        return Response(self.get_serializer(payload).data, status=status.HTTP_200_OK)


@extend_schema(
    tags=["Attendance / Reports"],
    summary="Today's status board",
    description=(
        "Lists every employee visible to the employer with today's status "
        "(`absent`, `working`, `finished`) and clock times."
    ),
    responses={200: StatusBoardRowSerializer(many=True)},
)
class AttendanceStatusBoardAPIView(BaseAPIView):
    permission_classes = (IsAuthenticated, IsEmployer)
    serializer_class = StatusBoardRowSerializer

    def get(self, request, *args, **kwargs):
        board = AttendanceReportService.status_board(
            employees=User.objects.employees_for(request.user),
            today=AttendanceService.business_date(),
        )
        serializer = self.get_serializer(board, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)


@extend_schema(
    tags=["Attendance / Reports"],
    summary="Export time entries workbook",
    description=(
        "Downloads an XLSX workbook with the period's time entries and a "
        "summary sheet."
    ),
    parameters=[ExportQuerySerializer],
    responses={(200, XLSX_CONTENT_TYPE): OpenApiResponse(description="XLSX file")},
)
class AttendanceExportAPIView(APIView):
    permission_classes = (IsAuthenticated, IsEmployer)
    renderer_classes = (JSONRenderer, XLSXRenderer)

    def get(self, request, *args, **kwargs):
        query = ExportQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        employee_id = query.validated_data.get("employee_id")

        date_range = AttendanceReportService.resolve_date_range(
            query.validated_data["period"],
            today=AttendanceService.business_date(),
        )
        entries = (
            AttendanceService.visible_entries(request.user)
            .in_range(start=date_range.start, end=date_range.end)
            .order_by("work_date", "employee__name", "id")
        )
        if employee_id is not None:
            employee = AttendanceService.resolve_visible_employee(
                request.user, employee_id
            )
            entries = entries.for_employee(employee_id=employee.pk)

        workbook_bytes = AttendanceExportService.export_workbook_bytes(
            entries=entries, date_range=date_range
        )
        response = HttpResponse(workbook_bytes, content_type=XLSX_CONTENT_TYPE)
        response["Content-Disposition"] = (
            f'attachment; filename="{AttendanceExportService.export_filename(date_range)}"'
        )
        return response
