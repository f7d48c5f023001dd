from django.urls import path

from api.v1.attendance.views import (
    AttendanceCheckInAPIView,
    AttendanceCheckOutAPIView,
    AttendanceExportAPIView,
    AttendanceStatusBoardAPIView,
    AttendanceSummaryAPIView,
    AttendanceTimesheetAPIView,
    TimeEntryListAPIView,
    TodayTimeEntryAPIView,
)

app_name = "attendance"

urlpatterns = [
    path("entries/", TimeEntryListAPIView.as_view(), name="entries"),
    path("entries/today/", TodayTimeEntryAPIView.as_view(), name="entries-today"),
    path("check-in/", AttendanceCheckInAPIView.as_view(), name="check-in"),
    path("check-out/", AttendanceCheckOutAPIView.as_view(), name="check-out"),
    path("summary/", AttendanceSummaryAPIView.as_view(), name="summary"),
    path("timesheet/", AttendanceTimesheetAPIView.as_view(), name="timesheet"),
    path(
        "status-board/", AttendanceStatusBoardAPIView.as_view(), name="status-board"
    ),
    path("export/", AttendanceExportAPIView.as_view(), name="export"),
]
