from __future__ import annotations

from io import BytesIO

from attendance.hours import format_clock_time
from attendance.services_reports import AttendanceReportService, DateRange

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class AttendanceExportService:
    ENTRIES_SHEET = "Time Entries"
    SUMMARY_SHEET = "Summary"

    ENTRY_HEADERS = (
        "employee",
        "email",
        "work_date",
        "check_in",
        "check_out",
        "total_hours",
        "status",
        "address",
    )

    @classmethod
    def export_filename(cls, date_range: DateRange) -> str:
        start = date_range.start.isoformat() if date_range.start else "all"
        end = date_range.end.isoformat() if date_range.end else "now"
        return f"time-entries_{start}_{end}.xlsx"

    @classmethod
    def export_workbook_bytes(cls, *, entries, date_range: DateRange) -> bytes:
        from openpyxl import Workbook

        entries = list(entries)

        workbook = Workbook()
        entries_sheet = workbook.active
        entries_sheet.title = cls.ENTRIES_SHEET
        entries_sheet.append(list(cls.ENTRY_HEADERS))
        for entry in entries:
            entries_sheet.append(
                [
                    entry.employee.name,
                    entry.employee.email,
                    entry.work_date.isoformat(),
                    format_clock_time(entry.check_in) or "",
                    format_clock_time(entry.check_out) or "",
                    float(entry.total_hours) if entry.total_hours is not None else None,
                    entry.status,
                    entry.address,
                ]
            )

        summary = AttendanceReportService.summarize(entries, date_range=date_range)
        summary_sheet = workbook.create_sheet(title=cls.SUMMARY_SHEET)
        summary_sheet.append(["metric", "value"])
        summary_sheet.append(["period_start", date_range.as_dict()["start"] or ""])
        summary_sheet.append(["period_end", date_range.as_dict()["end"] or ""])
        summary_sheet.append(["total_hours", float(summary.total_hours)])
        summary_sheet.append(["working_days", summary.working_days])
        summary_sheet.append(["active_employees", summary.active_employees])
        summary_sheet.append(["average_hours", float(summary.average_hours)])

        cls._autosize_columns(entries_sheet)
        cls._autosize_columns(summary_sheet)

        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    @staticmethod
    def _autosize_columns(worksheet) -> None:
        for column in worksheet.columns:
            values = [str(cell.value) for cell in column if cell.value is not None]
            max_length = max((len(value) for value in values), default=0)
            column_letter = column[0].column_letter
            worksheet.column_dimensions[column_letter].width = min(
                max(max_length + 2, 12), 60
            )
