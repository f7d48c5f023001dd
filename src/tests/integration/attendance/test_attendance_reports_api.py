from datetime import date, time
from decimal import Decimal
from io import BytesIO

import pytest
from openpyxl import load_workbook

from attendance.models import TimeEntry
from attendance.services_export import XLSX_CONTENT_TYPE
from core.utils.constants import TimeEntryStatus

pytestmark = pytest.mark.django_db

SUMMARY_URL = "/api/v1/attendance/summary/"
TIMESHEET_URL = "/api/v1/attendance/timesheet/"
STATUS_BOARD_URL = "/api/v1/attendance/status-board/"
EXPORT_URL = "/api/v1/attendance/export/"


def _entry(employee, work_date, check_in=None, check_out=None, total_hours=None):
    return TimeEntry.objects.create(
        employee=employee,
        work_date=work_date,
        check_in=check_in,
        check_out=check_out,
        total_hours=total_hours,
    )


@pytest.fixture
def report_context(
    authed_client_factory, employer_factory, employee_factory, company_factory
):
    acme = company_factory(name="Acme")
    employer = employer_factory(company=acme)
    ana = employee_factory(name="Ana", company=acme)
    bia = employee_factory(name="Bia", company=acme)
    outsider = employee_factory(name="Outsider", company=company_factory())

    _entry(ana, date(2024, 3, 4), time(9, 0), time(17, 0), Decimal("8.00"))
    _entry(ana, date(2024, 3, 5), time(9, 0), time(16, 30), Decimal("7.50"))
    _entry(bia, date(2024, 3, 5), time(10, 0), time(14, 0), Decimal("4.00"))
    _entry(ana, date(2024, 3, 11), time(9, 0))
    _entry(outsider, date(2024, 3, 5), time(9, 0), time(18, 0), Decimal("9.00"))
    _entry(ana, date(2024, 2, 28), time(9, 0), time(12, 0), Decimal("3.00"))

    return {
        "employer": employer,
        "ana": ana,
        "bia": bia,
        "outsider": outsider,
        "client": authed_client_factory(employer),
        "ana_client": authed_client_factory(ana),
    }


def test_summary_for_employer_this_month(report_context, clock):
    clock("2024-03-11 12:00")

    resp = report_context["client"].get(SUMMARY_URL, {"period": "this-month"})

    assert resp.status_code == 200
    payload = resp.data["data"]
    assert payload["start"] == "2024-03-01"
    assert payload["end"] == "2024-04-01"
    assert payload["total_hours"] == Decimal("19.50")
    assert payload["working_days"] == 3
    assert payload["active_employees"] == 2
    assert payload["average_hours"] == Decimal("6.50")


def test_summary_filtered_by_employee(report_context, clock):
    clock("2024-03-11 12:00")

    resp = report_context["client"].get(
        SUMMARY_URL,
        {"period": "this-month", "employee_id": report_context["bia"].id},
    )

    payload = resp.data["data"]
    assert payload["total_hours"] == Decimal("4.00")
    assert payload["working_days"] == 1
    assert payload["active_employees"] == 1


def test_summary_for_employee_is_own_only(report_context, clock):
    clock("2024-03-11 12:00")

    resp = report_context["ana_client"].get(SUMMARY_URL, {"period": "all"})

    payload = resp.data["data"]
    assert payload["start"] is None
    assert payload["total_hours"] == Decimal("18.50")
    assert payload["working_days"] == 4
    assert payload["active_employees"] == 1


def test_summary_hides_employees_of_other_companies(report_context, clock):
    clock("2024-03-11 12:00")

    resp = report_context["client"].get(
        SUMMARY_URL, {"employee_id": report_context["outsider"].id}
    )

    assert resp.status_code == 404


def test_summary_with_empty_period_returns_zeros(report_context, clock):
    clock("2024-06-15 12:00")

    resp = report_context["client"].get(SUMMARY_URL, {"period": "today"})

    payload = resp.data["data"]
    assert payload["total_hours"] == Decimal("0.00")
    assert payload["working_days"] == 0
    assert payload["average_hours"] == Decimal("0.00")


def test_summary_rejects_unknown_period(report_context):
    resp = report_context["client"].get(SUMMARY_URL, {"period": "decade"})

    assert resp.status_code == 400
    assert "period" in resp.data["message"]


def test_timesheet_for_employee(report_context, clock):
    clock("2024-03-11 12:00")

    resp = report_context["ana_client"].get(TIMESHEET_URL, {"month": "2024-03"})

    assert resp.status_code == 200
    payload = resp.data["data"]
    assert payload["employee"]["id"] == report_context["ana"].id
    assert [row["work_date"] for row in payload["entries"]] == [
        "2024-03-04",
        "2024-03-05",
        "2024-03-11",
    ]
    stats = payload["stats"]
    assert stats["month"] == "2024-03"
    assert stats["total_hours"] == Decimal("15.50")
    assert stats["worked_days"] == 2
    assert stats["partial_days"] == 1
    assert stats["average_hours"] == Decimal("7.75")
    assert stats["projected_weekly_hours"] == Decimal("38.75")


def test_timesheet_defaults_to_current_month(report_context, clock):
    clock("2024-02-29 12:00")

    resp = report_context["ana_client"].get(TIMESHEET_URL)

    assert resp.data["data"]["stats"]["month"] == "2024-02"
    assert resp.data["data"]["stats"]["total_entries"] == 1


def test_timesheet_for_employer_requires_employee_id(report_context):
    client = report_context["client"]

    missing = client.get(TIMESHEET_URL, {"month": "2024-03"})
    ok = client.get(
        TIMESHEET_URL, {"month": "2024-03", "employee_id": report_context["bia"].id}
    )

    assert missing.status_code == 400
    assert ok.status_code == 200
    assert ok.data["data"]["stats"]["total_hours"] == Decimal("4.00")


def test_timesheet_rejects_bad_month(report_context):
    resp = report_context["ana_client"].get(TIMESHEET_URL, {"month": "2024-13"})

    assert resp.status_code == 400
    assert "YYYY-MM" in resp.data["message"]


def test_status_board(report_context, clock, employee_factory):
    clock("2024-03-05 15:00")
    carla = employee_factory(name="Carla", company=report_context["employer"].company)
    _entry(carla, date(2024, 3, 5), time(13, 0))

    resp = report_context["client"].get(STATUS_BOARD_URL)

    assert resp.status_code == 200
    board = {row["name"]: row for row in resp.data["data"]}
    assert set(board) == {"Ana", "Bia", "Carla"}
    assert board["Ana"]["status"] == TimeEntryStatus.FINISHED
    assert board["Ana"]["check_out"] == "16:30"
    assert board["Carla"]["status"] == TimeEntryStatus.WORKING
    assert board["Carla"]["total_hours"] is None


def test_status_board_marks_absent_employees(report_context, clock):
    clock("2024-03-06 09:00")

    resp = report_context["client"].get(STATUS_BOARD_URL)

    assert {row["status"] for row in resp.data["data"]} == {TimeEntryStatus.ABSENT}


def test_status_board_is_employer_only(report_context):
    resp = report_context["ana_client"].get(STATUS_BOARD_URL)

    assert resp.status_code == 403


def test_export_workbook(report_context, clock):
    clock("2024-03-11 12:00")

    resp = report_context["client"].get(EXPORT_URL, {"period": "this-month"})

    assert resp.status_code == 200
    assert resp["Content-Type"] == XLSX_CONTENT_TYPE
    assert "time-entries_2024-03-01_2024-04-01.xlsx" in resp["Content-Disposition"]

    workbook = load_workbook(BytesIO(resp.content), data_only=True)
    assert workbook.sheetnames == ["Time Entries", "Summary"]

    rows = list(workbook["Time Entries"].iter_rows(values_only=True))
    assert rows[0][:3] == ("employee", "email", "work_date")
    assert len(rows) == 1 + 4
    assert {row[0] for row in rows[1:]} == {"Ana", "Bia"}

    summary = dict(workbook["Summary"].iter_rows(min_row=2, values_only=True))
    assert summary["total_hours"] == pytest.approx(19.5)
    assert summary["working_days"] == 3


def test_export_is_employer_only(report_context):
    resp = report_context["ana_client"].get(EXPORT_URL)

    assert resp.status_code == 403


@pytest.mark.parametrize(
    ("client_key", "params", "expected_status"),
    [
        ("client", {"period": "bogus"}, 400),
        ("client", {"employee_id": 999999}, 404),
        ("ana_client", {}, 403),
    ],
)
def test_export_errors_keep_json_envelope_when_xlsx_is_requested(
    report_context, client_key, params, expected_status
):
    resp = report_context[client_key].get(
        EXPORT_URL, params, HTTP_ACCEPT=XLSX_CONTENT_TYPE
    )

    assert resp.status_code == expected_status
    assert resp["Content-Type"].startswith("application/json")
    body = resp.json()
    assert body["success"] is False
    assert body["message"]


def test_employer_without_company_cannot_read_other_companies(
    report_context, authed_client_factory, employer_factory, clock
):
    clock("2024-03-11 12:00")
    client = authed_client_factory(employer_factory())

    entries = client.get("/api/v1/attendance/entries/")
    summary = client.get(SUMMARY_URL, {"period": "all"})
    board = client.get(STATUS_BOARD_URL)
    timesheet = client.get(TIMESHEET_URL, {"employee_id": report_context["ana"].id})

    assert entries.data["count"] == 0
    assert summary.data["data"]["total_hours"] == Decimal("0.00")
    assert board.data["data"] == []
    assert timesheet.status_code == 404
