from datetime import time
from decimal import Decimal

import pytest

from attendance.hours import (
    calculate_total_hours,
    format_clock_time,
    parse_clock_time,
)
from core.api.exceptions import DomainValidationError


@pytest.mark.parametrize(
    ("check_in", "check_out", "expected"),
    [
        ("08:00", "17:00", Decimal("9.00")),
        ("09:15", "17:45", Decimal("8.50")),
        ("09:00", "09:20", Decimal("0.33")),
        ("09:00", "09:10", Decimal("0.17")),
        ("00:00", "23:59", Decimal("23.98")),
        ("12:00", "12:00", Decimal("0.00")),
    ],
)
def test_calculate_total_hours_rounds_to_two_places(check_in, check_out, expected):
    assert calculate_total_hours(check_in, check_out) == expected


def test_calculate_total_hours_is_negative_when_check_out_precedes_check_in():
    assert calculate_total_hours("17:00", "08:00") == Decimal("-9.00")


def test_calculate_total_hours_accepts_time_objects():
    assert calculate_total_hours(time(8, 30), time(12, 0)) == Decimal("3.50")


@pytest.mark.parametrize("value", ["", "8:00", "24:00", "12:60", "ab:cd", "12:00:00"])
def test_parse_clock_time_rejects_malformed_values(value):
    with pytest.raises(DomainValidationError):
        parse_clock_time(value)


def test_parse_clock_time_returns_minutes_since_midnight():
    assert parse_clock_time("00:00") == 0
    assert parse_clock_time("23:59") == 23 * 60 + 59


def test_format_clock_time_drops_seconds():
    assert format_clock_time(time(7, 5, 42)) == "07:05"
    assert format_clock_time(None) is None
