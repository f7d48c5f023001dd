"""Clock-time parsing and worked-hours arithmetic.

Times are wall-clock ``HH:MM`` values on a 24-hour clock, both on the same
calendar day. Nothing here touches the database or the current time.
"""

from __future__ import annotations

import re
from datetime import time
from decimal import ROUND_HALF_UP, Decimal

from core.api.exceptions import DomainValidationError

CLOCK_TIME_PATTERN = re.compile(r"^(?P<hour>[01]\d|2[0-3]):(?P<minute>[0-5]\d)$")
HOURS_QUANTUM = Decimal("0.01")
MINUTES_PER_HOUR = Decimal(60)


def parse_clock_time(value: str | time) -> int:
    """Return minutes since midnight for an ``HH:MM`` string or a ``time``."""
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    match = CLOCK_TIME_PATTERN.fullmatch(str(value or "").strip())
    if not match:
        raise DomainValidationError(
            f"Invalid clock time {value!r}: expected HH:MM (00:00-23:59)."
        )
    return int(match.group("hour")) * 60 + int(match.group("minute"))


def format_clock_time(value: time | None) -> str | None:
    if value is None:
        return None
    return value.strftime("%H:%M")


def calculate_total_hours(check_in: str | time, check_out: str | time) -> Decimal:
    """
    Elapsed hours between two same-day clock times, rounded to 2 places.

    A check-out earlier than the check-in gives a negative result; callers
    decide what to do with it.
    """
    elapsed_minutes = parse_clock_time(check_out) - parse_clock_time(check_in)
    return (Decimal(elapsed_minutes) / MINUTES_PER_HOUR).quantize(
        HOURS_QUANTUM, rounding=ROUND_HALF_UP
    )
