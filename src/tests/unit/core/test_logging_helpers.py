import logging
import sys
from types import SimpleNamespace

from core.utils.logging import RequestContextFilter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="attendance",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="boom <b>%s</b>",
        args=("x",),
        exc_info=extra.pop("exc_info", None),
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_request_context_filter_reads_request_attributes():
    request = SimpleNamespace(
        user=SimpleNamespace(email="ana@example.com"),
        method="POST",
        path="/api/v1/attendance/check-in/",
        META={"REMOTE_ADDR": "10.0.0.1"},
        request_id="req-1",
    )
    record = _record(request=request)

    assert RequestContextFilter().filter(record) is True
    assert record.user == "ana@example.com"
    assert record.method == "POST"
    assert record.ip == "10.0.0.1"
    assert record.request_id == "req-1"
    assert record.traceback == "No traceback"


def test_request_context_filter_without_request():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record(exc_info=sys.exc_info())

    RequestContextFilter().filter(record)

    assert record.user == "Unknown"
    assert record.path == "-"
    assert "ValueError: bad" in record.traceback


def test_request_errors_are_logged_to_the_error_file_only(settings):
    request_logger = settings.LOGGING["loggers"]["django.request"]

    assert request_logger["handlers"] == ["error_file"]
    assert set(settings.LOGGING["formatters"]) == {"colored", "verbose"}
