import logging
import traceback
from collections.abc import Mapping


class RequestContextFilter(logging.Filter):
    """
    Adds request/user/IP/path/method/request_id + traceback info to log records.
    """

    def filter(self, record):
        request = getattr(record, "request", None)

        if self._is_request_context(request):
            user = getattr(request, "user", None)
            record.user = getattr(user, "email", None) or "Anonymous"
            record.method = getattr(request, "method", "-")
            record.path = getattr(request, "path", "-")
            meta = getattr(request, "META", {})
            record.ip = (
                meta.get("REMOTE_ADDR", "-") if isinstance(meta, Mapping) else "-"
            )
            record.request_id = getattr(request, "request_id", "-")
        else:
            record.user = "Unknown"
            record.method = "-"
            record.path = "-"
            record.ip = "-"
            record.request_id = "-"

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            record.traceback = "".join(
                traceback.format_exception(exc_type, exc_value, exc_tb)
            )
        else:
            record.traceback = "No traceback"

        return True

    @staticmethod
    def _is_request_context(request) -> bool:
        """
        Guard against non-HTTP objects (for example socket instances in devserver logs).
        """
        return (
            request is not None
            and hasattr(request, "method")
            and hasattr(request, "path")
            and hasattr(request, "META")
        )
