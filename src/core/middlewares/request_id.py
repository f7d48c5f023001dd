from __future__ import annotations

import re
import uuid


class RequestIDMiddleware:
    """
    Ensures every request has a correlation ID and echoes it in response headers.
    """

    REQUEST_META_HEADER = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-ID"
    REQUEST_ATTR = "request_id"
    MAX_LENGTH = 128
    ALLOWED_PATTERN = re.compile(r"^[A-Za-z0-9._:\-]+$")

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = self._normalize_request_id(
            request.META.get(self.REQUEST_META_HEADER)
        )
        setattr(request, self.REQUEST_ATTR, request_id)

        response = self.get_response(request)
        response[self.RESPONSE_HEADER] = request_id
        return response

    @classmethod
    def _normalize_request_id(cls, raw_value) -> str:
        if isinstance(raw_value, str):
            value = raw_value.strip()[: cls.MAX_LENGTH]
            if value and cls.ALLOWED_PATTERN.fullmatch(value):
                return value
        return uuid.uuid4().hex
