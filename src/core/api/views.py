from logging import getLogger

from rest_framework import generics, mixins, status
from rest_framework.response import Response

from core.api.serializers import SchemaFallbackSerializer
from core.utils.pagination import CustomPagination

logger = getLogger(__name__)


class PaginatedListMixin:
    pagination_class = CustomPagination

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())  # noqa
        page = self.paginate_queryset(queryset)  # noqa
        if page is not None:
            serializer = self.get_serializer(page, many=True)  # noqa
            return self.get_paginated_response(serializer.data)  # noqa

        serializer = self.get_serializer(queryset, many=True)  # noqa
        return Response(serializer.data)


class CustomResponseMixin:
    """
    Wraps API responses in a standard envelope.

    - For success:
        {"success": true, "message": <SUCCESS_MESSAGE>, "data": <response_data>}
    - For error:
        {"success": false, "message": <ERROR_MESSAGE>, "error": <error_data>}

    Errors raised inside DRF are already shaped by core.api.exceptions and
    pass through untouched. Binary responses (file downloads) are skipped.
    """

    SUCCESS_MESSAGE = "OK"
    ERROR_MESSAGE = "NOT OK"
    NO_BODY_STATUS_CODES = {
        status.HTTP_204_NO_CONTENT,
        status.HTTP_205_RESET_CONTENT,
        status.HTTP_304_NOT_MODIFIED,
    }

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)  # noqa

        if response.status_code in self.NO_BODY_STATUS_CODES:
            return response

        if not isinstance(response, Response):
            return response

        if self._is_structured_response(response):
            return response

        if response.status_code < 400:
            response = self._success_response(response=response)
        else:
            logger.warning(
                "Unstructured error response status=%s data=%s",
                response.status_code,
                response.data,
            )
            response = self._error_response(response=response)

        return response

    def _success_response(self, response: Response):
        response.data = {
            "success": True,
            "message": self.SUCCESS_MESSAGE,
            "data": response.data,
        }
        return response

    def _error_response(self, response: Response):
        response.data = {
            "success": False,
            "message": self.ERROR_MESSAGE,
            "error": response.data,
        }
        return response

    @staticmethod
    def _is_structured_response(response: Response) -> bool:
        return (
            isinstance(response.data, dict)
            and "success" in response.data
            and "message" in response.data
        )


class BaseAPIView(CustomResponseMixin, generics.GenericAPIView):
    serializer_class = SchemaFallbackSerializer


class ListAPIView(mixins.ListModelMixin, PaginatedListMixin, BaseAPIView):
    def get(self, request, *args, **kwargs):
        return self.list(request, *args, **kwargs)
