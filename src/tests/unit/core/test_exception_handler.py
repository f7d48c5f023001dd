from django.db.models.deletion import ProtectedError
from rest_framework.exceptions import ValidationError
from rest_framework.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from core.api.exceptions import (
    DomainConflictError,
    DomainNotFoundError,
    DomainValidationError,
    custom_exception_handler,
)


def test_custom_exception_handler_returns_400_for_domain_validation_error():
    response = custom_exception_handler(DomainValidationError("broken rule"), {})

    assert response is not None
    assert response.status_code == HTTP_400_BAD_REQUEST
    assert response.data == {
        "success": False,
        "message": "broken rule",
        "error": "validation_error",
    }


def test_custom_exception_handler_returns_400_for_protected_error():
    protected_error = ProtectedError(
        "Cannot delete referenced object.",
        protected_objects=[],
    )

    response = custom_exception_handler(protected_error, {})

    assert response is not None
    assert response.status_code == HTTP_400_BAD_REQUEST
    assert response.data == {
        "success": False,
        "message": "Cannot delete referenced object.",
        "error": "protected_error",
    }


def test_custom_exception_handler_maps_not_found_and_conflict():
    not_found = custom_exception_handler(DomainNotFoundError("missing"), {})
    conflict = custom_exception_handler(DomainConflictError("taken"), {})

    assert not_found.status_code == HTTP_404_NOT_FOUND
    assert not_found.data["error"] == "not_found"
    assert conflict.status_code == HTTP_409_CONFLICT
    assert conflict.data == {
        "success": False,
        "message": "taken",
        "error": "conflict",
    }


def test_custom_exception_handler_flattens_serializer_errors():
    exc = ValidationError({"email": ["Enter a valid email address."]})

    response = custom_exception_handler(exc, {})

    assert response.status_code == HTTP_400_BAD_REQUEST
    assert response.data["success"] is False
    assert response.data["message"] == "email: Enter a valid email address."
