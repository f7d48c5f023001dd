import pytest

from attendance.services import GeoLocation
from core.api.exceptions import DomainValidationError


def test_missing_payload_uses_configured_fallback(settings):
    settings.ATTENDANCE_FALLBACK_LATITUDE = 1.5
    settings.ATTENDANCE_FALLBACK_LONGITUDE = 2.5
    settings.ATTENDANCE_FALLBACK_ADDRESS = "Head Office"

    assert GeoLocation.from_payload(None) == GeoLocation(1.5, 2.5, "Head Office")


@pytest.mark.parametrize(
    "payload",
    [{}, {"latitude": None, "longitude": None}, {"address": "Somewhere"}],
)
def test_payload_without_coordinates_falls_back(payload):
    assert GeoLocation.from_payload(payload) == GeoLocation.fallback()


@pytest.mark.parametrize(
    "payload",
    [{"latitude": -10.0}, {"longitude": -10.0}, {"latitude": None, "longitude": 3}],
)
def test_single_coordinate_is_rejected(payload):
    with pytest.raises(DomainValidationError):
        GeoLocation.from_payload(payload)


def test_coordinates_without_address_get_current_location_label(settings):
    settings.ATTENDANCE_CURRENT_LOCATION_LABEL = "Current location"

    location = GeoLocation.from_payload(
        {"latitude": -22.9068, "longitude": -43.1729, "address": "   "}
    )

    assert location == GeoLocation(-22.9068, -43.1729, "Current location")
    assert location.address != GeoLocation.fallback().address


def test_coordinates_with_address_are_kept():
    location = GeoLocation.from_payload(
        {"latitude": -22.9068, "longitude": -43.1729, "address": "Rio de Janeiro, RJ"}
    )

    assert location == GeoLocation(-22.9068, -43.1729, "Rio de Janeiro, RJ")
