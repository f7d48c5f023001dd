import pytest

pytestmark = pytest.mark.django_db

HEALTH_URL = "/api/v1/misc/health/"
SCHEMA_URL = "/api/schema/"


def test_health_endpoint_is_public(api_client):
    resp = api_client.get(HEALTH_URL)

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_request_id_is_generated_when_missing(api_client):
    resp = api_client.get(HEALTH_URL)

    assert len(resp.headers["X-Request-ID"]) == 32


def test_request_id_is_echoed(api_client):
    resp = api_client.get(HEALTH_URL, HTTP_X_REQUEST_ID="timesheet-check-1")

    assert resp.headers["X-Request-ID"] == "timesheet-check-1"


def test_request_id_with_unsafe_characters_is_replaced(api_client):
    resp = api_client.get(HEALTH_URL, HTTP_X_REQUEST_ID="bad id<script>")

    assert resp.headers["X-Request-ID"] != "bad id<script>"


def test_schema_lists_attendance_endpoints(api_client):
    resp = api_client.get(SCHEMA_URL, {"format": "json"})

    assert resp.status_code == 200
    paths = resp.json()["paths"]
    assert "/api/v1/attendance/check-in/" in paths
    assert "/api/v1/attendance/summary/" in paths
