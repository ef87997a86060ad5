from datetime import datetime, timezone

from aurevo.models import HealthResponse, ApiHealthResponse, AuthStatusResponse


def test_health_defaults_to_ok():
    assert HealthResponse().model_dump() == {"ok": True}


def test_api_health_serializes_time():
    response = ApiHealthResponse(
        status="ok", time=datetime(2024, 5, 1, tzinfo=timezone.utc), app="aurevo"
    )
    data = response.model_dump(mode="json")
    assert data["time"].startswith("2024-05-01T00:00:00")
    assert data["app"] == "aurevo"


def test_auth_status_field_name():
    assert AuthStatusResponse(hasAuth=False).model_dump() == {"hasAuth": False}
