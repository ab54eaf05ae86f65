"""Tests for /api/v1/utils routes (liveness and health-check)."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from animgen.core.config import settings


def test_liveness_returns_200(client: TestClient) -> None:
    r = client.get(f"{settings.API_V1_STR}/utils/liveness/")
    assert r.status_code == 200
    assert r.json() is True


def test_health_check_returns_200_when_ready(client: TestClient) -> None:
    """GET /health-check/ returns 200 with true when the smoke scene compiles and renders."""
    r = client.get(f"{settings.API_V1_STR}/utils/health-check/")
    assert r.status_code == 200
    assert r.json() is True


def test_health_check_returns_503_when_readiness_fails(client: TestClient) -> None:
    """GET /health-check/ returns 503 with envelope when readiness_check fails."""
    with patch(
        "animgen.api.routes.utils.readiness_check", return_value=(False, ["smoke_compile"])
    ):
        r = client.get(f"{settings.API_V1_STR}/utils/health-check/")
    assert r.status_code == 503
    data = r.json()
    assert data.get("success") is False
    assert "smoke_compile" in data["data"]


def test_liveness_returns_503_when_unhealthy(client: TestClient) -> None:
    with patch("animgen.api.routes.utils.liveness_check", return_value=(False, ["loop"])):
        r = client.get(f"{settings.API_V1_STR}/utils/liveness/")
    assert r.status_code == 503
    assert r.json()["message"] == "Process unhealthy"
