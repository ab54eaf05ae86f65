"""Tests for /api/v1/animations routes."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from animgen.core.config import settings
from animgen.engines.animation import get_capability_table

COMPILE_URL = f"{settings.API_V1_STR}/animations/compile"

FADE_IN = """
from motion import AbsoluteFill, interpolate, use_current_frame

def FadeIn():
    frame = use_current_frame()
    return AbsoluteFill(style={"opacity": interpolate(frame, [0, 30], [0, 1])})
"""


def test_compile_success_without_preview(client: TestClient) -> None:
    r = client.post(COMPILE_URL, json={"code": FADE_IN})
    assert r.status_code == 200
    assert r.json() == {"success": True, "error": None, "error_kind": None, "preview": None}


def test_compile_with_preview(client: TestClient) -> None:
    r = client.post(COMPILE_URL, json={"code": FADE_IN, "preview_frame": 15})
    assert r.status_code == 200
    data = r.json()
    assert data["success"] is True
    assert data["preview"]["type"] == "AbsoluteFill"
    assert data["preview"]["props"]["style"]["opacity"] == 0.5


def test_preview_uses_configured_video(client: TestClient) -> None:
    code = "def S():\n    return AbsoluteFill(name=str(use_video_config().fps))\n"
    r = client.post(COMPILE_URL, json={"code": code, "preview_frame": 0})
    assert r.json()["preview"]["props"]["name"] == str(settings.VIDEO_FPS)


def test_compile_empty_code(client: TestClient) -> None:
    r = client.post(COMPILE_URL, json={"code": "   "})
    assert r.status_code == 200
    data = r.json()
    assert data["success"] is False
    assert data["error"] == "No code provided"
    assert data["error_kind"] == "EMPTY_INPUT"


def test_compile_shape_error(client: TestClient) -> None:
    r = client.post(COMPILE_URL, json={"code": "def X():\n    return 42\n"})
    data = r.json()
    assert data["success"] is False
    assert data["error"] == "Code must be a function that returns a React component"
    assert data["error_kind"] == "SHAPE"


def test_compile_transform_error(client: TestClient) -> None:
    r = client.post(COMPILE_URL, json={"code": "def X():\n    return (\n"})
    data = r.json()
    assert data["success"] is False
    assert data["error_kind"] == "TRANSFORM"


def test_render_failure_reported(client: TestClient) -> None:
    r = client.post(
        COMPILE_URL,
        json={"code": "def S():\n    return Img(src='')\n", "preview_frame": 0},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["success"] is False
    assert data["error_kind"] == "RENDER"
    assert data["error"] == "Render failed: Img requires a non-empty src"


def test_compile_missing_code_returns_422(client: TestClient) -> None:
    r = client.post(COMPILE_URL, json={})
    assert r.status_code == 422
    assert "code" in r.json()["detail"]


def test_negative_preview_frame_returns_422(client: TestClient) -> None:
    r = client.post(COMPILE_URL, json={"code": FADE_IN, "preview_frame": -1})
    assert r.status_code == 422
    assert "preview_frame" in r.json()["detail"]


def test_unhandled_error_returns_500() -> None:
    from animgen.main import app

    with patch(
        "animgen.api.routes.animations.compile_code", side_effect=RuntimeError("boom")
    ):
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.post(COMPILE_URL, json={"code": FADE_IN})
    assert r.status_code == 500
    assert r.json()["detail"].startswith("Internal server error")


def test_list_capabilities(client: TestClient) -> None:
    r = client.get(f"{settings.API_V1_STR}/animations/capabilities")
    assert r.status_code == 200
    data = r.json()
    assert data["version"] == "2"
    assert data["names"] == list(get_capability_table().names())
