"""Integration tests for the REST API.

These tests drive editing sessions through FastAPI's TestClient, covering
session lifecycle, event batches, host effects and error responses.
"""

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from shelves.application.session import DividerSession
from shelves.web import create_app
from shelves.web.dependencies import SessionRegistry, get_session_registry

SHELF = {"width": 36, "height": 72, "depth": 12, "materialThickness": 0.75}


@pytest.fixture
def registry() -> SessionRegistry:
    return SessionRegistry()


@pytest.fixture
def client(registry: SessionRegistry) -> Iterator[TestClient]:
    app = create_app()
    app.dependency_overrides[get_session_registry] = lambda: registry
    with TestClient(app) as client:
        yield client


def _open(client: TestClient, **body: Any) -> dict[str, Any]:
    response = client.post("/api/v1/sessions", json={"shelf": SHELF, **body})
    assert response.status_code == 201
    return response.json()


def _send(client: TestClient, session_id: str, *events: dict[str, Any]) -> dict[str, Any]:
    response = client.post(
        f"/api/v1/sessions/{session_id}/events", json={"events": list(events)}
    )
    assert response.status_code == 200
    return response.json()


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_cors_preflight_without_credentials(self, client: TestClient) -> None:
        response = client.options(
            "/api/v1/sessions",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "access-control-allow-credentials" not in response.headers


class TestSessionLifecycle:
    """Tests for opening, reading and closing sessions."""

    def test_open_empty_session(self, client: TestClient, registry: SessionRegistry) -> None:
        data = _open(client)

        assert data["session_id"]
        assert data["snapshot"]["state"] == "normal"
        assert data["snapshot"]["horizontal_dividers"] == []
        assert data["effects"] == []
        assert len(registry) == 1

    def test_open_with_saved_layout(self, client: TestClient) -> None:
        data = _open(
            client,
            layout={"dividers": [{"id": "h1", "position": 20, "type": "horizontal"}]},
        )
        assert data["snapshot"]["horizontal_dividers"] == [
            {"id": "h1", "position": 20, "orientation": "horizontal"}
        ]

    def test_get_session(self, client: TestClient) -> None:
        session_id = _open(client)["session_id"]

        response = client.get(f"/api/v1/sessions/{session_id}")

        assert response.status_code == 200
        assert response.json()["session_id"] == session_id

    def test_close_session(self, client: TestClient, registry: SessionRegistry) -> None:
        session_id = _open(client)["session_id"]

        response = client.delete(f"/api/v1/sessions/{session_id}")

        assert response.status_code == 204
        assert len(registry) == 0
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404

    def test_unknown_session(self, client: TestClient) -> None:
        response = client.get("/api/v1/sessions/nope")

        assert response.status_code == 404
        assert response.json()["error_type"] == "not_found"

    def test_close_unknown_session(self, client: TestClient) -> None:
        assert client.delete("/api/v1/sessions/nope").status_code == 404

    def test_invalid_shelf_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/sessions",
            json={"shelf": {**SHELF, "materialThickness": 20}},
        )
        assert response.status_code == 422


class TestSessionRegistry:
    """Tests for the least-recently-used session cap."""

    def test_oldest_idle_session_is_evicted(self) -> None:
        registry = SessionRegistry(max_sessions=2)
        first = registry.open(DividerSession())
        second = registry.open(DividerSession())

        registry.get(first)
        third = registry.open(DividerSession())

        assert len(registry) == 2
        assert first in registry
        assert third in registry
        assert second not in registry

    def test_evicted_session_is_not_found(self, client: TestClient) -> None:
        capped = SessionRegistry(max_sessions=1)
        client.app.dependency_overrides[get_session_registry] = lambda: capped

        first = _open(client)["session_id"]
        _open(client)

        assert client.get(f"/api/v1/sessions/{first}").status_code == 404

    def test_rejects_empty_cap(self) -> None:
        with pytest.raises(ValueError, match="max_sessions"):
            SessionRegistry(max_sessions=0)


class TestEvents:
    """Tests for event batches."""

    def test_add_divider(self, client: TestClient) -> None:
        session_id = _open(client)["session_id"]

        data = _send(
            client,
            session_id,
            {"type": "MOUSE_MOVE", "x": 400, "y": 300, "positionY": 36, "positionX": 0},
            {"type": "CLICK_EMPTY_SPACE", "positionY": 36, "positionX": 0},
        )

        assert data["snapshot"]["horizontal_dividers"] == [
            {"id": "divider-1", "position": 36, "orientation": "horizontal"}
        ]
        assert data["effects"] == ["divider_committed"]

    def test_ghost_in_snapshot(self, client: TestClient) -> None:
        session_id = _open(client)["session_id"]

        data = _send(
            client,
            session_id,
            {"type": "MOUSE_MOVE", "x": 0, "y": 0, "positionY": 36, "positionX": 10},
        )

        ghost = data["snapshot"]["ghost_divider"]
        assert ghost["orientation"] == "vertical"
        assert ghost["addable"] is True

    def test_drag_reports_camera_effects(self, client: TestClient) -> None:
        session_id = _open(
            client,
            layout={"dividers": [{"id": "h1", "position": 20, "type": "horizontal"}]},
        )["session_id"]
        divider = {"id": "h1", "position": 20, "type": "horizontal"}

        dragging = _send(
            client,
            session_id,
            {"type": "CLICK_DIVIDER", "divider": divider},
            {"type": "MOUSE_DOWN", "x": 0, "y": 0},
            {"type": "MOUSE_MOVE", "x": 0, "y": 10, "positionY": 30, "positionX": 0},
        )
        assert dragging["snapshot"]["state"] == "dragging"
        assert dragging["snapshot"]["dragging"] is True
        assert dragging["effects"] == ["disable_camera_controls"]

        released = _send(client, session_id, {"type": "MOUSE_UP"})
        assert released["snapshot"]["state"] == "normal"
        assert released["effects"] == ["enable_camera_controls", "divider_moved"]

    def test_absorbed_events_leave_snapshot(self, client: TestClient) -> None:
        session_id = _open(client)["session_id"]

        data = _send(client, session_id, {"type": "CLICK_DELETE"}, {"type": "UNHOVER"})

        assert data["snapshot"]["state"] == "normal"
        assert data["effects"] == []

    def test_reset(self, client: TestClient) -> None:
        session_id = _open(
            client,
            layout={"dividers": [{"id": "h1", "position": 20, "type": "horizontal"}]},
        )["session_id"]

        data = _send(client, session_id, {"type": "RESET"})

        assert data["snapshot"]["horizontal_dividers"] == []
        assert data["effects"] == ["dividers_cleared"]

    def test_unknown_event_type(self, client: TestClient) -> None:
        session_id = _open(client)["session_id"]

        response = client.post(
            f"/api/v1/sessions/{session_id}/events",
            json={"events": [{"type": "TELEPORT"}]},
        )
        assert response.status_code == 422

    def test_empty_batch(self, client: TestClient) -> None:
        session_id = _open(client)["session_id"]

        response = client.post(
            f"/api/v1/sessions/{session_id}/events", json={"events": []}
        )
        assert response.status_code == 422

    def test_events_for_unknown_session(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/sessions/nope/events", json={"events": [{"type": "RESET"}]}
        )
        assert response.status_code == 404


class TestDistances:
    """Tests for the distances endpoint."""

    def test_distances(self, client: TestClient) -> None:
        session_id = _open(
            client,
            layout={
                "dividers": [
                    {"id": "h1", "position": 20, "type": "horizontal"},
                    {"id": "h2", "position": 40, "type": "horizontal"},
                ]
            },
        )["session_id"]

        response = client.get(f"/api/v1/sessions/{session_id}/dividers/h1/distances")

        assert response.status_code == 200
        data = response.json()
        assert data["divider_id"] == "h1"
        above, below = data["distances"]
        assert above["direction"] == "above"
        assert above["target_kind"] == "divider"
        assert above["target_label"] == "Divider 1"
        assert above["distance"] == pytest.approx(19.25)
        assert below["target_label"] == "Bottom"

    def test_unknown_divider(self, client: TestClient) -> None:
        session_id = _open(client)["session_id"]

        response = client.get(f"/api/v1/sessions/{session_id}/dividers/zz/distances")

        assert response.status_code == 404
        assert "zz" in response.json()["error"]
