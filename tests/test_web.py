"""Tests for the JSON web API.

Tests use ``pytest.importorskip`` so they are skipped gracefully when
Flask is not installed.
"""

from __future__ import annotations

from typing import Any

import pytest

flask = pytest.importorskip("flask")

from cfs_sim.config import SchedulerConfig  # noqa: E402
from cfs_sim.web.app import create_app  # noqa: E402

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
SAMPLE_SLICES = 82


def _create_client(config: SchedulerConfig | None = None) -> Any:
    """Create a test client from a fresh app."""
    app = create_app(config)
    app.config["TESTING"] = True
    return app.test_client()


# -- App creation and read-only endpoints -----------------------------------


class TestAppCreation:
    """Verify the app factory and the GET endpoints."""

    def test_create_app_returns_flask(self) -> None:
        """create_app should return a Flask application."""
        assert isinstance(create_app(), flask.Flask)

    def test_config_endpoint(self) -> None:
        """GET /api/config returns the app's default config."""
        client = _create_client(SchedulerConfig(io_wait_time=3))
        data = client.get("/api/config").get_json()
        assert data == {"nice_0_load": 1024, "cpu_time_slice": 1, "io_wait_time": 3}

    def test_sample_endpoint(self) -> None:
        """GET /api/sample returns five process records."""
        response = _create_client().get("/api/sample")
        assert response.status_code == HTTP_OK
        processes = response.get_json()["processes"]
        assert [p["pid"] for p in processes] == [1, 2, 3, 4, 5]
        assert processes[1]["nature"] == "io"


# -- Schedule endpoint ------------------------------------------------------


class TestScheduleEndpoint:
    """Verify POST /api/schedule."""

    def test_empty_body_runs_sample(self) -> None:
        """An empty object runs the sample population with defaults."""
        response = _create_client().post("/api/schedule", json={})
        assert response.status_code == HTTP_OK
        data = response.get_json()
        assert data["summary"]["slices"] == SAMPLE_SLICES
        assert len(data["log"]) == SAMPLE_SLICES
        assert data["log"][0] == {
            "pid": 1,
            "start_time": 0,
            "end_time": 1,
            "vruntime": 1,
            "duration": 1,
        }

    def test_custom_processes_and_config(self) -> None:
        """Posted processes and config are used for the run."""
        body = {
            "processes": [{"pid": 1, "priority": 2, "burst_time": 10, "nature": "cpu"}],
            "config": {"cpu_time_slice": 3},
        }
        data = _create_client().post("/api/schedule", json=body).get_json()
        assert [e["duration"] for e in data["log"]] == [3, 3, 3, 1]
        assert data["config"]["cpu_time_slice"] == 3
        assert data["processes"][0]["state"] == "terminated"
        assert data["summary"]["dispatch_counts"] == {"1": 4}

    def test_events_included(self) -> None:
        """The response carries the INFO-level event log."""
        data = _create_client().post("/api/schedule", json={}).get_json()
        assert any("Run finished" in e for e in data["events"])
        assert not any(e.startswith("[DEBUG]") for e in data["events"])

    def test_non_object_body(self) -> None:
        """A body that is not a JSON object is rejected."""
        response = _create_client().post("/api/schedule", json=[1, 2])
        assert response.status_code == HTTP_BAD_REQUEST
        assert "error" in response.get_json()

    def test_missing_body(self) -> None:
        """A request without JSON is rejected."""
        response = _create_client().post("/api/schedule", data="nope")
        assert response.status_code == HTTP_BAD_REQUEST

    def test_bad_config(self) -> None:
        """Invalid tunables are reported as 400."""
        response = _create_client().post("/api/schedule", json={"config": {"io_wait_time": 0}})
        assert response.status_code == HTTP_BAD_REQUEST
        assert "io_wait_time" in response.get_json()["error"]

    def test_unknown_config_key(self) -> None:
        """Unknown config keys are reported as 400."""
        response = _create_client().post("/api/schedule", json={"config": {"slice": 2}})
        assert response.status_code == HTTP_BAD_REQUEST

    def test_bad_process_record(self) -> None:
        """Invalid process records are reported as 400."""
        body = {"processes": [{"pid": 1, "priority": 0, "burst_time": 3, "nature": "gpu"}]}
        response = _create_client().post("/api/schedule", json=body)
        assert response.status_code == HTTP_BAD_REQUEST
        assert "nature" in response.get_json()["error"]

    def test_processes_must_be_list(self) -> None:
        """A non-list processes field is rejected."""
        response = _create_client().post("/api/schedule", json={"processes": {"pid": 1}})
        assert response.status_code == HTTP_BAD_REQUEST
