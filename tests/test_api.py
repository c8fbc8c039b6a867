# =============================================================================
# tests/test_api.py - HTTP Endpoint Tests
# =============================================================================
# Integration tests for the FastAPI app:
# - Successful lookups and their JSON shape
# - Status codes and error bodies for every failure kind
#
# Run with: pytest tests/test_api.py -v
# =============================================================================

import inspect
from datetime import date
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

import app.main as main_module
from app.config import Settings
from app.dependencies import get_calendar_service
from app.main import app
from app.routers import calendar as calendar_router
from app.routers import date as date_router
from app.routers import today as today_router


class TestRoot:
    """Tests for the info and health endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Tempus Bede API"
        assert len(body["supportedDioceses"]) == 6

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["service"] == "tempus-bede"
        assert "timestamp" in body

    def test_dioceses(self, client):
        response = client.get("/dioceses")

        assert response.status_code == 200
        assert response.json() == {
            "dioceses": ["united-states", "england", "italy", "france", "spain", "germany"],
            "default": "united-states",
        }

    def test_cors_header(self, client):
        response = client.get("/health", headers={"Origin": "https://example.com"})
        assert response.headers["access-control-allow-origin"] == "*"


class TestDateEndpoint:
    """Tests for GET /date/{date}."""

    def test_christmas(self, client):
        response = client.get("/date/2026-12-25", params={"diocese": "united-states"})

        assert response.status_code == 200
        assert response.json() == {
            "date": "2026-12-25",
            "id": "christmas",
            "name": "The Nativity of the Lord",
            "rank": "SOLEMNITY",
            "season": "CHRISTMASTIDE",
            "color": ["white"],
            "isFeast": False,
            "isSolemnity": True,
            "isOptional": False,
        }

    def test_default_diocese(self, client):
        response = client.get("/date/2026-12-12")

        assert response.status_code == 200
        assert response.json()["isFeast"] is True

    def test_all_souls_colors(self, client):
        response = client.get("/date/2026-11-02", params={"diocese": "england"})
        assert response.json()["color"] == ["purple", "black"]

    def test_repeated_requests_compute_once(self, client, engine):
        client.get("/date/2026-12-25")
        client.get("/date/2026-08-15")
        assert engine.call_count == 1

    def test_invalid_date(self, client, engine):
        response = client.get("/date/2026-02-30")

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "INVALID_DATE"
        assert body["status"] == 400
        assert "2026-02-30" in body["message"]
        assert engine.call_count == 0

    def test_malformed_date(self, client):
        response = client.get("/date/christmas")
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_DATE"

    def test_unsupported_diocese(self, client):
        response = client.get("/date/2026-12-25", params={"diocese": "mexico"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "INVALID_DIOCESE"
        assert "united-states" in body["message"]
        assert "germany" in body["message"]
        assert len(body["details"]["supported_dioceses"]) == 6

    def test_engine_failure_reads_as_not_found(self, failing_client):
        response = failing_client.get("/date/2026-12-25")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_engine_failure_exposed(self, exposing_failing_client):
        response = exposing_failing_client.get("/date/2026-12-25")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "ENGINE_FAILURE"
        assert body["details"]["error"] == "engine exploded"

    def test_date_before_supported_years(self, client, engine):
        response = client.get("/date/1582-10-20")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "NOT_FOUND"
        assert "1583-9999" in body["message"]
        assert engine.call_count == 0


class TestTodayEndpoint:
    """Tests for GET /today."""

    def test_today(self, client, monkeypatch):
        monkeypatch.setattr(
            "core.services.calendar_service.today_utc",
            lambda: date(2026, 7, 25),
        )

        response = client.get("/today", params={"diocese": "spain"})

        assert response.status_code == 200
        body = response.json()
        assert body["date"] == "2026-07-25"
        assert body["isSolemnity"] is True

    def test_unsupported_diocese(self, client):
        response = client.get("/today", params={"diocese": "atlantis"})
        assert response.status_code == 400


class TestCalendarEndpoint:
    """Tests for GET /calendar/{year}."""

    def test_full_year(self, client):
        response = client.get("/calendar/2026", params={"diocese": "france"})

        assert response.status_code == 200
        body = response.json()
        assert body["year"] == 2026
        assert body["diocese"] == "france"
        assert len(body["days"]) == 365
        assert body["days"][0]["date"] == "2026-01-01"
        assert "isSolemnity" in body["days"][0]

    def test_year_out_of_range(self, client):
        response = client.get("/calendar/1500")

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_non_numeric_year(self, client):
        response = client.get("/calendar/next")
        assert response.status_code == 400


class TestErrors:
    """Tests for framework-level errors."""

    def test_unknown_route(self, client):
        response = client.get("/api/v1/sessions")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "NOT_FOUND"
        assert body["message"] == "Route /api/v1/sessions not found"

    def test_unexpected_error(self):
        class BrokenService:
            def resolve_date(self, date_string, diocese):
                raise RuntimeError("boom")

        app.dependency_overrides[get_calendar_service] = lambda: BrokenService()
        try:
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get("/date/2026-12-25")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json()["error"] == "INTERNAL_ERROR"


class TestServerEntryPoint:
    """Tests for how the app is served."""

    def test_run_uses_configured_host_and_port(self, monkeypatch):
        monkeypatch.setattr(
            main_module,
            "settings",
            Settings(API_HOST="127.0.0.1", API_PORT=8123, DEBUG=False),
        )

        with patch("app.main.uvicorn.run") as uvicorn_run:
            main_module.run()

        uvicorn_run.assert_called_once_with(
            "app.main:app",
            host="127.0.0.1",
            port=8123,
            reload=False,
        )

    def test_default_port(self, monkeypatch):
        monkeypatch.delenv("API_PORT", raising=False)
        assert Settings().API_PORT == 3000

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "8080")
        assert Settings().API_PORT == 8080

    @pytest.mark.parametrize("handler", [
        today_router.get_today,
        date_router.get_date,
        calendar_router.get_calendar,
    ])
    def test_engine_handlers_run_in_threadpool(self, handler):
        # FastAPI runs plain functions in its threadpool, off the event loop
        assert not inspect.iscoroutinefunction(handler)
