# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Wraps the calendar engine so tests can count engine calls
# - Provides a TestClient wired to a fresh cache per test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("DEFAULT_DIOCESE", "united-states")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.dependencies import get_calendar_cache
from app.main import app
from core.services.calendar_cache import CalendarCache
from core.services.calendar_service import CalendarService
from liturgy_engine import calendar_for


# =============================================================================
# Engine Doubles
# =============================================================================

class CountingEngine:
    """Delegates to the real engine and records every (year, country) call."""

    def __init__(self):
        self.calls: list[tuple[int, str]] = []

    def __call__(self, year: int, country: str):
        self.calls.append((year, country))
        return calendar_for(year, country)

    @property
    def call_count(self) -> int:
        return len(self.calls)


class FailingEngine:
    """Raises on every call, like an engine that cannot compute a year."""

    def __init__(self, error: Exception | None = None):
        self.error = error or RuntimeError("engine exploded")
        self.call_count = 0

    def __call__(self, year: int, country: str):
        self.call_count += 1
        raise self.error


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """A counting wrapper around the real calendar engine."""
    return CountingEngine()


@pytest.fixture
def failing_engine():
    """An engine that always raises."""
    return FailingEngine()


@pytest.fixture
def cache(engine):
    """A fresh, empty cache backed by the counting engine."""
    return CalendarCache(engine)


@pytest.fixture
def service(cache):
    """A CalendarService over the fresh cache."""
    return CalendarService(cache)


@pytest.fixture
def client(cache):
    """TestClient whose requests use the fresh cache."""
    app.dependency_overrides[get_calendar_cache] = lambda: cache
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(failing_engine):
    """TestClient whose engine always raises."""
    app.dependency_overrides[get_calendar_cache] = lambda: CalendarCache(failing_engine)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def exposing_failing_client(failing_engine):
    """Like failing_client, but engine failures are reported as 500."""
    app.dependency_overrides[get_calendar_cache] = lambda: CalendarCache(failing_engine)
    app.dependency_overrides[get_settings] = lambda: Settings(EXPOSE_ENGINE_FAILURES=True)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
