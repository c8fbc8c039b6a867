# =============================================================================
# tests/test_calendar_service.py - Day Resolution Tests
# =============================================================================
# Tests for CalendarService:
# - Successful lookups and their idempotence
# - Validation before any engine work
# - Engine faults reported, never raised
#
# Run with: pytest tests/test_calendar_service.py -v
# =============================================================================

import logging
from datetime import date

import pytest

from core.models import ResolutionStatus
from core.services.calendar_cache import CalendarCache
from core.services.calendar_service import CalendarService
from lib.dioceses import list_dioceses
from liturgy_engine import RawLiturgicalDay


class TestResolveDate:
    """Tests for resolve_date()."""

    def test_christmas_is_a_solemnity(self, service):
        resolution = service.resolve_date("2026-12-25", "united-states")

        assert resolution.status == ResolutionStatus.FOUND
        assert resolution.day.date == "2026-12-25"
        assert resolution.day.id == "christmas"
        assert resolution.day.rank == "SOLEMNITY"
        assert resolution.day.is_solemnity is True
        assert resolution.day.color == ["white"]

    def test_repeated_lookup_is_idempotent(self, service, engine):
        first = service.resolve_date("2026-12-25", "united-states")
        second = service.resolve_date("2026-12-25", "united-states")

        assert first.day == second.day
        assert engine.call_count == 1

    def test_same_year_reuses_cache(self, service, engine):
        service.resolve_date("2026-01-01", "united-states")
        service.resolve_date("2026-07-04", "united-states")
        assert engine.call_count == 1

    def test_dioceses_are_isolated(self, service, engine):
        us = service.resolve_date("2026-12-25", "united-states")
        england = service.resolve_date("2026-12-25", "england")

        assert us.day.date == england.day.date == "2026-12-25"
        assert engine.calls == [(2026, "unitedStates"), (2026, "england")]

    def test_national_proper_differs(self, service):
        us = service.resolve_date("2026-12-12", "united-states")
        spain = service.resolve_date("2026-12-12", "spain")

        assert us.day.is_feast is True
        assert spain.day.is_optional is True

    @pytest.mark.parametrize("value", ["2026-02-30", "2026-13-01", "12/25/2026", "", "2026-12-25x"])
    def test_invalid_date(self, service, engine, value):
        resolution = service.resolve_date(value, "united-states")

        assert resolution.status == ResolutionStatus.INVALID_DATE
        assert resolution.subject == value
        assert "YYYY-MM-DD" in resolution.message
        assert engine.call_count == 0

    def test_invalid_date_checked_before_diocese(self, service):
        resolution = service.resolve_date("2026-02-30", "mexico")
        assert resolution.status == ResolutionStatus.INVALID_DATE

    def test_unsupported_diocese(self, service, engine):
        resolution = service.resolve_date("2026-12-25", "mexico")

        assert resolution.status == ResolutionStatus.UNSUPPORTED_DIOCESE
        assert resolution.subject == "mexico"
        for code in list_dioceses():
            assert code in resolution.message
        assert engine.call_count == 0

    def test_clear_triggers_exactly_one_new_call(self, service, cache, engine):
        service.resolve_date("2026-12-25", "united-states")
        cache.clear()
        service.resolve_date("2026-12-25", "united-states")
        service.resolve_date("2026-12-26", "united-states")
        assert engine.call_count == 2


class TestEngineFailures:
    """Tests for engine faults and missing data."""

    def test_engine_failure_is_reported(self, failing_engine, caplog):
        service = CalendarService(CalendarCache(failing_engine))

        with caplog.at_level(logging.ERROR):
            resolution = service.resolve_date("2026-12-25", "united-states")

        assert resolution.status == ResolutionStatus.ENGINE_FAILURE
        assert not resolution.ok
        assert isinstance(resolution.error, RuntimeError)
        assert "2026-12-25" in resolution.message
        assert "engine exploded" in caplog.text

    def test_engine_failure_for_year(self, failing_engine):
        service = CalendarService(CalendarCache(failing_engine))
        resolution = service.resolve_year(2026, "england")
        assert resolution.status == ResolutionStatus.ENGINE_FAILURE

    def test_missing_date_is_not_found(self):
        records = [RawLiturgicalDay(moment=date(2026, 1, 1), name="x", key="x", type="SOLEMNITY")]
        service = CalendarService(CalendarCache(lambda year, country: records))

        resolution = service.resolve_date("2026-06-01", "united-states")

        assert resolution.status == ResolutionStatus.NOT_FOUND
        assert resolution.error is None

    def test_empty_year_is_not_found(self):
        service = CalendarService(CalendarCache(lambda year, country: []))
        resolution = service.resolve_year(2026, "united-states")
        assert resolution.status == ResolutionStatus.NOT_FOUND


class TestYearRange:
    """Tests for dates outside the engine's supported years."""

    @pytest.mark.parametrize("value", ["1582-10-20", "0050-01-01"])
    def test_date_before_range_is_not_found(self, service, engine, caplog, value):
        with caplog.at_level(logging.ERROR):
            resolution = service.resolve_date(value, "united-states")

        assert resolution.status == ResolutionStatus.NOT_FOUND
        assert resolution.error is None
        assert "1583-9999" in resolution.message
        assert engine.call_count == 0
        assert caplog.records == []

    def test_year_out_of_range_is_not_found(self, service, engine):
        resolution = service.resolve_year(1500, "england")

        assert resolution.status == ResolutionStatus.NOT_FOUND
        assert engine.call_count == 0

    def test_first_supported_year_resolves(self, service):
        resolution = service.resolve_date("1583-01-01", "italy")
        assert resolution.ok


class TestResolveToday:
    """Tests for resolve_today()."""

    def test_explicit_today(self, service):
        resolution = service.resolve_today("united-states", today=date(2026, 12, 25))
        assert resolution.day.id == "christmas"

    def test_defaults_to_utc_today(self, service, monkeypatch):
        monkeypatch.setattr(
            "core.services.calendar_service.today_utc",
            lambda: date(2026, 11, 1),
        )
        resolution = service.resolve_today("united-states")
        assert resolution.day.id == "all_saints"

    def test_unsupported_diocese(self, service):
        resolution = service.resolve_today("narnia")
        assert resolution.status == ResolutionStatus.UNSUPPORTED_DIOCESE


class TestResolveYear:
    """Tests for resolve_year()."""

    def test_whole_year_sorted(self, service):
        resolution = service.resolve_year(2024, "italy")

        assert resolution.ok
        assert len(resolution.days) == 366
        dates = [day.date for day in resolution.days]
        assert dates == sorted(dates)
        assert dates[0] == "2024-01-01"

    def test_unsupported_diocese(self, service, engine):
        resolution = service.resolve_year(2026, "mexico")
        assert resolution.status == ResolutionStatus.UNSUPPORTED_DIOCESE
        assert engine.call_count == 0


class TestListSupportedDioceses:
    """Tests for list_supported_dioceses()."""

    def test_six_entries_in_stable_order(self, service):
        first = service.list_supported_dioceses()
        assert len(first) == 6
        assert first == service.list_supported_dioceses()
        assert first[0] == "united-states"
