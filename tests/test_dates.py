# =============================================================================
# tests/test_dates.py - Date Parsing Tests
# =============================================================================
# Run with: pytest tests/test_dates.py -v
# =============================================================================

from datetime import date
from unittest.mock import patch

import pytest

from lib.dates import format_date, is_valid_date, parse_date, today_string, today_utc


class TestParseDate:
    """Tests for strict YYYY-MM-DD parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("2026-12-25", date(2026, 12, 25)),
        ("2024-02-29", date(2024, 2, 29)),
        ("2000-02-29", date(2000, 2, 29)),
        ("0001-01-01", date(1, 1, 1)),
        ("9999-12-31", date(9999, 12, 31)),
    ])
    def test_valid_dates(self, value, expected):
        assert parse_date(value) == expected

    @pytest.mark.parametrize("value", [
        "2026-02-30",
        "2025-02-29",
        "1900-02-29",
        "2026-13-01",
        "2026-00-10",
        "2026-04-31",
        "0000-01-01",
    ])
    def test_impossible_dates_rejected(self, value):
        assert parse_date(value) is None

    @pytest.mark.parametrize("value", [
        "",
        "2026-1-5",
        "26-01-05",
        "2026/01/05",
        "2026-01-05T00:00:00",
        " 2026-01-05",
        "2026-01-05\n",
        "abcd-ef-gh",
        "２０２６-01-05",
    ])
    def test_malformed_strings_rejected(self, value):
        assert parse_date(value) is None

    def test_non_string_rejected(self):
        assert parse_date(None) is None
        assert parse_date(20260105) is None

    def test_is_valid_date(self):
        assert is_valid_date("2026-12-25") is True
        assert is_valid_date("2026-02-30") is False


class TestFormatDate:
    """Tests for date formatting."""

    def test_zero_padding(self):
        assert format_date(date(2026, 1, 5)) == "2026-01-05"
        assert format_date(date(33, 4, 3)) == "0033-04-03"

    @pytest.mark.parametrize("value", ["2026-12-25", "2024-02-29", "1583-10-15"])
    def test_format_inverts_parse(self, value):
        assert format_date(parse_date(value)) == value


class TestToday:
    """Tests for the UTC today helpers."""

    def test_today_utc_is_a_date(self):
        assert isinstance(today_utc(), date)

    def test_today_string_uses_utc_date(self):
        with patch("lib.dates.today_utc", return_value=date(2026, 3, 9)):
            assert today_string() == "2026-03-09"
