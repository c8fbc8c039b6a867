# =============================================================================
# tests/test_models.py - Model Tests
# =============================================================================
# Unit tests for the response models and resolution results.
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    ErrorResponse,
    LiturgicalDayResponse,
    Resolution,
    ResolutionStatus,
)


def make_day(**overrides) -> LiturgicalDayResponse:
    data = {
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
    data.update(overrides)
    return LiturgicalDayResponse(**data)


class TestLiturgicalDayResponse:
    """Tests for LiturgicalDayResponse."""

    def test_accepts_aliases(self):
        day = make_day()
        assert day.is_solemnity is True

    def test_accepts_field_names(self):
        day = LiturgicalDayResponse(date="2026-01-01", is_feast=True)
        assert day.is_feast is True
        assert day.color == []

    def test_is_immutable(self):
        day = make_day()
        with pytest.raises(ValidationError):
            day.name = "changed"

    def test_rejects_malformed_date(self):
        with pytest.raises(ValidationError):
            make_day(date="2026-1-5")

    def test_json_uses_aliases(self):
        body = make_day().model_dump(by_alias=True)
        assert body["isSolemnity"] is True
        assert "is_solemnity" not in body


class TestErrorResponse:
    """Tests for ErrorResponse."""

    def test_optional_fields(self):
        error = ErrorResponse(error="NOT_FOUND", message="missing", status=404)
        assert error.suggestion is None
        assert error.details is None


class TestResolution:
    """Tests for Resolution results."""

    def test_found(self):
        resolution = Resolution.found(make_day())
        assert resolution.ok
        assert resolution.day.id == "christmas"

    def test_found_year(self):
        resolution = Resolution.found_year([make_day()])
        assert resolution.ok
        assert resolution.day is None
        assert len(resolution.days) == 1

    @pytest.mark.parametrize("status", [
        ResolutionStatus.NOT_FOUND,
        ResolutionStatus.ENGINE_FAILURE,
        ResolutionStatus.INVALID_DATE,
        ResolutionStatus.UNSUPPORTED_DIOCESE,
    ])
    def test_failures_are_not_ok(self, status):
        resolution = Resolution(status=status)
        assert not resolution.ok
        assert resolution.day is None
