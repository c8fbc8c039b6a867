# =============================================================================
# core/models/resolution.py - Resolution Results
# =============================================================================
# Every core lookup returns a Resolution instead of raising. The status tells
# the HTTP layer which response to build; `error` keeps the underlying engine
# fault so an engine failure stays distinguishable from "no data".
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .liturgical_day import LiturgicalDayResponse


class ResolutionStatus(str, Enum):
    """Outcome of a calendar lookup."""
    FOUND = "found"
    INVALID_DATE = "invalid_date"
    UNSUPPORTED_DIOCESE = "unsupported_diocese"
    NOT_FOUND = "not_found"
    ENGINE_FAILURE = "engine_failure"


@dataclass(frozen=True)
class Resolution:
    """
    Tagged result of a calendar lookup.

    - FOUND: `day` (single date) or `days` (whole year) is populated
    - INVALID_DATE / UNSUPPORTED_DIOCESE: rejected before any cache access
    - NOT_FOUND: the engine produced no entry for the date
    - ENGINE_FAILURE: the engine raised; `error` holds the exception
    """
    status: ResolutionStatus
    day: LiturgicalDayResponse | None = None
    days: list[LiturgicalDayResponse] = field(default_factory=list)
    message: str = ""
    # The rejected input (date string or diocese code), when there is one
    subject: str = ""
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status == ResolutionStatus.FOUND

    @classmethod
    def found(cls, day: LiturgicalDayResponse) -> Resolution:
        return cls(status=ResolutionStatus.FOUND, day=day)

    @classmethod
    def found_year(cls, days: list[LiturgicalDayResponse]) -> Resolution:
        return cls(status=ResolutionStatus.FOUND, days=days)
