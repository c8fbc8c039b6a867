# =============================================================================
# liturgy_engine - Deterministic Liturgical Calendar Engine
# =============================================================================
# Computes a full calendar year of liturgical days (Roman Rite, ordinary form)
# for one national calendar.
#
# Key principles:
# - Pure: the same (year, country) always yields equal output
# - One record per date, chosen by liturgical precedence
# - No I/O and no shared state
#
# Usage:
#   from liturgy_engine import calendar_for
#
#   days = calendar_for(2026, "unitedStates")
#   christmas = days[358]  # RawLiturgicalDay for 2026-12-25
# =============================================================================

from liturgy_engine.calendar import calendar_for, MIN_YEAR, MAX_YEAR
from liturgy_engine.sanctorale import (
    GENERAL_ROMAN_CALENDAR,
    NATIONAL_CALENDARS,
    NationalCalendar,
    get_national_calendar,
    list_countries,
)
from liturgy_engine.temporale import compute_dates, easter_date, season_of
from liturgy_engine.types import (
    Celebration,
    CelebrationType,
    LiturgicalColor,
    LiturgicalSeason,
    RawLiturgicalDay,
)

__all__ = [
    # Engine
    "calendar_for",
    "MIN_YEAR",
    "MAX_YEAR",
    # Calendars
    "GENERAL_ROMAN_CALENDAR",
    "NATIONAL_CALENDARS",
    "NationalCalendar",
    "get_national_calendar",
    "list_countries",
    # Proper of time
    "compute_dates",
    "easter_date",
    "season_of",
    # Types
    "Celebration",
    "CelebrationType",
    "LiturgicalColor",
    "LiturgicalSeason",
    "RawLiturgicalDay",
]
