# =============================================================================
# liturgy_engine/calendar.py - Calendar Assembly
# =============================================================================
# Builds one calendar year for one national calendar:
# 1. Seed every date with its proper-of-time celebration
# 2. Add Pentecost-anchored and national movable celebrations
# 3. Place fixed-date celebrations, transferring impeded solemnities
# 4. Keep the celebration with the best precedence for each date
#
# The result is deterministic: identical (year, country) inputs always produce
# equal output, so callers may cache it freely.
# =============================================================================

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, timedelta

from liturgy_engine.sanctorale import NationalCalendar, get_national_calendar
from liturgy_engine.temporale import (
    TemporaleDates,
    compute_dates,
    movable_celebrations,
    season_of,
    temporale_celebration,
)
from liturgy_engine.types import Celebration, RawLiturgicalDay

logger = logging.getLogger(__name__)

MIN_YEAR = 1583
MAX_YEAR = 9999


# =============================================================================
# Transfers
# =============================================================================

def _is_impeded(d: date, candidate: Celebration, slots: dict[date, list[Celebration]]) -> bool:
    """A solemnity is impeded by anything already placed that outranks or ties it."""
    return any(
        other.precedence <= candidate.precedence
        for other in slots[d]
        if other.key != candidate.key
    )


def _transfer_date(
    key: str,
    d: date,
    candidate: Celebration,
    dates: TemporaleDates,
    slots: dict[date, list[Celebration]],
) -> date:
    """
    Find where an impeded solemnity is celebrated instead.

    - St Joseph in Holy Week moves to the Saturday before Palm Sunday
    - The Annunciation in Holy Week or the Easter octave moves to the Monday
      after the Second Sunday of Easter
    - Anything else moves to the next unimpeded day
    """
    if key == "joseph_spouse_of_mary" and dates.palm_sunday <= d <= dates.easter:
        return dates.palm_sunday - timedelta(days=1)
    if key == "annunciation" and dates.palm_sunday <= d <= dates.easter + timedelta(days=7):
        return dates.easter + timedelta(days=8)

    target = d + timedelta(days=1)
    while target.year == dates.year and _is_impeded(target, candidate, slots):
        target += timedelta(days=1)
    return target


# =============================================================================
# Assembly
# =============================================================================

def _seed(year: int, dates: TemporaleDates) -> dict[date, list[Celebration]]:
    slots: dict[date, list[Celebration]] = defaultdict(list)
    first = date(year, 1, 1)
    for offset in range((date(year, 12, 31) - first).days + 1):
        d = first + timedelta(days=offset)
        slots[d].append(temporale_celebration(d, dates))
    for d, celebration in movable_celebrations(dates):
        slots[d].append(celebration)
    return slots


def _place_sanctorale(
    year: int,
    national: NationalCalendar,
    dates: TemporaleDates,
    slots: dict[date, list[Celebration]],
) -> None:
    for movable in national.movable_propers:
        slots[movable.resolve(year)].append(movable.to_celebration(national.country))

    entries = sorted(national.fixed_celebrations(), key=lambda pair: (pair[0].month, pair[0].day))
    for entry, celebration in entries:
        d = entry.on(year)
        if celebration.precedence <= 4 and _is_impeded(d, celebration, slots):
            moved = _transfer_date(entry.key, d, celebration, dates, slots)
            if moved.year != year:
                logger.debug(f"{entry.key} transferred out of {year}, skipped")
                continue
            logger.debug(f"{entry.key} transferred from {d} to {moved}")
            d = moved
        slots[d].append(celebration)


def calendar_for(year: int, country: str = "general") -> list[RawLiturgicalDay]:
    """
    Compute every liturgical day of a calendar year.

    Args:
        year: Gregorian year (1583-9999)
        country: Engine identifier of a national calendar (e.g. "unitedStates")

    Returns:
        One RawLiturgicalDay per date from January 1 to December 31, in order

    Raises:
        ValueError: If the year is out of range or the country is unknown
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"Year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}")

    national = get_national_calendar(country)
    dates = compute_dates(
        year,
        epiphany_on_sunday=national.epiphany_on_sunday,
        ascension_on_sunday=national.ascension_on_sunday,
    )

    slots = _seed(year, dates)
    _place_sanctorale(year, national, dates, slots)

    days: list[RawLiturgicalDay] = []
    for d in sorted(slots):
        # min() keeps the first of equals, so the proper of time wins ties
        winner = min(slots[d], key=lambda c: c.precedence)
        days.append(
            RawLiturgicalDay(
                moment=d,
                name=winner.name,
                key=winner.key,
                type=winner.type.value,
                season=season_of(d, dates),
                liturgical_color=winner.colors(),
                source=winner.source,
            )
        )
    return days
