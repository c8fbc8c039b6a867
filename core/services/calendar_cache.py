# =============================================================================
# core/services/calendar_cache.py - Year Calendar Cache
# =============================================================================
# Memoizes one full calendar year per (year, engine identifier).
#
# Computing a year is far more expensive than a lookup, so the first request
# for a year computes all of it and every later request for any date in that
# year is a dictionary lookup.
#
# Entries are never partially filled: the mapping is built completely before
# it is stored. There is no eviction; clear() is the only reset.
#
# Usage:
#   cache = CalendarCache()
#   days = cache.get_year(2026, "unitedStates")
#   christmas = days["2026-12-25"]
# =============================================================================

from __future__ import annotations

import logging
import threading
from datetime import date
from types import MappingProxyType
from typing import Any, Callable, Mapping, NamedTuple

from lib.dates import format_date
from liturgy_engine import calendar_for

logger = logging.getLogger(__name__)

# (year, country) -> list of raw day records
CalendarEngine = Callable[[int, str], list[Any]]


class CalendarKey(NamedTuple):
    """Identifies one cached calendar."""
    year: int
    country: str


def record_date_string(record: Any) -> str:
    """
    Extract the YYYY-MM-DD date of a raw engine record.

    `moment` may be a date/datetime or an ISO string ("2026-12-25T00:00:00Z").
    """
    moment = getattr(record, "moment", None)
    if isinstance(moment, date):
        return format_date(moment)
    if isinstance(moment, str):
        return moment.split("T")[0]
    return ""


class CalendarCache:
    """
    Process-wide cache of computed calendar years.

    The engine call runs outside the lock. Two threads missing the same key
    may both compute, but only the first result is stored and both callers
    receive it.
    """

    def __init__(self, engine: CalendarEngine | None = None):
        self._engine = engine or calendar_for
        self._entries: dict[CalendarKey, Mapping[str, Any]] = {}
        self._lock = threading.Lock()

    def get_year(self, year: int, country: str) -> Mapping[str, Any]:
        """
        Get the date-keyed calendar for a year, computing it on a miss.

        Args:
            year: Calendar year
            country: Engine country identifier (e.g. "unitedStates")

        Returns:
            Read-only mapping of "YYYY-MM-DD" -> raw day record

        Raises:
            Exception: Whatever the engine raises; nothing is cached then
        """
        key = CalendarKey(year, country)

        cached = self._entries.get(key)
        if cached is not None:
            logger.debug(f"Calendar cache hit: {year}/{country}")
            return cached

        logger.info(f"Calendar cache miss: computing {year}/{country}")
        records = self._engine(year, country)

        by_date: dict[str, Any] = {}
        for record in records:
            date_str = record_date_string(record)
            if date_str:
                by_date[date_str] = record

        with self._lock:
            # Insert-if-absent: a concurrent miss may have stored first
            return self._entries.setdefault(key, MappingProxyType(by_date))

    def clear(self) -> None:
        """Discard every cached year."""
        with self._lock:
            self._entries.clear()
        logger.info("Calendar cache cleared")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


# Shared instance used by the API
calendar_cache = CalendarCache()
