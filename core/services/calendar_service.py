# =============================================================================
# core/services/calendar_service.py - Liturgical Day Resolution
# =============================================================================
# Resolves (date, diocese) requests against the cached calendar years.
#
# Every method returns a Resolution rather than raising:
# - invalid input is rejected before the cache is touched
# - engine faults are caught and logged here, never propagated
#
# The HTTP layer decides which status code each outcome maps to.
# =============================================================================

import logging
from datetime import date

from core.models.resolution import Resolution, ResolutionStatus
from core.services.calendar_cache import CalendarCache, calendar_cache
from core.services.normalizer import to_liturgical_day_response
from lib.dates import format_date, parse_date, today_utc
from lib.dioceses import is_supported, list_dioceses, to_engine_identifier
from liturgy_engine import MAX_YEAR, MIN_YEAR

logger = logging.getLogger(__name__)


class CalendarService:
    """
    Service for liturgical calendar lookups.

    The cache is injected so tests (and multi-worker hosts) control its
    lifecycle explicitly.
    """

    def __init__(self, cache: CalendarCache | None = None):
        self.cache = cache if cache is not None else calendar_cache

    # -------------------------------------------------------------------------
    # Validation helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _unsupported(diocese: str) -> Resolution:
        return Resolution(
            status=ResolutionStatus.UNSUPPORTED_DIOCESE,
            message=(
                f"Invalid diocese '{diocese}'. "
                f"Supported dioceses: {', '.join(list_dioceses())}"
            ),
            subject=diocese,
        )

    @staticmethod
    def _out_of_range(what: str) -> Resolution:
        # Outside the engine's year range: no data rather than an engine fault
        return Resolution(
            status=ResolutionStatus.NOT_FOUND,
            message=f"No liturgical data found for {what}. Supported years: {MIN_YEAR}-{MAX_YEAR}",
        )

    @staticmethod
    def _engine_failure(what: str, diocese: str, error: Exception) -> Resolution:
        logger.exception(f"Error getting liturgical data for {what} in {diocese}: {error}")
        return Resolution(
            status=ResolutionStatus.ENGINE_FAILURE,
            message=f"No liturgical data found for {what}",
            error=error,
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def resolve(self, day: date, diocese: str) -> Resolution:
        """
        Resolve the liturgical day for a date and diocese.

        Args:
            day: The calendar date
            diocese: Diocese code (e.g. "united-states")

        Returns:
            Resolution with status FOUND, UNSUPPORTED_DIOCESE, NOT_FOUND
            or ENGINE_FAILURE
        """
        if not is_supported(diocese):
            return self._unsupported(diocese)

        date_str = format_date(day)
        if not MIN_YEAR <= day.year <= MAX_YEAR:
            return self._out_of_range(f"date '{date_str}'")

        country = to_engine_identifier(diocese)

        try:
            calendar = self.cache.get_year(day.year, country)
        except Exception as e:
            return self._engine_failure(f"date '{date_str}'", diocese, e)

        raw = calendar.get(date_str)
        if raw is None:
            return Resolution(
                status=ResolutionStatus.NOT_FOUND,
                message=f"No liturgical data found for date '{date_str}'",
            )

        return Resolution.found(to_liturgical_day_response(raw))

    def resolve_date(self, date_string: str, diocese: str) -> Resolution:
        """
        Validate a YYYY-MM-DD string, then resolve it.

        Returns INVALID_DATE without touching the cache when the string is
        malformed or names an impossible date.
        """
        parsed = parse_date(date_string)
        if parsed is None:
            return Resolution(
                status=ResolutionStatus.INVALID_DATE,
                message=f"Invalid date format '{date_string}'. Expected YYYY-MM-DD format.",
                subject=date_string,
            )
        return self.resolve(parsed, diocese)

    def resolve_today(self, diocese: str, today: date | None = None) -> Resolution:
        """Resolve today's date (UTC) for a diocese."""
        return self.resolve(today or today_utc(), diocese)

    def resolve_year(self, year: int, diocese: str) -> Resolution:
        """
        Resolve every liturgical day of a year, sorted by date.

        Returns:
            Resolution with `days` populated on success
        """
        if not is_supported(diocese):
            return self._unsupported(diocese)
        if not MIN_YEAR <= year <= MAX_YEAR:
            return self._out_of_range(f"year {year}")

        country = to_engine_identifier(diocese)

        try:
            calendar = self.cache.get_year(year, country)
        except Exception as e:
            return self._engine_failure(f"year {year}", diocese, e)

        days = sorted(
            (to_liturgical_day_response(raw) for raw in calendar.values()),
            key=lambda day: day.date,
        )
        if not days:
            return Resolution(
                status=ResolutionStatus.NOT_FOUND,
                message=f"No liturgical data found for year {year}",
            )
        return Resolution.found_year(days)

    @staticmethod
    def list_supported_dioceses() -> list[str]:
        """All supported diocese codes, in stable order."""
        return list_dioceses()
