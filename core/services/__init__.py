# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .calendar_cache import CalendarCache, CalendarKey, calendar_cache
from .calendar_service import CalendarService
from .normalizer import normalize_colors, to_liturgical_day_response

__all__ = [
    "CalendarCache",
    "CalendarKey",
    "calendar_cache",
    "CalendarService",
    "normalize_colors",
    "to_liturgical_day_response",
]
