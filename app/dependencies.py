# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends(), and tests replace
# them through app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from core.services.calendar_cache import CalendarCache, calendar_cache
from core.services.calendar_service import CalendarService


def get_calendar_cache() -> CalendarCache:
    """
    Get the process-wide calendar cache.

    Returns the shared instance so every request reuses computed years.
    """
    return calendar_cache


def get_calendar_service(
    cache: Annotated[CalendarCache, Depends(get_calendar_cache)],
) -> CalendarService:
    """Build a CalendarService over the injected cache."""
    return CalendarService(cache)


# Type aliases for dependency injection
CalendarServiceDep = Annotated[CalendarService, Depends(get_calendar_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
