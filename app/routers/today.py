# =============================================================================
# app/routers/today.py - Today's Liturgical Day
# =============================================================================
# GET /today resolves the current UTC date for a diocese.
# =============================================================================

from fastapi import APIRouter, Query

from app.dependencies import CalendarServiceDep, SettingsDep
from app.exceptions import raise_for_resolution
from core.models.liturgical_day import ErrorResponse, LiturgicalDayResponse

router = APIRouter()


@router.get(
    "/today",
    response_model=LiturgicalDayResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_today(
    service: CalendarServiceDep,
    settings: SettingsDep,
    diocese: str | None = Query(
        default=None,
        description="Diocese code; defaults to the configured diocese",
        examples=["united-states"],
    ),
):
    """
    Get the liturgical day for today.

    "Today" is the current date in UTC, not the caller's local date.
    """
    resolution = service.resolve_today(diocese or settings.DEFAULT_DIOCESE)
    raise_for_resolution(resolution, settings.EXPOSE_ENGINE_FAILURES)
    return resolution.day
