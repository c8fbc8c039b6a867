# =============================================================================
# app/routers/date.py - Liturgical Day by Date
# =============================================================================
# GET /date/{date} resolves an explicit YYYY-MM-DD date for a diocese.
# =============================================================================

from fastapi import APIRouter, Path, Query

from app.dependencies import CalendarServiceDep, SettingsDep
from app.exceptions import raise_for_resolution
from core.models.liturgical_day import ErrorResponse, LiturgicalDayResponse

router = APIRouter()


@router.get(
    "/date/{date}",
    response_model=LiturgicalDayResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_date(
    service: CalendarServiceDep,
    settings: SettingsDep,
    date: str = Path(..., description="Calendar date in YYYY-MM-DD format", examples=["2026-12-25"]),
    diocese: str | None = Query(
        default=None,
        description="Diocese code; defaults to the configured diocese",
        examples=["united-states"],
    ),
):
    """
    Get the liturgical day for a specific date.

    The date is validated here rather than by the path converter so that
    malformed and impossible dates both produce INVALID_DATE.
    """
    resolution = service.resolve_date(date, diocese or settings.DEFAULT_DIOCESE)
    raise_for_resolution(resolution, settings.EXPOSE_ENGINE_FAILURES)
    return resolution.day
