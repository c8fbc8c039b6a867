# =============================================================================
# app/routers/calendar.py - Full Liturgical Year
# =============================================================================
# GET /calendar/{year} lists every liturgical day of a year, sorted by date.
# =============================================================================

from fastapi import APIRouter, Path, Query

from app.dependencies import CalendarServiceDep, SettingsDep
from app.exceptions import raise_for_resolution
from core.models.liturgical_day import ErrorResponse, LiturgicalYearResponse
from liturgy_engine import MAX_YEAR, MIN_YEAR

router = APIRouter()


@router.get(
    "/calendar/{year}",
    response_model=LiturgicalYearResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_calendar(
    service: CalendarServiceDep,
    settings: SettingsDep,
    year: int = Path(..., ge=MIN_YEAR, le=MAX_YEAR, description="Gregorian year"),
    diocese: str | None = Query(
        default=None,
        description="Diocese code; defaults to the configured diocese",
    ),
):
    """Get all liturgical days for a year."""
    diocese = diocese or settings.DEFAULT_DIOCESE
    resolution = service.resolve_year(year, diocese)
    raise_for_resolution(resolution, settings.EXPOSE_ENGINE_FAILURES)
    return LiturgicalYearResponse(year=year, diocese=diocese, days=resolution.days)
