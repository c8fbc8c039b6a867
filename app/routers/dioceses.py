# =============================================================================
# app/routers/dioceses.py - Supported Dioceses
# =============================================================================

from fastapi import APIRouter

from app.dependencies import CalendarServiceDep, SettingsDep
from core.models.liturgical_day import DioceseListResponse

router = APIRouter()


@router.get("/dioceses", response_model=DioceseListResponse)
async def get_dioceses(service: CalendarServiceDep, settings: SettingsDep):
    """List supported diocese codes and the default one."""
    return DioceseListResponse(
        dioceses=service.list_supported_dioceses(),
        default=settings.DEFAULT_DIOCESE,
    )
