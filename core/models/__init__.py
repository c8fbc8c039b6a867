# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains the schemas of the public API and core results:
# - liturgical_day.py: LiturgicalDayResponse and the other response bodies
# - resolution.py: Tagged results returned by CalendarService
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Response Models - Public JSON contract
# -----------------------------------------------------------------------------
from .liturgical_day import (
    DioceseListResponse,
    ErrorResponse,
    LiturgicalDayResponse,
    LiturgicalYearResponse,
)

# -----------------------------------------------------------------------------
# Resolution Models - Core lookup outcomes
# -----------------------------------------------------------------------------
from .resolution import (
    Resolution,
    ResolutionStatus,
)

__all__ = [
    # Responses
    "DioceseListResponse",
    "ErrorResponse",
    "LiturgicalDayResponse",
    "LiturgicalYearResponse",
    # Resolutions
    "Resolution",
    "ResolutionStatus",
]
