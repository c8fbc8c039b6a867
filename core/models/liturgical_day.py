# =============================================================================
# core/models/liturgical_day.py - Liturgical Day Schemas
# =============================================================================
# These models define the public API contract:
# - LiturgicalDayResponse: one date's celebration, rank, season and colors
# - LiturgicalYearResponse: every day of one year for one diocese
# - DioceseListResponse: the supported diocese codes
# - ErrorResponse: the body of every failed request
#
# Field names on the wire are camelCase (isFeast, isSolemnity, isOptional);
# Python code uses snake_case attributes.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class LiturgicalDayResponse(BaseModel):
    """
    Normalized liturgical day for one date and diocese.

    Immutable once built. The three rank flags are derived from `rank`;
    an unrecognized rank leaves all of them false.

    Example:
        {
            "date": "2026-12-25",
            "id": "christmas",
            "name": "The Nativity of the Lord",
            "rank": "SOLEMNITY",
            "season": "CHRISTMASTIDE",
            "color": ["white"],
            "isFeast": false,
            "isSolemnity": true,
            "isOptional": false
        }
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str = Field(
        ...,
        pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$",
        description="ISO date (YYYY-MM-DD)"
    )

    id: str = Field(
        default="",
        description="Unique identifier of the celebration"
    )

    name: str = Field(
        default="",
        description="Display name of the celebration"
    )

    # Raw engine rank, e.g. SOLEMNITY, FEAST, MEMORIAL, OPT_MEMORIAL, WEEKDAY
    rank: str = Field(
        default="",
        description="Liturgical rank as reported by the calendar engine"
    )

    season: str = Field(
        default="",
        description="Liturgical season key"
    )

    color: list[str] = Field(
        default_factory=list,
        description="Liturgical colors, lowercase, in engine order"
    )

    is_feast: bool = Field(
        default=False,
        alias="isFeast",
        description="True when rank is FEAST"
    )

    is_solemnity: bool = Field(
        default=False,
        alias="isSolemnity",
        description="True when rank is SOLEMNITY"
    )

    is_optional: bool = Field(
        default=False,
        alias="isOptional",
        description="True when rank is OPT_MEMORIAL"
    )


class LiturgicalYearResponse(BaseModel):
    """Every liturgical day of one year, sorted by date."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., description="Calendar year")
    diocese: str = Field(..., description="Diocese code")
    days: list[LiturgicalDayResponse] = Field(
        default_factory=list,
        description="One entry per date, in date order"
    )


class DioceseListResponse(BaseModel):
    """Supported diocese codes."""
    dioceses: list[str] = Field(..., description="Codes in declaration order")
    default: str = Field(..., description="Diocese used when none is given")


class ErrorResponse(BaseModel):
    """
    Error body returned by every failed request.

    Example:
        {
            "error": "INVALID_DIOCESE",
            "message": "Invalid diocese 'mexico'. Supported dioceses: ...",
            "status": 400
        }
    """
    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    status: int = Field(..., description="HTTP status code")
    suggestion: str | None = Field(default=None, description="How to fix the request")
    details: dict | None = Field(default=None, description="Additional context")
