# =============================================================================
# core/services/normalizer.py - Engine Record Normalization
# =============================================================================
# Converts a raw engine record into the public LiturgicalDayResponse.
# =============================================================================

from typing import Any

from core.models.liturgical_day import LiturgicalDayResponse
from core.services.calendar_cache import record_date_string


def _key_of(value: Any) -> str:
    """Key of an engine enum/object, or the value itself for plain strings."""
    key = getattr(value, "key", value)
    return str(key) if key is not None else ""


def normalize_colors(raw_color: Any) -> list[str]:
    """
    Lowercase color keys in engine order.

    A single color becomes a one-element list; a missing color an empty one.
    """
    if not raw_color:
        return []
    if isinstance(raw_color, (list, tuple)):
        return [_key_of(color).lower() for color in raw_color]
    return [_key_of(raw_color).lower()]


def to_liturgical_day_response(raw: Any) -> LiturgicalDayResponse:
    """
    Build the public response for one raw engine record.

    Args:
        raw: A RawLiturgicalDay (or any object with the same attributes)

    Returns:
        LiturgicalDayResponse with rank flags derived from the record's type
    """
    rank = getattr(raw, "type", None) or ""

    return LiturgicalDayResponse(
        date=record_date_string(raw),
        id=getattr(raw, "key", None) or "",
        name=getattr(raw, "name", None) or "",
        rank=rank,
        season=_key_of(getattr(raw, "season", None)),
        color=normalize_colors(getattr(raw, "liturgical_color", None)),
        is_feast=rank == "FEAST",
        is_solemnity=rank == "SOLEMNITY",
        is_optional=rank == "OPT_MEMORIAL",
    )
