# =============================================================================
# lib/dioceses.py - Supported National Calendars
# =============================================================================
# The closed set of diocese codes the API accepts, and the identifier the
# calendar engine uses for each. Adding a diocese is a code change here.
#
# to_engine_identifier() returns unknown codes unchanged, so callers must
# check is_supported() first.
# =============================================================================

from enum import Enum


class DioceseCode(str, Enum):
    """Supported diocese codes, in declaration order."""
    UNITED_STATES = "united-states"
    ENGLAND = "england"
    ITALY = "italy"
    FRANCE = "france"
    SPAIN = "spain"
    GERMANY = "germany"


DEFAULT_DIOCESE = DioceseCode.UNITED_STATES.value

SUPPORTED_DIOCESES: tuple[str, ...] = tuple(code.value for code in DioceseCode)

# Engine identifiers are camelCase country names
DIOCESE_TO_COUNTRY: dict[str, str] = {
    DioceseCode.UNITED_STATES.value: "unitedStates",
    DioceseCode.ENGLAND.value: "england",
    DioceseCode.ITALY.value: "italy",
    DioceseCode.FRANCE.value: "france",
    DioceseCode.SPAIN.value: "spain",
    DioceseCode.GERMANY.value: "germany",
}


def is_supported(code: str) -> bool:
    """Exact, case-sensitive membership test."""
    return code in SUPPORTED_DIOCESES


def to_engine_identifier(code: str) -> str:
    """
    Map a diocese code to the engine's country identifier.

    Example:
        to_engine_identifier("united-states")  # "unitedStates"
        to_engine_identifier("atlantis")       # "atlantis" (unchanged)
    """
    return DIOCESE_TO_COUNTRY.get(code, code)


def list_dioceses() -> list[str]:
    """All supported codes in declaration order."""
    return list(SUPPORTED_DIOCESES)
