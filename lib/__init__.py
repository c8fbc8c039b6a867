# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - dates.py: Strict YYYY-MM-DD parsing and formatting
# - dioceses.py: Supported diocese codes and engine identifiers
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.dates import (
    format_date,
    is_valid_date,
    parse_date,
    today_string,
    today_utc,
)
from lib.dioceses import (
    DEFAULT_DIOCESE,
    DIOCESE_TO_COUNTRY,
    SUPPORTED_DIOCESES,
    DioceseCode,
    is_supported,
    list_dioceses,
    to_engine_identifier,
)

__all__ = [
    # Dates
    "format_date",
    "is_valid_date",
    "parse_date",
    "today_string",
    "today_utc",
    # Dioceses
    "DEFAULT_DIOCESE",
    "DIOCESE_TO_COUNTRY",
    "SUPPORTED_DIOCESES",
    "DioceseCode",
    "is_supported",
    "list_dioceses",
    "to_engine_identifier",
]
