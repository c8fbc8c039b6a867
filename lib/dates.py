# =============================================================================
# lib/dates.py - Strict Date Parsing and Formatting
# =============================================================================
# Handles the YYYY-MM-DD strings used in URLs and responses.
#
# Parsing is strict: exactly four digits, dash, two digits, dash, two digits,
# and the numbers must name a real Gregorian date. Dates carry no timezone,
# so a string always maps to the same calendar day on any host.
#
# Usage:
#   from lib.dates import parse_date, format_date
#   d = parse_date("2026-12-25")   # date(2026, 12, 25)
#   parse_date("2026-02-30")       # None
#   format_date(d)                 # "2026-12-25"
# =============================================================================

import re
from datetime import date, datetime, timezone

# [0-9] rather than \d: \d also matches non-ASCII digits
DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_date(value: str) -> date | None:
    """
    Parse a YYYY-MM-DD string into a date.

    Args:
        value: The string to parse

    Returns:
        The date, or None if the string is malformed or names an impossible
        date (e.g. "2026-02-30", "2025-02-29", "2026-13-01")
    """
    if not isinstance(value, str):
        return None

    # fullmatch: "$" would accept a trailing newline
    match = DATE_PATTERN.fullmatch(value)
    if not match:
        return None

    year, month, day = (int(part) for part in match.groups())

    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_valid_date(value: str) -> bool:
    """Check whether a string is a valid YYYY-MM-DD date."""
    return parse_date(value) is not None


def format_date(value: date) -> str:
    """
    Format a date as YYYY-MM-DD.

    Inverse of parse_date: format_date(parse_date(s)) == s for any valid s.
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def today_utc() -> date:
    """Today's date in UTC."""
    return datetime.now(timezone.utc).date()


def today_string() -> str:
    """Today's date in UTC as YYYY-MM-DD."""
    return format_date(today_utc())
