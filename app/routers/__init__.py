# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - today.py: Liturgical day for the current UTC date
# - date.py: Liturgical day for an explicit date
# - calendar.py: Every liturgical day of a year
# - dioceses.py: Supported diocese codes
#
# Each router is mounted in main.py at the root path.
# =============================================================================

from . import calendar
from . import date
from . import dioceses
from . import health
from . import today

__all__ = [
    "calendar",
    "date",
    "dioceses",
    "health",
    "today",
]
