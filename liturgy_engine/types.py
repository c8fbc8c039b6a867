# =============================================================================
# liturgy_engine/types.py - Engine Types
# =============================================================================
# Defines the values produced by the calendar engine:
# - CelebrationType: rank tag of a celebration
# - LiturgicalSeason / LiturgicalColor: keyed enums
# - RawLiturgicalDay: one computed day, as handed to callers
# - Celebration: an internal candidate competing for a date
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


# =============================================================================
# Enums
# =============================================================================

class CelebrationType(str, Enum):
    """Rank tags, in the spelling callers match against."""
    SOLEMNITY = "SOLEMNITY"
    SUNDAY = "SUNDAY"
    TRIDUUM = "TRIDUUM"
    HOLY_WEEK = "HOLY_WEEK"
    FEAST = "FEAST"
    MEMORIAL = "MEMORIAL"
    OPT_MEMORIAL = "OPT_MEMORIAL"
    COMMEMORATION = "COMMEMORATION"
    WEEKDAY = "WEEKDAY"


class LiturgicalSeason(str, Enum):
    """Seasons of the liturgical year."""
    ADVENT = "ADVENT"
    CHRISTMASTIDE = "CHRISTMASTIDE"
    EARLY_ORDINARY_TIME = "EARLY_ORDINARY_TIME"
    LENT = "LENT"
    HOLY_WEEK = "HOLY_WEEK"
    EASTER = "EASTER"
    LATER_ORDINARY_TIME = "LATER_ORDINARY_TIME"

    @property
    def key(self) -> str:
        return self.value


class LiturgicalColor(str, Enum):
    """Vestment colors."""
    WHITE = "WHITE"
    RED = "RED"
    GREEN = "GREEN"
    PURPLE = "PURPLE"
    ROSE = "ROSE"
    BLACK = "BLACK"

    @property
    def key(self) -> str:
        return self.value


# =============================================================================
# Records
# =============================================================================

@dataclass(frozen=True)
class RawLiturgicalDay:
    """
    One day of a computed calendar.

    `moment` is a date, or an ISO string whose date part precedes any "T".
    `liturgical_color` is a single color, a list of colors, or None.
    """
    moment: date | str
    name: str
    key: str
    type: str
    season: LiturgicalSeason | None = None
    liturgical_color: LiturgicalColor | list[LiturgicalColor] | None = None
    source: str = "temporale"


@dataclass(frozen=True)
class Celebration:
    """
    A candidate celebration for one date.

    Lower precedence wins, following the table of liturgical days
    (1 = Paschal Triduum ... 13 = ordinary weekdays).
    """
    key: str
    name: str
    type: CelebrationType
    precedence: int
    color: LiturgicalColor | tuple[LiturgicalColor, ...]
    source: str = "temporale"

    def colors(self) -> LiturgicalColor | list[LiturgicalColor]:
        if isinstance(self.color, tuple):
            return list(self.color)
        return self.color
