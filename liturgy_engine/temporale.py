# =============================================================================
# liturgy_engine/temporale.py - Proper of Time
# =============================================================================
# Computes the movable skeleton of one calendar year (Easter, Advent,
# Epiphany, ...) and the seasonal celebration of every date:
# - TemporaleDates: anchor dates for one year and national options
# - season_of(): which season a date falls in
# - temporale_celebration(): the Sunday/weekday/feast of the season
# - movable_celebrations(): memorials and solemnities tied to Easter/Pentecost
#
# Easter uses the anonymous Gregorian (Meeus/Jones/Butcher) algorithm.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from liturgy_engine.types import (
    Celebration,
    CelebrationType as T,
    LiturgicalColor as C,
    LiturgicalSeason as S,
)

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

_UNITS = [
    "", "First", "Second", "Third", "Fourth", "Fifth", "Sixth", "Seventh",
    "Eighth", "Ninth", "Tenth", "Eleventh", "Twelfth", "Thirteenth",
    "Fourteenth", "Fifteenth", "Sixteenth", "Seventeenth", "Eighteenth",
    "Nineteenth",
]
_TENS = {20: "Twent", 30: "Thirt"}


# =============================================================================
# Date Helpers
# =============================================================================

def ordinal_word(n: int) -> str:
    """
    Spell out an ordinal up to 39.

    Example:
        ordinal_word(3)   # "Third"
        ordinal_word(21)  # "Twenty-first"
    """
    if 0 < n < 20:
        return _UNITS[n]
    tens, unit = divmod(n, 10)
    stem = _TENS[tens * 10]
    if unit == 0:
        return f"{stem}ieth"
    return f"{stem}y-{_UNITS[unit].lower()}"


def easter_date(year: int) -> date:
    """Return Easter Sunday of a Gregorian year."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def sunday_on_or_before(d: date) -> date:
    return d - timedelta(days=(d.weekday() + 1) % 7)


def sunday_on_or_after(d: date) -> date:
    return d + timedelta(days=(6 - d.weekday()) % 7)


def advent_start(year: int) -> date:
    """First Sunday of Advent: four Sundays before Christmas."""
    christmas = date(year, 12, 25)
    offset = (christmas.weekday() + 1) % 7
    fourth_sunday = christmas - timedelta(days=offset or 7)
    return fourth_sunday - timedelta(weeks=3)


def holy_family(year: int) -> date:
    """Sunday within the Christmas octave, or December 30 when there is none."""
    sunday = sunday_on_or_after(date(year, 12, 26))
    if sunday.year == year:
        return sunday
    return date(year, 12, 30)


# =============================================================================
# Anchor Dates
# =============================================================================

@dataclass(frozen=True)
class TemporaleDates:
    """Anchor dates of the proper of time for one calendar year."""
    year: int
    epiphany_on_sunday: bool
    epiphany: date
    baptism: date
    ash_wednesday: date
    palm_sunday: date
    easter: date
    ascension: date
    pentecost: date
    trinity: date
    corpus_christi: date
    sacred_heart: date
    christ_the_king: date
    advent_start: date
    christmas: date
    holy_family: date

    @property
    def first_sunday_of_lent(self) -> date:
        return self.ash_wednesday + timedelta(days=4)

    @property
    def holy_thursday(self) -> date:
        return self.easter - timedelta(days=3)


def compute_dates(
    year: int,
    epiphany_on_sunday: bool = False,
    ascension_on_sunday: bool = False,
) -> TemporaleDates:
    """
    Compute the anchor dates for a calendar year.

    Args:
        year: Gregorian year
        epiphany_on_sunday: Celebrate Epiphany on the Sunday between Jan 2 and 8
        ascension_on_sunday: Transfer Ascension to the Seventh Sunday of Easter
    """
    if epiphany_on_sunday:
        epiphany = sunday_on_or_after(date(year, 1, 2))
    else:
        epiphany = date(year, 1, 6)

    # Epiphany on Jan 7 or 8 pushes the Baptism to the following Monday
    if epiphany_on_sunday and epiphany.day >= 7:
        baptism = epiphany + timedelta(days=1)
    else:
        baptism = sunday_on_or_after(epiphany + timedelta(days=1))

    easter = easter_date(year)
    pentecost = easter + timedelta(days=49)
    advent = advent_start(year)

    return TemporaleDates(
        year=year,
        epiphany_on_sunday=epiphany_on_sunday,
        epiphany=epiphany,
        baptism=baptism,
        ash_wednesday=easter - timedelta(days=46),
        palm_sunday=easter - timedelta(days=7),
        easter=easter,
        ascension=easter + timedelta(days=42 if ascension_on_sunday else 39),
        pentecost=pentecost,
        trinity=pentecost + timedelta(days=7),
        corpus_christi=pentecost + timedelta(days=14),
        sacred_heart=pentecost + timedelta(days=19),
        christ_the_king=advent - timedelta(days=7),
        advent_start=advent,
        christmas=date(year, 12, 25),
        holy_family=holy_family(year),
    )


# =============================================================================
# Seasons
# =============================================================================

def season_of(d: date, dates: TemporaleDates) -> S:
    """Return the liturgical season containing `d`."""
    if d >= dates.christmas:
        return S.CHRISTMASTIDE
    if d >= dates.advent_start:
        return S.ADVENT
    if d > dates.pentecost:
        return S.LATER_ORDINARY_TIME
    if d >= dates.easter:
        return S.EASTER
    if d >= dates.palm_sunday:
        return S.HOLY_WEEK
    if d >= dates.ash_wednesday:
        return S.LENT
    if d > dates.baptism:
        return S.EARLY_ORDINARY_TIME
    return S.CHRISTMASTIDE


def _week_of(d: date, first_sunday: date) -> int:
    return (sunday_on_or_before(d) - first_sunday).days // 7 + 1


def _ordinary_week(d: date, dates: TemporaleDates) -> int:
    if d < dates.easter:
        return _week_of(d, sunday_on_or_before(dates.baptism))
    return 34 - (dates.christ_the_king - sunday_on_or_before(d)).days // 7


# =============================================================================
# Seasonal Celebrations
# =============================================================================

def _sunday(key: str, name: str, precedence: int, color: C) -> Celebration:
    return Celebration(key, name, T.SUNDAY, precedence, color)


def _weekday(key: str, name: str, precedence: int, color: C) -> Celebration:
    return Celebration(key, name, T.WEEKDAY, precedence, color)


def _fixed_solemnities(d: date, dates: TemporaleDates) -> Celebration | None:
    """Celebrations of the Lord that displace the day of the season."""
    if d == dates.easter:
        return Celebration("easter_sunday", "Easter Sunday of the Resurrection of the Lord", T.SOLEMNITY, 1, C.WHITE)
    if d == dates.holy_thursday:
        return Celebration("holy_thursday", "Thursday of the Lord's Supper", T.TRIDUUM, 1, C.WHITE)
    if d == dates.easter - timedelta(days=2):
        return Celebration("good_friday", "Friday of the Passion of the Lord", T.TRIDUUM, 1, C.RED)
    if d == dates.easter - timedelta(days=1):
        return Celebration("holy_saturday", "Holy Saturday", T.TRIDUUM, 1, C.WHITE)
    if d == dates.christmas:
        return Celebration("christmas", "The Nativity of the Lord", T.SOLEMNITY, 2, C.WHITE)
    if d == dates.epiphany:
        return Celebration("epiphany", "The Epiphany of the Lord", T.SOLEMNITY, 2, C.WHITE)
    if d == dates.ascension:
        return Celebration("ascension", "The Ascension of the Lord", T.SOLEMNITY, 2, C.WHITE)
    if d == dates.pentecost:
        return Celebration("pentecost_sunday", "Pentecost Sunday", T.SOLEMNITY, 2, C.RED)
    if d == dates.palm_sunday:
        return _sunday("palm_sunday", "Palm Sunday of the Passion of the Lord", 2, C.RED)
    if d == dates.ash_wednesday:
        return _weekday("ash_wednesday", "Ash Wednesday", 2, C.PURPLE)
    if d == dates.trinity:
        return Celebration("trinity_sunday", "The Most Holy Trinity", T.SOLEMNITY, 3, C.WHITE)
    if d == dates.corpus_christi:
        return Celebration("corpus_christi", "The Most Holy Body and Blood of Christ", T.SOLEMNITY, 3, C.WHITE)
    if d == dates.christ_the_king:
        return Celebration(
            "christ_the_king",
            "Our Lord Jesus Christ, King of the Universe",
            T.SOLEMNITY, 3, C.WHITE,
        )
    if d == dates.holy_family:
        return Celebration("holy_family", "The Holy Family of Jesus, Mary and Joseph", T.FEAST, 5, C.WHITE)
    if d == dates.baptism:
        return Celebration("baptism_of_the_lord", "The Baptism of the Lord", T.FEAST, 5, C.WHITE)
    return None


def temporale_celebration(d: date, dates: TemporaleDates) -> Celebration:
    """Return the proper-of-time celebration for `d`."""
    fixed = _fixed_solemnities(d, dates)
    if fixed is not None:
        return fixed

    season = season_of(d, dates)
    weekday = WEEKDAY_NAMES[d.weekday()]
    is_sunday = d.weekday() == 6

    if season == S.ADVENT:
        week = _week_of(d, dates.advent_start)
        if is_sunday:
            color = C.ROSE if week == 3 else C.PURPLE
            return _sunday(f"advent_{week}_sunday", f"{ordinal_word(week)} Sunday of Advent", 2, color)
        if d.day >= 17:
            return _weekday(f"advent_december_{d.day}", f"December {d.day}", 9, C.PURPLE)
        return _weekday(
            f"advent_{week}_{weekday.lower()}",
            f"{weekday} of the {ordinal_word(week)} Week of Advent",
            13, C.PURPLE,
        )

    if season == S.CHRISTMASTIDE:
        if d.month == 12:
            octave_day = d.day - 24
            return _weekday(
                f"christmas_octave_day_{octave_day}",
                f"{ordinal_word(octave_day)} Day within the Octave of Christmas",
                9, C.WHITE,
            )
        if d.day == 1:
            return _weekday("christmas_octave_day_8", "Octave Day of Christmas", 9, C.WHITE)
        if is_sunday and not dates.epiphany_on_sunday:
            return _sunday("christmas_2_sunday", "Second Sunday after Christmas", 6, C.WHITE)
        when = "after" if d > dates.epiphany else "before"
        return _weekday(
            f"christmastide_{d.month:02d}_{d.day:02d}",
            f"{weekday} {when} Epiphany",
            13, C.WHITE,
        )

    if season == S.LENT:
        if d < dates.first_sunday_of_lent:
            return _weekday(f"{weekday.lower()}_after_ash_wednesday", f"{weekday} after Ash Wednesday", 9, C.PURPLE)
        week = _week_of(d, dates.first_sunday_of_lent)
        if is_sunday:
            color = C.ROSE if week == 4 else C.PURPLE
            return _sunday(f"lent_{week}_sunday", f"{ordinal_word(week)} Sunday of Lent", 2, color)
        return _weekday(
            f"lent_{week}_{weekday.lower()}",
            f"{weekday} of the {ordinal_word(week)} Week of Lent",
            9, C.PURPLE,
        )

    if season == S.HOLY_WEEK:
        return Celebration(f"holy_{weekday.lower()}", f"{weekday} of Holy Week", T.HOLY_WEEK, 2, C.PURPLE)

    if season == S.EASTER:
        week = _week_of(d, dates.easter)
        if week == 1:
            return Celebration(
                f"easter_{weekday.lower()}",
                f"{weekday} within the Octave of Easter",
                T.SOLEMNITY, 2, C.WHITE,
            )
        if is_sunday:
            name = f"{ordinal_word(week)} Sunday of Easter"
            if week == 2:
                name += " (Divine Mercy Sunday)"
            return _sunday(f"easter_{week}_sunday", name, 2, C.WHITE)
        return _weekday(
            f"easter_{week}_{weekday.lower()}",
            f"{weekday} of the {ordinal_word(week)} Week of Easter",
            13, C.WHITE,
        )

    week = _ordinary_week(d, dates)
    if is_sunday:
        return _sunday(
            f"ordinary_time_{week}_sunday",
            f"{ordinal_word(week)} Sunday of Ordinary Time",
            6, C.GREEN,
        )
    return _weekday(
        f"ordinary_time_{week}_{weekday.lower()}",
        f"{weekday} of the {ordinal_word(week)} Week of Ordinary Time",
        13, C.GREEN,
    )


def movable_celebrations(dates: TemporaleDates) -> list[tuple[date, Celebration]]:
    """Celebrations anchored on Pentecost that compete with the sanctorale."""
    return [
        (
            dates.pentecost + timedelta(days=1),
            Celebration(
                "mary_mother_of_the_church",
                "The Blessed Virgin Mary, Mother of the Church",
                T.MEMORIAL, 10, C.WHITE, source="general",
            ),
        ),
        (
            dates.sacred_heart,
            Celebration(
                "sacred_heart",
                "The Most Sacred Heart of Jesus",
                T.SOLEMNITY, 3, C.WHITE, source="general",
            ),
        ),
        (
            dates.sacred_heart + timedelta(days=1),
            Celebration(
                "immaculate_heart",
                "The Immaculate Heart of the Blessed Virgin Mary",
                T.MEMORIAL, 10, C.WHITE, source="general",
            ),
        ),
    ]
