# =============================================================================
# liturgy_engine/sanctorale.py - Proper of Saints and National Calendars
# =============================================================================
# Fixed-date celebrations of the General Roman Calendar, plus the national
# calendars the engine knows about. A national proper with the same key as a
# general entry replaces it (e.g. St George is a feast in England).
#
# Usage:
#   from liturgy_engine.sanctorale import get_national_calendar
#   national = get_national_calendar("england")
#   for entry in national.fixed_celebrations(): ...
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable

from liturgy_engine.types import (
    Celebration,
    CelebrationType as T,
    LiturgicalColor as C,
)


# =============================================================================
# Entries
# =============================================================================

def precedence_for(rank: T, proper: bool = False, of_the_lord: bool = False) -> int:
    """
    Map a sanctorale rank to its place in the table of liturgical days.

    Proper (national) celebrations rank just below their general counterparts.
    """
    if rank in (T.SOLEMNITY, T.COMMEMORATION):
        return 4 if proper and rank == T.SOLEMNITY else 3
    if rank == T.FEAST:
        if of_the_lord:
            return 5
        return 8 if proper else 7
    if rank == T.MEMORIAL:
        return 11 if proper else 10
    return 12


@dataclass(frozen=True)
class FixedCelebration:
    """A celebration kept on the same month and day every year."""
    month: int
    day: int
    key: str
    name: str
    rank: T
    color: C | tuple[C, ...] = C.WHITE
    of_the_lord: bool = False

    def on(self, year: int) -> date:
        return date(year, self.month, self.day)

    def to_celebration(self, source: str, proper: bool = False) -> Celebration:
        return Celebration(
            key=self.key,
            name=self.name,
            type=self.rank,
            precedence=precedence_for(self.rank, proper, self.of_the_lord),
            color=self.color,
            source=source,
        )


@dataclass(frozen=True)
class MovableCelebration:
    """A national celebration whose date is computed per year."""
    key: str
    name: str
    rank: T
    resolve: Callable[[int], date]
    color: C = C.WHITE

    def to_celebration(self, source: str) -> Celebration:
        return Celebration(
            key=self.key,
            name=self.name,
            type=self.rank,
            precedence=precedence_for(self.rank, proper=True),
            color=self.color,
            source=source,
        )


def _fourth_thursday_of_november(year: int) -> date:
    first = date(year, 11, 1)
    first_thursday = first + timedelta(days=(3 - first.weekday()) % 7)
    return first_thursday + timedelta(weeks=3)


F = FixedCelebration

GENERAL_ROMAN_CALENDAR: tuple[FixedCelebration, ...] = (
    # January
    F(1, 1, "mary_mother_of_god", "Mary, the Holy Mother of God", T.SOLEMNITY),
    F(1, 2, "basil_and_gregory", "Saints Basil the Great and Gregory Nazianzen, Bishops and Doctors", T.MEMORIAL),
    F(1, 3, "most_holy_name_of_jesus", "The Most Holy Name of Jesus", T.OPT_MEMORIAL),
    F(1, 13, "hilary", "Saint Hilary, Bishop and Doctor", T.OPT_MEMORIAL),
    F(1, 17, "anthony_of_egypt", "Saint Anthony, Abbot", T.MEMORIAL),
    F(1, 20, "sebastian", "Saint Sebastian, Martyr", T.OPT_MEMORIAL, C.RED),
    F(1, 21, "agnes", "Saint Agnes, Virgin and Martyr", T.MEMORIAL, C.RED),
    F(1, 24, "francis_de_sales", "Saint Francis de Sales, Bishop and Doctor", T.MEMORIAL),
    F(1, 25, "conversion_of_paul", "The Conversion of Saint Paul the Apostle", T.FEAST),
    F(1, 26, "timothy_and_titus", "Saints Timothy and Titus, Bishops", T.MEMORIAL),
    F(1, 28, "thomas_aquinas", "Saint Thomas Aquinas, Priest and Doctor", T.MEMORIAL),
    F(1, 31, "john_bosco", "Saint John Bosco, Priest", T.MEMORIAL),
    # February
    F(2, 2, "presentation_of_the_lord", "The Presentation of the Lord", T.FEAST, of_the_lord=True),
    F(2, 3, "blaise", "Saint Blaise, Bishop and Martyr", T.OPT_MEMORIAL, C.RED),
    F(2, 5, "agatha", "Saint Agatha, Virgin and Martyr", T.MEMORIAL, C.RED),
    F(2, 6, "paul_miki_and_companions", "Saints Paul Miki and Companions, Martyrs", T.MEMORIAL, C.RED),
    F(2, 10, "scholastica", "Saint Scholastica, Virgin", T.MEMORIAL),
    F(2, 11, "our_lady_of_lourdes", "Our Lady of Lourdes", T.OPT_MEMORIAL),
    F(2, 14, "cyril_and_methodius", "Saints Cyril, Monk, and Methodius, Bishop", T.MEMORIAL),
    F(2, 22, "chair_of_peter", "The Chair of Saint Peter the Apostle", T.FEAST),
    # March
    F(3, 7, "perpetua_and_felicity", "Saints Perpetua and Felicity, Martyrs", T.MEMORIAL, C.RED),
    F(3, 17, "patrick", "Saint Patrick, Bishop", T.OPT_MEMORIAL),
    F(3, 19, "joseph_spouse_of_mary", "Saint Joseph, Spouse of the Blessed Virgin Mary", T.SOLEMNITY),
    F(3, 25, "annunciation", "The Annunciation of the Lord", T.SOLEMNITY),
    # April
    F(4, 23, "george", "Saint George, Martyr", T.OPT_MEMORIAL, C.RED),
    F(4, 25, "mark", "Saint Mark, Evangelist", T.FEAST, C.RED),
    F(4, 29, "catherine_of_siena", "Saint Catherine of Siena, Virgin and Doctor", T.MEMORIAL),
    # May
    F(5, 2, "athanasius", "Saint Athanasius, Bishop and Doctor", T.MEMORIAL),
    F(5, 3, "philip_and_james", "Saints Philip and James, Apostles", T.FEAST, C.RED),
    F(5, 13, "our_lady_of_fatima", "Our Lady of Fatima", T.OPT_MEMORIAL),
    F(5, 14, "matthias", "Saint Matthias, Apostle", T.FEAST, C.RED),
    F(5, 26, "philip_neri", "Saint Philip Neri, Priest", T.MEMORIAL),
    F(5, 31, "visitation", "The Visitation of the Blessed Virgin Mary", T.FEAST),
    # June
    F(6, 1, "justin", "Saint Justin, Martyr", T.MEMORIAL, C.RED),
    F(6, 3, "charles_lwanga_and_companions", "Saints Charles Lwanga and Companions, Martyrs", T.MEMORIAL, C.RED),
    F(6, 5, "boniface", "Saint Boniface, Bishop and Martyr", T.MEMORIAL, C.RED),
    F(6, 11, "barnabas", "Saint Barnabas, Apostle", T.MEMORIAL, C.RED),
    F(6, 13, "anthony_of_padua", "Saint Anthony of Padua, Priest and Doctor", T.MEMORIAL),
    F(6, 21, "aloysius_gonzaga", "Saint Aloysius Gonzaga, Religious", T.MEMORIAL),
    F(6, 22, "john_fisher_and_thomas_more", "Saints John Fisher, Bishop, and Thomas More, Martyrs", T.OPT_MEMORIAL, C.RED),
    F(6, 24, "nativity_of_john_the_baptist", "The Nativity of Saint John the Baptist", T.SOLEMNITY),
    F(6, 28, "irenaeus", "Saint Irenaeus, Bishop and Doctor", T.MEMORIAL, C.RED),
    F(6, 29, "peter_and_paul", "Saints Peter and Paul, Apostles", T.SOLEMNITY, C.RED),
    # July
    F(7, 3, "thomas_apostle", "Saint Thomas, Apostle", T.FEAST, C.RED),
    F(7, 11, "benedict", "Saint Benedict, Abbot", T.MEMORIAL),
    F(7, 15, "bonaventure", "Saint Bonaventure, Bishop and Doctor", T.MEMORIAL),
    F(7, 22, "mary_magdalene", "Saint Mary Magdalene", T.FEAST),
    F(7, 25, "james_apostle", "Saint James, Apostle", T.FEAST, C.RED),
    F(7, 26, "joachim_and_anne", "Saints Joachim and Anne, Parents of the Blessed Virgin Mary", T.MEMORIAL),
    F(7, 29, "martha_mary_and_lazarus", "Saints Martha, Mary and Lazarus", T.MEMORIAL),
    F(7, 31, "ignatius_of_loyola", "Saint Ignatius of Loyola, Priest", T.MEMORIAL),
    # August
    F(8, 1, "alphonsus_liguori", "Saint Alphonsus Liguori, Bishop and Doctor", T.MEMORIAL),
    F(8, 4, "john_vianney", "Saint John Vianney, Priest", T.MEMORIAL),
    F(8, 6, "transfiguration", "The Transfiguration of the Lord", T.FEAST, of_the_lord=True),
    F(8, 8, "dominic", "Saint Dominic, Priest", T.MEMORIAL),
    F(8, 10, "lawrence", "Saint Lawrence, Deacon and Martyr", T.FEAST, C.RED),
    F(8, 11, "clare", "Saint Clare, Virgin", T.MEMORIAL),
    F(8, 14, "maximilian_kolbe", "Saint Maximilian Kolbe, Priest and Martyr", T.MEMORIAL, C.RED),
    F(8, 15, "assumption", "The Assumption of the Blessed Virgin Mary", T.SOLEMNITY),
    F(8, 20, "bernard", "Saint Bernard, Abbot and Doctor", T.MEMORIAL),
    F(8, 21, "pius_x", "Saint Pius X, Pope", T.MEMORIAL),
    F(8, 22, "queenship_of_mary", "The Queenship of the Blessed Virgin Mary", T.MEMORIAL),
    F(8, 24, "bartholomew", "Saint Bartholomew, Apostle", T.FEAST, C.RED),
    F(8, 27, "monica", "Saint Monica", T.MEMORIAL),
    F(8, 28, "augustine", "Saint Augustine, Bishop and Doctor", T.MEMORIAL),
    F(8, 29, "passion_of_john_the_baptist", "The Passion of Saint John the Baptist", T.MEMORIAL, C.RED),
    # September
    F(9, 3, "gregory_the_great", "Saint Gregory the Great, Pope and Doctor", T.MEMORIAL),
    F(9, 8, "nativity_of_mary", "The Nativity of the Blessed Virgin Mary", T.FEAST),
    F(9, 13, "john_chrysostom", "Saint John Chrysostom, Bishop and Doctor", T.MEMORIAL),
    F(9, 14, "exaltation_of_the_holy_cross", "The Exaltation of the Holy Cross", T.FEAST, C.RED, of_the_lord=True),
    F(9, 15, "our_lady_of_sorrows", "Our Lady of Sorrows", T.MEMORIAL),
    F(9, 16, "cornelius_and_cyprian", "Saints Cornelius, Pope, and Cyprian, Bishop, Martyrs", T.MEMORIAL, C.RED),
    F(9, 20, "andrew_kim_and_companions", "Saints Andrew Kim Tae-gon, Paul Chong Ha-sang and Companions, Martyrs", T.MEMORIAL, C.RED),
    F(9, 21, "matthew", "Saint Matthew, Apostle and Evangelist", T.FEAST, C.RED),
    F(9, 23, "pius_of_pietrelcina", "Saint Pius of Pietrelcina, Priest", T.MEMORIAL),
    F(9, 27, "vincent_de_paul", "Saint Vincent de Paul, Priest", T.MEMORIAL),
    F(9, 29, "archangels", "Saints Michael, Gabriel and Raphael, Archangels", T.FEAST),
    F(9, 30, "jerome", "Saint Jerome, Priest and Doctor", T.MEMORIAL),
    # October
    F(10, 1, "therese_of_the_child_jesus", "Saint Thérèse of the Child Jesus, Virgin and Doctor", T.MEMORIAL),
    F(10, 2, "guardian_angels", "The Holy Guardian Angels", T.MEMORIAL),
    F(10, 4, "francis_of_assisi", "Saint Francis of Assisi", T.MEMORIAL),
    F(10, 7, "our_lady_of_the_rosary", "Our Lady of the Rosary", T.MEMORIAL),
    F(10, 15, "teresa_of_jesus", "Saint Teresa of Jesus, Virgin and Doctor", T.MEMORIAL),
    F(10, 16, "hedwig", "Saint Hedwig, Religious", T.OPT_MEMORIAL),
    F(10, 17, "ignatius_of_antioch", "Saint Ignatius of Antioch, Bishop and Martyr", T.MEMORIAL, C.RED),
    F(10, 18, "luke", "Saint Luke, Evangelist", T.FEAST, C.RED),
    F(10, 22, "john_paul_ii", "Saint John Paul II, Pope", T.OPT_MEMORIAL),
    F(10, 28, "simon_and_jude", "Saints Simon and Jude, Apostles", T.FEAST, C.RED),
    # November
    F(11, 1, "all_saints", "All Saints", T.SOLEMNITY),
    F(11, 2, "all_souls", "The Commemoration of All the Faithful Departed", T.COMMEMORATION, (C.PURPLE, C.BLACK)),
    F(11, 4, "charles_borromeo", "Saint Charles Borromeo, Bishop", T.MEMORIAL),
    F(11, 9, "dedication_of_the_lateran_basilica", "The Dedication of the Lateran Basilica", T.FEAST, of_the_lord=True),
    F(11, 10, "leo_the_great", "Saint Leo the Great, Pope and Doctor", T.MEMORIAL),
    F(11, 11, "martin_of_tours", "Saint Martin of Tours, Bishop", T.MEMORIAL),
    F(11, 12, "josaphat", "Saint Josaphat, Bishop and Martyr", T.MEMORIAL, C.RED),
    F(11, 15, "albert_the_great", "Saint Albert the Great, Bishop and Doctor", T.OPT_MEMORIAL),
    F(11, 17, "elizabeth_of_hungary", "Saint Elizabeth of Hungary, Religious", T.MEMORIAL),
    F(11, 21, "presentation_of_mary", "The Presentation of the Blessed Virgin Mary", T.MEMORIAL),
    F(11, 22, "cecilia", "Saint Cecilia, Virgin and Martyr", T.MEMORIAL, C.RED),
    F(11, 24, "andrew_dung_lac_and_companions", "Saints Andrew Dung-Lac, Priest, and Companions, Martyrs", T.MEMORIAL, C.RED),
    F(11, 30, "andrew_apostle", "Saint Andrew, Apostle", T.FEAST, C.RED),
    # December
    F(12, 3, "francis_xavier", "Saint Francis Xavier, Priest", T.MEMORIAL),
    F(12, 7, "ambrose", "Saint Ambrose, Bishop and Doctor", T.MEMORIAL),
    F(12, 8, "immaculate_conception", "The Immaculate Conception of the Blessed Virgin Mary", T.SOLEMNITY),
    F(12, 9, "juan_diego", "Saint Juan Diego Cuauhtlatoatzin", T.OPT_MEMORIAL),
    F(12, 12, "our_lady_of_guadalupe", "Our Lady of Guadalupe", T.OPT_MEMORIAL),
    F(12, 13, "lucy", "Saint Lucy, Virgin and Martyr", T.MEMORIAL, C.RED),
    F(12, 14, "john_of_the_cross", "Saint John of the Cross, Priest and Doctor", T.MEMORIAL),
    F(12, 21, "peter_canisius", "Saint Peter Canisius, Priest and Doctor", T.OPT_MEMORIAL),
    F(12, 26, "stephen", "Saint Stephen, the First Martyr", T.FEAST, C.RED),
    F(12, 27, "john_apostle", "Saint John, Apostle and Evangelist", T.FEAST),
    F(12, 28, "holy_innocents", "The Holy Innocents, Martyrs", T.FEAST, C.RED),
    F(12, 31, "sylvester", "Saint Sylvester I, Pope", T.OPT_MEMORIAL),
)


# =============================================================================
# National Calendars
# =============================================================================

@dataclass(frozen=True)
class NationalCalendar:
    """
    Options and proper celebrations of one national calendar.

    Propers sharing a key with a general celebration replace it.
    """
    country: str
    epiphany_on_sunday: bool = False
    ascension_on_sunday: bool = False
    propers: tuple[FixedCelebration, ...] = ()
    movable_propers: tuple[MovableCelebration, ...] = ()

    def fixed_celebrations(self) -> list[tuple[FixedCelebration, Celebration]]:
        """Merge the general calendar with this country's propers."""
        merged: dict[str, tuple[FixedCelebration, Celebration]] = {
            entry.key: (entry, entry.to_celebration("general"))
            for entry in GENERAL_ROMAN_CALENDAR
        }
        for entry in self.propers:
            merged[entry.key] = (entry, entry.to_celebration(self.country, proper=True))
        return list(merged.values())


NATIONAL_CALENDARS: dict[str, NationalCalendar] = {
    "general": NationalCalendar(country="general"),
    "unitedStates": NationalCalendar(
        country="unitedStates",
        epiphany_on_sunday=True,
        ascension_on_sunday=True,
        propers=(
            F(1, 4, "elizabeth_ann_seton", "Saint Elizabeth Ann Seton, Religious", T.MEMORIAL),
            F(1, 5, "john_neumann", "Saint John Neumann, Bishop", T.MEMORIAL),
            F(5, 15, "isidore_the_farmer", "Saint Isidore", T.OPT_MEMORIAL),
            F(7, 1, "junipero_serra", "Saint Junípero Serra, Priest", T.OPT_MEMORIAL),
            F(7, 4, "independence_day", "Independence Day", T.OPT_MEMORIAL),
            F(7, 14, "kateri_tekakwitha", "Saint Kateri Tekakwitha, Virgin", T.MEMORIAL),
            F(9, 9, "peter_claver", "Saint Peter Claver, Priest", T.MEMORIAL),
            F(11, 13, "frances_xavier_cabrini", "Saint Frances Xavier Cabrini, Virgin", T.MEMORIAL),
            F(12, 12, "our_lady_of_guadalupe", "Our Lady of Guadalupe", T.FEAST),
        ),
        movable_propers=(
            MovableCelebration(
                "thanksgiving_day", "Thanksgiving Day", T.OPT_MEMORIAL,
                resolve=_fourth_thursday_of_november,
            ),
        ),
    ),
    "england": NationalCalendar(
        country="england",
        epiphany_on_sunday=True,
        ascension_on_sunday=True,
        propers=(
            F(3, 1, "david", "Saint David, Bishop", T.FEAST),
            F(3, 17, "patrick", "Saint Patrick, Bishop", T.FEAST),
            F(4, 23, "george", "Saint George, Martyr, Patron of England", T.FEAST, C.RED),
            F(5, 4, "english_martyrs", "The English Martyrs", T.FEAST, C.RED),
            F(6, 22, "john_fisher_and_thomas_more", "Saints John Fisher, Bishop, and Thomas More, Martyrs", T.FEAST, C.RED),
            F(10, 9, "john_henry_newman", "Saint John Henry Newman, Priest", T.OPT_MEMORIAL),
        ),
    ),
    "italy": NationalCalendar(
        country="italy",
        ascension_on_sunday=True,
        propers=(
            F(4, 29, "catherine_of_siena", "Saint Catherine of Siena, Virgin and Doctor, Patroness of Italy", T.FEAST),
            F(10, 4, "francis_of_assisi", "Saint Francis of Assisi, Patron of Italy", T.FEAST),
        ),
    ),
    "france": NationalCalendar(
        country="france",
        epiphany_on_sunday=True,
        propers=(
            F(1, 3, "genevieve", "Saint Genevieve, Virgin", T.OPT_MEMORIAL),
            F(5, 30, "joan_of_arc", "Saint Joan of Arc, Virgin", T.MEMORIAL),
            F(11, 11, "martin_of_tours", "Saint Martin of Tours, Bishop", T.FEAST),
        ),
    ),
    "spain": NationalCalendar(
        country="spain",
        propers=(
            F(5, 15, "isidore_the_farmer", "Saint Isidore the Farmer", T.MEMORIAL),
            F(7, 25, "james_apostle", "Saint James, Apostle, Patron of Spain", T.SOLEMNITY, C.RED),
            F(10, 12, "our_lady_of_the_pillar", "Our Lady of the Pillar", T.FEAST),
            F(10, 15, "teresa_of_jesus", "Saint Teresa of Jesus, Virgin and Doctor", T.FEAST),
        ),
    ),
    "germany": NationalCalendar(
        country="germany",
        propers=(
            F(6, 5, "boniface", "Saint Boniface, Bishop and Martyr", T.FEAST, C.RED),
            F(10, 16, "hedwig", "Saint Hedwig, Religious", T.MEMORIAL),
            F(11, 19, "elizabeth_of_hungary", "Saint Elizabeth of Thuringia, Religious", T.MEMORIAL),
        ),
    ),
}


def get_national_calendar(country: str) -> NationalCalendar:
    """
    Look up a national calendar by engine identifier.

    Raises:
        ValueError: If the country is unknown
    """
    national = NATIONAL_CALENDARS.get(country)
    if national is None:
        raise ValueError(
            f"Unknown country '{country}'. "
            f"Known calendars: {', '.join(NATIONAL_CALENDARS)}"
        )
    return national


def list_countries() -> list[str]:
    """List the engine identifiers of all known calendars."""
    return list(NATIONAL_CALENDARS.keys())
