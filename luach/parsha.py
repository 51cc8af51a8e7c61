"""Weekly Torah portion and special Shabbos selection."""

from __future__ import annotations

from enum import Enum, auto
from typing import Dict, Tuple

from .calendar import HebrewDate, advance, day_of_year
from .cycle import HebrewMonth, is_leap_year
from .keviah import YearLengthCategory, category, elapsed_days

__all__ = [
    "Parsha",
    "SPECIAL_SHABBOSOS",
    "parsha_year_type",
    "parshah",
    "special_shabbos",
    "upcoming_parshah",
]

SHABBOS = 7


class Parsha(Enum):
    """Weekly portions, the combined double portions and the special Shabbosos."""

    NONE = auto()
    BERESHIS = auto()
    NOACH = auto()
    LECH_LECHA = auto()
    VAYERA = auto()
    CHAYEI_SARA = auto()
    TOLDOS = auto()
    VAYETZEI = auto()
    VAYISHLACH = auto()
    VAYESHEV = auto()
    MIKETZ = auto()
    VAYIGASH = auto()
    VAYECHI = auto()
    SHEMOS = auto()
    VAERA = auto()
    BO = auto()
    BESHALACH = auto()
    YISRO = auto()
    MISHPATIM = auto()
    TERUMAH = auto()
    TETZAVEH = auto()
    KI_SISA = auto()
    VAYAKHEL = auto()
    PEKUDEI = auto()
    VAYIKRA = auto()
    TZAV = auto()
    SHMINI = auto()
    TAZRIA = auto()
    METZORA = auto()
    ACHREI_MOS = auto()
    KEDOSHIM = auto()
    EMOR = auto()
    BEHAR = auto()
    BECHUKOSAI = auto()
    BAMIDBAR = auto()
    NASSO = auto()
    BEHAALOSCHA = auto()
    SHLACH = auto()
    KORACH = auto()
    CHUKAS = auto()
    BALAK = auto()
    PINCHAS = auto()
    MATOS = auto()
    MASEI = auto()
    DEVARIM = auto()
    VAESCHANAN = auto()
    EIKEV = auto()
    REEH = auto()
    SHOFTIM = auto()
    KI_SEITZEI = auto()
    KI_SAVO = auto()
    NITZAVIM = auto()
    VAYEILECH = auto()
    HAAZINU = auto()
    VZOS_HABERACHA = auto()
    VAYAKHEL_PEKUDEI = auto()
    TAZRIA_METZORA = auto()
    ACHREI_MOS_KEDOSHIM = auto()
    BEHAR_BECHUKOSAI = auto()
    CHUKAS_BALAK = auto()
    MATOS_MASEI = auto()
    NITZAVIM_VAYEILECH = auto()
    SHKALIM = auto()
    ZACHOR = auto()
    PARA = auto()
    HACHODESH = auto()
    SHUVA = auto()
    SHIRA = auto()
    HAGADOL = auto()
    CHAZON = auto()
    NACHAMU = auto()


SPECIAL_SHABBOSOS = frozenset(
    {
        Parsha.SHKALIM,
        Parsha.ZACHOR,
        Parsha.PARA,
        Parsha.HACHODESH,
        Parsha.SHUVA,
        Parsha.SHIRA,
        Parsha.HAGADOL,
        Parsha.CHAZON,
        Parsha.NACHAMU,
    }
)


def _row(names: str) -> Tuple[Parsha, ...]:
    return tuple(Parsha[name] for name in names.split())


# Portion read on each Shabbos of the year, indexed by the week number
# ``(rosh_hashana_day % 7 + day_of_year) // 7``.
_PARSHA_TABLES: Tuple[Tuple[Parsha, ...], ...] = (
    # 0: common year, Monday, deficient
    _row(
        "NONE VAYEILECH HAAZINU NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL_PEKUDEI VAYIKRA "
        "TZAV NONE SHMINI TAZRIA_METZORA ACHREI_MOS_KEDOSHIM EMOR BEHAR_BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS_MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM_VAYEILECH"
    ),
    # 1: common year, Monday complete or Tuesday regular
    _row(
        "NONE VAYEILECH HAAZINU NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL_PEKUDEI VAYIKRA "
        "TZAV NONE SHMINI TAZRIA_METZORA ACHREI_MOS_KEDOSHIM EMOR BEHAR_BECHUKOSAI "
        "BAMIDBAR NONE NASSO BEHAALOSCHA SHLACH KORACH CHUKAS_BALAK PINCHAS "
        "MATOS_MASEI DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO "
        "NITZAVIM_VAYEILECH"
    ),
    # 2: common year, Thursday, regular
    _row(
        "NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA TOLDOS "
        "VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL_PEKUDEI VAYIKRA "
        "TZAV NONE NONE SHMINI TAZRIA_METZORA ACHREI_MOS_KEDOSHIM EMOR "
        "BEHAR_BECHUKOSAI BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK "
        "PINCHAS MATOS_MASEI DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO "
        "NITZAVIM"
    ),
    # 3: common year, Thursday, complete
    _row(
        "NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA TOLDOS "
        "VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV NONE SHMINI TAZRIA_METZORA ACHREI_MOS_KEDOSHIM EMOR BEHAR_BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS_MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM"
    ),
    # 4: common year, Shabbos, deficient
    _row(
        "NONE NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL_PEKUDEI VAYIKRA "
        "TZAV NONE SHMINI TAZRIA_METZORA ACHREI_MOS_KEDOSHIM EMOR BEHAR_BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS_MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM"
    ),
    # 5: common year, Shabbos, complete
    _row(
        "NONE NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL_PEKUDEI VAYIKRA "
        "TZAV NONE SHMINI TAZRIA_METZORA ACHREI_MOS_KEDOSHIM EMOR BEHAR_BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS_MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM_VAYEILECH"
    ),
    # 6: leap year, Monday, deficient
    _row(
        "NONE VAYEILECH HAAZINU NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV SHMINI TAZRIA METZORA NONE ACHREI_MOS KEDOSHIM EMOR BEHAR BECHUKOSAI "
        "BAMIDBAR NONE NASSO BEHAALOSCHA SHLACH KORACH CHUKAS_BALAK PINCHAS "
        "MATOS_MASEI DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO "
        "NITZAVIM_VAYEILECH"
    ),
    # 7: leap year, Monday complete or Tuesday regular
    _row(
        "NONE VAYEILECH HAAZINU NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV SHMINI TAZRIA METZORA NONE NONE ACHREI_MOS KEDOSHIM EMOR BEHAR "
        "BECHUKOSAI BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS "
        "MATOS_MASEI DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM"
    ),
    # 8: leap year, Thursday, deficient
    _row(
        "NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA TOLDOS "
        "VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV SHMINI TAZRIA METZORA ACHREI_MOS NONE KEDOSHIM EMOR BEHAR BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM"
    ),
    # 9: leap year, Thursday, complete
    _row(
        "NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA TOLDOS "
        "VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV SHMINI TAZRIA METZORA ACHREI_MOS NONE KEDOSHIM EMOR BEHAR BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM_VAYEILECH"
    ),
    # 10: leap year, Shabbos, deficient
    _row(
        "NONE NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV SHMINI TAZRIA METZORA NONE ACHREI_MOS KEDOSHIM EMOR BEHAR BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS_MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM_VAYEILECH"
    ),
    # 11: leap year, Shabbos, complete
    _row(
        "NONE NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV SHMINI TAZRIA METZORA NONE ACHREI_MOS KEDOSHIM EMOR BEHAR BECHUKOSAI "
        "BAMIDBAR NONE NASSO BEHAALOSCHA SHLACH KORACH CHUKAS_BALAK PINCHAS "
        "MATOS_MASEI DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO "
        "NITZAVIM_VAYEILECH"
    ),
    # 12: common year, Monday complete or Tuesday regular, Israel
    _row(
        "NONE VAYEILECH HAAZINU NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL_PEKUDEI VAYIKRA "
        "TZAV NONE SHMINI TAZRIA_METZORA ACHREI_MOS_KEDOSHIM EMOR BEHAR_BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS_MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM_VAYEILECH"
    ),
    # 13: common year, Thursday, regular, Israel
    _row(
        "NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA TOLDOS "
        "VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL_PEKUDEI VAYIKRA "
        "TZAV NONE SHMINI TAZRIA_METZORA ACHREI_MOS_KEDOSHIM EMOR BEHAR BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS_MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM"
    ),
    # 14: leap year, Monday, deficient, Israel
    _row(
        "NONE VAYEILECH HAAZINU NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV SHMINI TAZRIA METZORA NONE ACHREI_MOS KEDOSHIM EMOR BEHAR BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS_MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM_VAYEILECH"
    ),
    # 15: leap year, Monday complete or Tuesday regular, Israel
    _row(
        "NONE VAYEILECH HAAZINU NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV SHMINI TAZRIA METZORA NONE ACHREI_MOS KEDOSHIM EMOR BEHAR BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM"
    ),
    # 16: leap year, Shabbos, complete, Israel
    _row(
        "NONE NONE HAAZINU NONE NONE BERESHIS NOACH LECH_LECHA VAYERA CHAYEI_SARA "
        "TOLDOS VAYETZEI VAYISHLACH VAYESHEV MIKETZ VAYIGASH VAYECHI SHEMOS VAERA BO "
        "BESHALACH YISRO MISHPATIM TERUMAH TETZAVEH KI_SISA VAYAKHEL PEKUDEI VAYIKRA "
        "TZAV SHMINI TAZRIA METZORA NONE ACHREI_MOS KEDOSHIM EMOR BEHAR BECHUKOSAI "
        "BAMIDBAR NASSO BEHAALOSCHA SHLACH KORACH CHUKAS BALAK PINCHAS MATOS_MASEI "
        "DEVARIM VAESCHANAN EIKEV REEH SHOFTIM KI_SEITZEI KI_SAVO NITZAVIM_VAYEILECH"
    ),
)

_CH = YearLengthCategory.CHASERIM
_K = YearLengthCategory.KESIDRAN
_SH = YearLengthCategory.SHELAIMIM

# (leap, Rosh Hashana weekday, category) -> (diaspora table, Israel table)
_YEAR_TYPES: Dict[Tuple[bool, int, YearLengthCategory], Tuple[int, int]] = {
    (False, 2, _CH): (0, 0),
    (False, 2, _SH): (1, 12),
    (False, 3, _K): (1, 12),
    (False, 5, _K): (2, 13),
    (False, 5, _SH): (3, 3),
    (False, 7, _CH): (4, 4),
    (False, 7, _SH): (5, 5),
    (True, 2, _CH): (6, 14),
    (True, 2, _SH): (7, 15),
    (True, 3, _K): (7, 15),
    (True, 5, _CH): (8, 8),
    (True, 5, _SH): (9, 9),
    (True, 7, _CH): (10, 10),
    (True, 7, _SH): (11, 16),
}


def parsha_year_type(year: int, in_israel: bool = False) -> int:
    """Return the index of the portion table that governs *year*.

    Raises
    ------
    RuntimeError
        If the year has a keviah outside the fourteen that can occur.
    """

    key = (is_leap_year(year), elapsed_days(year) % 7 + 1, category(year))
    try:
        diaspora, israel = _YEAR_TYPES[key]
    except KeyError as exc:
        raise RuntimeError(f"Impossible keviah {key} for year {year}") from exc
    return israel if in_israel else diaspora


def parshah(hebrew_date: HebrewDate, weekday: int, in_israel: bool = False) -> Parsha:
    """Return the portion read on *hebrew_date*.

    ``Parsha.NONE`` is returned on weekdays and on a Shabbos whose reading is
    displaced by Yom Tov.
    """

    if weekday != SHABBOS:
        return Parsha.NONE
    year = hebrew_date.year
    table = _PARSHA_TABLES[parsha_year_type(year, in_israel)]
    week = (elapsed_days(year) % 7 + day_of_year(year, hebrew_date.month, hebrew_date.day)) // 7
    return table[week]


def special_shabbos(hebrew_date: HebrewDate, weekday: int, in_israel: bool = False) -> Parsha:
    """Return the special Shabbos falling on *hebrew_date*, or ``Parsha.NONE``."""

    if weekday != SHABBOS:
        return Parsha.NONE
    month, day = hebrew_date.month, hebrew_date.day
    leap = is_leap_year(hebrew_date.year)
    # The month before the month of Purim.
    if (month is HebrewMonth.SHEVAT and not leap) or (month is HebrewMonth.ADAR and leap):
        if day in (25, 27, 29):
            return Parsha.SHKALIM
    if (month is HebrewMonth.ADAR and not leap) or month is HebrewMonth.ADAR_II:
        if day == 1:
            return Parsha.SHKALIM
        if day in (8, 9, 11, 13):
            return Parsha.ZACHOR
        if day in (18, 20, 22, 23):
            return Parsha.PARA
        if day in (25, 27, 29):
            return Parsha.HACHODESH
    if month is HebrewMonth.NISSAN:
        if day == 1:
            return Parsha.HACHODESH
        if 8 <= day <= 14:
            return Parsha.HAGADOL
    if month is HebrewMonth.AV:
        if 4 <= day <= 9:
            return Parsha.CHAZON
        if 10 <= day <= 16:
            return Parsha.NACHAMU
    if month is HebrewMonth.TISHREI and 3 <= day <= 8:
        return Parsha.SHUVA
    if parshah(hebrew_date, weekday, in_israel) is Parsha.BESHALACH:
        return Parsha.SHIRA
    return Parsha.NONE


def upcoming_parshah(hebrew_date: HebrewDate, weekday: int, in_israel: bool = False) -> Parsha:
    """Return the portion of the coming Shabbos.

    On Shabbos itself the following week is used. A Shabbos without a portion
    (Yom Tov or Chol Hamoed) is skipped.
    """

    shabbos = advance(hebrew_date, (SHABBOS - weekday) % 7 or 7)
    found = parshah(shabbos, SHABBOS, in_israel)
    while found is Parsha.NONE:
        shabbos = advance(shabbos, 7)
        found = parshah(shabbos, SHABBOS, in_israel)
    return found
