"""Yom Tov, fast day and counting rules evaluated on a single Hebrew date."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from .calendar import HebrewDate
from .cycle import HebrewMonth, is_leap_year
from .keviah import is_kislev_short

__all__ = [
    "YomTov",
    "TAANIS_DAYS",
    "YOM_TOV_ASSUR_BEMELACHA",
    "EREV_YOM_TOV_DAYS",
    "yom_tov_index",
    "day_of_chanukah",
    "day_of_omer",
    "is_rosh_chodesh",
    "is_erev_rosh_chodesh",
    "is_yom_kippur_katan",
    "is_behab",
    "is_taanis_bechoros",
    "is_machar_chodesh",
    "is_shabbos_mevorchim",
    "is_erev_yom_tov_sheni",
]

SUNDAY = 1
MONDAY = 2
TUESDAY = 3
WEDNESDAY = 4
THURSDAY = 5
FRIDAY = 6
SHABBOS = 7


class YomTov(IntEnum):
    """Holiday and fast day indexes; 20 is unused."""

    EREV_PESACH = 0
    PESACH = 1
    CHOL_HAMOED_PESACH = 2
    PESACH_SHENI = 3
    EREV_SHAVUOS = 4
    SHAVUOS = 5
    SEVENTEEN_OF_TAMMUZ = 6
    TISHA_BEAV = 7
    TU_BEAV = 8
    EREV_ROSH_HASHANA = 9
    ROSH_HASHANA = 10
    FAST_OF_GEDALYAH = 11
    EREV_YOM_KIPPUR = 12
    YOM_KIPPUR = 13
    EREV_SUCCOS = 14
    SUCCOS = 15
    CHOL_HAMOED_SUCCOS = 16
    HOSHANA_RABBA = 17
    SHEMINI_ATZERES = 18
    SIMCHAS_TORAH = 19
    CHANUKAH = 21
    TENTH_OF_TEVES = 22
    TU_BESHVAT = 23
    FAST_OF_ESTHER = 24
    PURIM = 25
    SHUSHAN_PURIM = 26
    PURIM_KATAN = 27
    ROSH_CHODESH = 28
    YOM_HASHOAH = 29
    YOM_HAZIKARON = 30
    YOM_HAATZMAUT = 31
    YOM_YERUSHALAYIM = 32
    LAG_BAOMER = 33
    SHUSHAN_PURIM_KATAN = 34
    ISRU_CHAG = 35
    YOM_KIPPUR_KATAN = 36


TAANIS_DAYS = frozenset(
    {
        YomTov.SEVENTEEN_OF_TAMMUZ,
        YomTov.TISHA_BEAV,
        YomTov.YOM_KIPPUR,
        YomTov.FAST_OF_GEDALYAH,
        YomTov.TENTH_OF_TEVES,
        YomTov.FAST_OF_ESTHER,
    }
)

YOM_TOV_ASSUR_BEMELACHA = frozenset(
    {
        YomTov.PESACH,
        YomTov.SHAVUOS,
        YomTov.SUCCOS,
        YomTov.SHEMINI_ATZERES,
        YomTov.SIMCHAS_TORAH,
        YomTov.ROSH_HASHANA,
        YomTov.YOM_KIPPUR,
    }
)

EREV_YOM_TOV_DAYS = frozenset(
    {
        YomTov.EREV_PESACH,
        YomTov.EREV_SHAVUOS,
        YomTov.EREV_ROSH_HASHANA,
        YomTov.EREV_YOM_KIPPUR,
        YomTov.EREV_SUCCOS,
        YomTov.HOSHANA_RABBA,
    }
)


def _nissan(day: int, weekday: int, in_israel: bool, modern: bool) -> Optional[YomTov]:
    if day == 14:
        return YomTov.EREV_PESACH
    if day in (15, 21) or (not in_israel and day in (16, 22)):
        return YomTov.PESACH
    if 17 <= day <= 20 or (day == 16 and in_israel):
        return YomTov.CHOL_HAMOED_PESACH
    if (day == 22 and in_israel) or (day == 23 and not in_israel):
        return YomTov.ISRU_CHAG
    # Yom Hashoah moves off Friday and off Sunday so as not to touch Shabbos.
    if modern and (
        (day == 26 and weekday == THURSDAY)
        or (day == 28 and weekday == MONDAY)
        or (day == 27 and weekday not in (SUNDAY, FRIDAY))
    ):
        return YomTov.YOM_HASHOAH
    return None


def _iyar(day: int, weekday: int, modern: bool) -> Optional[YomTov]:
    if modern and (
        (day == 4 and weekday == TUESDAY)
        or (day in (2, 3) and weekday == WEDNESDAY)
        or (day == 5 and weekday == MONDAY)
    ):
        return YomTov.YOM_HAZIKARON
    # 5 Iyar on Friday or Shabbos moves back to Thursday, on Monday forward to Tuesday.
    if modern and (
        (day == 5 and weekday == WEDNESDAY)
        or (day in (3, 4) and weekday == THURSDAY)
        or (day == 6 and weekday == TUESDAY)
    ):
        return YomTov.YOM_HAATZMAUT
    if day == 14:
        return YomTov.PESACH_SHENI
    if day == 18:
        return YomTov.LAG_BAOMER
    if modern and day == 28:
        return YomTov.YOM_YERUSHALAYIM
    return None


def _tishrei(day: int, weekday: int, in_israel: bool) -> Optional[YomTov]:
    if day in (1, 2):
        return YomTov.ROSH_HASHANA
    if (day == 3 and weekday != SHABBOS) or (day == 4 and weekday == SUNDAY):
        return YomTov.FAST_OF_GEDALYAH
    if day == 9:
        return YomTov.EREV_YOM_KIPPUR
    if day == 10:
        return YomTov.YOM_KIPPUR
    if day == 14:
        return YomTov.EREV_SUCCOS
    if day == 15 or (day == 16 and not in_israel):
        return YomTov.SUCCOS
    if 17 <= day <= 20 or (day == 16 and in_israel):
        return YomTov.CHOL_HAMOED_SUCCOS
    if day == 21:
        return YomTov.HOSHANA_RABBA
    if day == 22:
        return YomTov.SHEMINI_ATZERES
    if day == 23 and not in_israel:
        return YomTov.SIMCHAS_TORAH
    if (day == 23 and in_israel) or (day == 24 and not in_israel):
        return YomTov.ISRU_CHAG
    return None


def _purim_month(day: int, weekday: int) -> Optional[YomTov]:
    # Taanis Esther falling on Friday or Shabbos is moved back to Thursday.
    if (day in (11, 12) and weekday == THURSDAY) or (
        day == 13 and weekday not in (FRIDAY, SHABBOS)
    ):
        return YomTov.FAST_OF_ESTHER
    if day == 14:
        return YomTov.PURIM
    if day == 15:
        return YomTov.SHUSHAN_PURIM
    return None


def yom_tov_index(
    hebrew_date: HebrewDate,
    weekday: int,
    *,
    in_israel: bool = False,
    use_modern_holidays: bool = False,
) -> Optional[YomTov]:
    """Return the holiday or fast observed on *hebrew_date*, or ``None``.

    Parameters
    ----------
    hebrew_date:
        Date being classified.
    weekday:
        Its weekday, 1 for Sunday through 7 for Shabbos.
    in_israel:
        Use the Israeli single-day Yom Tov schedule.
    use_modern_holidays:
        Include Yom Hashoah, Yom Hazikaron, Yom Haatzmaut and Yom Yerushalayim.
    """

    month, day = hebrew_date.month, hebrew_date.day
    if month is HebrewMonth.NISSAN:
        return _nissan(day, weekday, in_israel, use_modern_holidays)
    if month is HebrewMonth.IYAR:
        return _iyar(day, weekday, use_modern_holidays)
    if month is HebrewMonth.SIVAN:
        if day == 5:
            return YomTov.EREV_SHAVUOS
        if day == 6 or (day == 7 and not in_israel):
            return YomTov.SHAVUOS
        if (day == 7 and in_israel) or (day == 8 and not in_israel):
            return YomTov.ISRU_CHAG
        return None
    if month is HebrewMonth.TAMMUZ:
        if (day == 17 and weekday != SHABBOS) or (day == 18 and weekday == SUNDAY):
            return YomTov.SEVENTEEN_OF_TAMMUZ
        return None
    if month is HebrewMonth.AV:
        if (day == 9 and weekday != SHABBOS) or (day == 10 and weekday == SUNDAY):
            return YomTov.TISHA_BEAV
        if day == 15:
            return YomTov.TU_BEAV
        return None
    if month is HebrewMonth.ELUL:
        return YomTov.EREV_ROSH_HASHANA if day == 29 else None
    if month is HebrewMonth.TISHREI:
        return _tishrei(day, weekday, in_israel)
    if month is HebrewMonth.KISLEV:
        return YomTov.CHANUKAH if day >= 25 else None
    if month is HebrewMonth.TEVES:
        if day in (1, 2) or (day == 3 and is_kislev_short(hebrew_date.year)):
            return YomTov.CHANUKAH
        if day == 10:
            return YomTov.TENTH_OF_TEVES
        return None
    if month is HebrewMonth.SHEVAT:
        return YomTov.TU_BESHVAT if day == 15 else None
    if month is HebrewMonth.ADAR and is_leap_year(hebrew_date.year):
        if day == 14:
            return YomTov.PURIM_KATAN
        if day == 15:
            return YomTov.SHUSHAN_PURIM_KATAN
        return None
    if month in (HebrewMonth.ADAR, HebrewMonth.ADAR_II):
        return _purim_month(day, weekday)
    return None


def day_of_chanukah(hebrew_date: HebrewDate) -> Optional[int]:
    """Return the day of Chanukah (1..8), or ``None`` outside Chanukah."""

    month, day = hebrew_date.month, hebrew_date.day
    if month is HebrewMonth.KISLEV and day >= 25:
        return day - 24
    if month is HebrewMonth.TEVES:
        offset = 5 if is_kislev_short(hebrew_date.year) else 6
        if day + offset <= 8:
            return day + offset
    return None


def day_of_omer(hebrew_date: HebrewDate) -> Optional[int]:
    """Return the day of the Omer count (1..49), or ``None``."""

    month, day = hebrew_date.month, hebrew_date.day
    if month is HebrewMonth.NISSAN and day >= 16:
        return day - 15
    if month is HebrewMonth.IYAR:
        return day + 15
    if month is HebrewMonth.SIVAN and day < 6:
        return day + 44
    return None


def is_rosh_chodesh(hebrew_date: HebrewDate) -> bool:
    # Rosh Hashana is not Rosh Chodesh; Elul never has a 30th day.
    return (hebrew_date.day == 1 and hebrew_date.month is not HebrewMonth.TISHREI) or hebrew_date.day == 30


def is_erev_rosh_chodesh(hebrew_date: HebrewDate) -> bool:
    return hebrew_date.day == 29 and hebrew_date.month is not HebrewMonth.ELUL


def is_yom_kippur_katan(hebrew_date: HebrewDate, weekday: int) -> bool:
    """Erev Rosh Chodesh fast, moved back to Thursday from Friday or Shabbos.

    Not observed before Tishrei, Cheshvan (no Rosh Chodesh fast after the
    holidays), Teves (Chanukah) or Iyar (Nissan).
    """

    if hebrew_date.month in (HebrewMonth.ELUL, HebrewMonth.TISHREI, HebrewMonth.KISLEV, HebrewMonth.NISSAN):
        return False
    day = hebrew_date.day
    if day == 29 and weekday not in (FRIDAY, SHABBOS):
        return True
    return day in (27, 28) and weekday == THURSDAY


def is_behab(hebrew_date: HebrewDate, weekday: int) -> bool:
    """Monday, Thursday and Monday after the first Shabbos of Cheshvan and Iyar."""

    if hebrew_date.month not in (HebrewMonth.CHESHVAN, HebrewMonth.IYAR):
        return False
    day = hebrew_date.day
    return (weekday == MONDAY and 4 < day < 18) or (weekday == THURSDAY and 7 < day < 14)


def is_taanis_bechoros(hebrew_date: HebrewDate, weekday: int) -> bool:
    if hebrew_date.month is not HebrewMonth.NISSAN:
        return False
    day = hebrew_date.day
    return (day == 14 and weekday != SHABBOS) or (day == 12 and weekday == THURSDAY)


def is_machar_chodesh(hebrew_date: HebrewDate, weekday: int) -> bool:
    return weekday == SHABBOS and hebrew_date.day in (29, 30)


def is_shabbos_mevorchim(hebrew_date: HebrewDate, weekday: int) -> bool:
    return (
        weekday == SHABBOS
        and 23 <= hebrew_date.day <= 29
        and hebrew_date.month is not HebrewMonth.ELUL
    )


def is_erev_yom_tov_sheni(hebrew_date: HebrewDate, *, in_israel: bool = False) -> bool:
    """First day of a two-day Yom Tov: Rosh Hashana everywhere, the rest outside Israel."""

    month, day = hebrew_date.month, hebrew_date.day
    if month is HebrewMonth.TISHREI and day == 1:
        return True
    if in_israel:
        return False
    return (
        (month is HebrewMonth.NISSAN and day in (15, 21))
        or (month is HebrewMonth.TISHREI and day in (15, 22))
        or (month is HebrewMonth.SIVAN and day == 6)
    )
