"""Daf Yomi page calculators for the Babylonian and Jerusalem Talmud cycles."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from enum import IntEnum
from typing import Optional, Tuple, Union

from .calendar import HebrewDate, day_of_week, from_gregorian, to_fixed
from .cycle import HebrewMonth
from .holidays import YomTov, yom_tov_index

__all__ = [
    "BavliMasechta",
    "YerushalmiMasechta",
    "Daf",
    "BavliCyclePosition",
    "BAVLI_CYCLE_START",
    "SHEKALIM_CHANGE_DATE",
    "YERUSHALMI_CYCLE_START",
    "julian_day_number",
    "bavli_cycle_position",
    "daf_yomi_bavli",
    "daf_yomi_yerushalmi",
]

LOGGER = logging.getLogger(__name__)

BAVLI_CYCLE_START = date(1923, 9, 11)
SHEKALIM_CHANGE_DATE = date(1975, 6, 24)
YERUSHALMI_CYCLE_START = date(1980, 2, 2)

BAVLI_CYCLE_LENGTH_BEFORE_CHANGE = 2702
BAVLI_CYCLE_LENGTH = 2711
FIRST_CYCLE_AFTER_CHANGE = 8
YERUSHALMI_CYCLE_LENGTH = 1554

SHEKALIM_BLATT_BEFORE_CHANGE = 13
SHEKALIM_BLATT = 22

# Daf count of each masechta, Shekalim being filled in by cycle.
_BAVLI_BLATT: Tuple[int, ...] = (
    64, 157, 105, 121, SHEKALIM_BLATT, 88, 56, 40, 35, 31,
    32, 29, 27, 122, 112, 91, 66, 49, 90, 82,
    119, 119, 176, 113, 24, 49, 76, 14, 120, 110,
    142, 61, 34, 34, 28, 22, 4, 9, 5, 73,
)

# Kinnim, Tamid and Midos continue the page numbering of Meilah.
_BAVLI_PAGE_OFFSETS = {36: 21, 37: 24, 38: 32}

_YERUSHALMI_BLATT: Tuple[int, ...] = (
    68, 37, 34, 44, 31, 59, 26, 33, 28, 20,
    13, 92, 65, 71, 22, 22, 42, 26, 26, 33,
    34, 22, 19, 85, 72, 47, 40, 47, 54, 48,
    44, 37, 34, 44, 9, 57, 37, 19, 13,
)

# ``date.toordinal`` counts from 1 January 1 CE; the Julian Day Number of that day is 1721426.
_JULIAN_DAY_OFFSET = 1721425


class BavliMasechta(IntEnum):
    BERACHOS = 0
    SHABBOS = 1
    ERUVIN = 2
    PESACHIM = 3
    SHEKALIM = 4
    YOMA = 5
    SUKKAH = 6
    BEITZAH = 7
    ROSH_HASHANA = 8
    TAANIS = 9
    MEGILLAH = 10
    MOED_KATAN = 11
    CHAGIGAH = 12
    YEVAMOS = 13
    KESUBOS = 14
    NEDARIM = 15
    NAZIR = 16
    SOTAH = 17
    GITIN = 18
    KIDDUSHIN = 19
    BAVA_KAMMA = 20
    BAVA_METZIA = 21
    BAVA_BASRA = 22
    SANHEDRIN = 23
    MAKKOS = 24
    SHEVUOS = 25
    AVODAH_ZARAH = 26
    HORIYOS = 27
    ZEVACHIM = 28
    MENACHOS = 29
    CHULLIN = 30
    BECHOROS = 31
    ARACHIN = 32
    TEMURAH = 33
    KERISOS = 34
    MEILAH = 35
    KINNIM = 36
    TAMID = 37
    MIDOS = 38
    NIDDAH = 39


class YerushalmiMasechta(IntEnum):
    BERACHOS = 0
    PEAH = 1
    DEMAI = 2
    KILAYIM = 3
    SHEVIIS = 4
    TERUMOS = 5
    MAASROS = 6
    MAASER_SHENI = 7
    CHALAH = 8
    ORLAH = 9
    BIKURIM = 10
    SHABBOS = 11
    ERUVIN = 12
    PESACHIM = 13
    BEITZAH = 14
    ROSH_HASHANAH = 15
    YOMA = 16
    SUKAH = 17
    TAANIS = 18
    SHEKALIM = 19
    MEGILAH = 20
    CHAGIGAH = 21
    MOED_KATAN = 22
    YEVAMOS = 23
    KESUVOS = 24
    SOTAH = 25
    NEDARIM = 26
    NAZIR = 27
    GITIN = 28
    KIDUSHIN = 29
    BAVA_KAMA = 30
    BAVA_METZIA = 31
    BAVA_BASRA = 32
    SHEVUOS = 33
    MAKOS = 34
    SANHEDRIN = 35
    AVODAH_ZARAH = 36
    HORAYOS = 37
    NIDAH = 38


@dataclass(frozen=True)
class Daf:
    """A single page of Talmud."""

    masechta: Union[BavliMasechta, YerushalmiMasechta]
    daf: int


@dataclass(frozen=True)
class BavliCyclePosition:
    """Where a date falls within the Daf Yomi Bavli cycles."""

    cycle_number: int
    day_in_cycle: int
    cycle_length: int
    shekalim_blatt: int


def julian_day_number(day: date) -> int:
    return day.toordinal() + _JULIAN_DAY_OFFSET


def bavli_cycle_position(day: date) -> Optional[BavliCyclePosition]:
    """Locate *day* in the Bavli cycles, or return ``None`` before the first cycle."""

    if day < BAVLI_CYCLE_START:
        return None
    julian_day = julian_day_number(day)
    if day >= SHEKALIM_CHANGE_DATE:
        elapsed = julian_day - julian_day_number(SHEKALIM_CHANGE_DATE)
        cycle, day_in_cycle = divmod(elapsed, BAVLI_CYCLE_LENGTH)
        return BavliCyclePosition(
            cycle_number=FIRST_CYCLE_AFTER_CHANGE + cycle,
            day_in_cycle=day_in_cycle,
            cycle_length=BAVLI_CYCLE_LENGTH,
            shekalim_blatt=SHEKALIM_BLATT,
        )
    elapsed = julian_day - julian_day_number(BAVLI_CYCLE_START)
    cycle, day_in_cycle = divmod(elapsed, BAVLI_CYCLE_LENGTH_BEFORE_CHANGE)
    return BavliCyclePosition(
        cycle_number=1 + cycle,
        day_in_cycle=day_in_cycle,
        cycle_length=BAVLI_CYCLE_LENGTH_BEFORE_CHANGE,
        shekalim_blatt=SHEKALIM_BLATT_BEFORE_CHANGE,
    )


def daf_yomi_bavli(day: date) -> Optional[Daf]:
    """Return the Daf Yomi Bavli studied on *day*.

    Parameters
    ----------
    day:
        Civil date in the caller's local calendar.

    Returns
    -------
    Daf or None
        The page, or ``None`` for dates before 11 September 1923.
    """

    position = bavli_cycle_position(day)
    if position is None:
        LOGGER.debug(
            json.dumps({"event": "daf_yomi_unavailable", "cycle": "bavli", "date": day.isoformat()})
        )
        return None
    total = 0
    for index, blatt in enumerate(_BAVLI_BLATT):
        if index == BavliMasechta.SHEKALIM:
            blatt = position.shekalim_blatt
        # Each masechta starts on daf 2.
        total += blatt - 1
        if position.day_in_cycle < total:
            page = 1 + blatt - (total - position.day_in_cycle)
            page += _BAVLI_PAGE_OFFSETS.get(index, 0)
            return Daf(BavliMasechta(index), page)
    raise RuntimeError(f"Day {position.day_in_cycle} exceeds the Bavli cycle of {position.cycle_length}")


def _skipped_days_between(start: date, end: date) -> int:
    """Count the Yom Kippur and 9 Av dates strictly between *start* and *end*."""

    first, last = start.toordinal(), end.toordinal()
    count = 0
    for year in range(from_gregorian(start).year, from_gregorian(end).year + 1):
        for month, day in ((HebrewMonth.TISHREI, 10), (HebrewMonth.AV, 9)):
            if first < to_fixed(HebrewDate(year, month, day)) < last:
                count += 1
    return count


def daf_yomi_yerushalmi(day: date) -> Optional[Daf]:
    """Return the Daf Yomi Yerushalmi studied on *day*.

    No daf is learned on Yom Kippur or on the observed Tisha B'Av, and each
    cycle is lengthened by the number of such days it contains.

    Returns
    -------
    Daf or None
        The page, or ``None`` before 2 February 1980 and on the skipped days.
    """

    if day < YERUSHALMI_CYCLE_START:
        LOGGER.debug(
            json.dumps({"event": "daf_yomi_unavailable", "cycle": "yerushalmi", "date": day.isoformat()})
        )
        return None
    hebrew_date = from_gregorian(day)
    if yom_tov_index(hebrew_date, day_of_week(hebrew_date)) in (YomTov.YOM_KIPPUR, YomTov.TISHA_BEAV):
        LOGGER.debug(
            json.dumps({"event": "daf_yomi_skipped_day", "cycle": "yerushalmi", "date": day.isoformat()})
        )
        return None

    cycle_start = next_cycle = YERUSHALMI_CYCLE_START
    while day >= next_cycle:
        cycle_start = next_cycle
        next_cycle = cycle_start + timedelta(days=YERUSHALMI_CYCLE_LENGTH)
        next_cycle += timedelta(days=_skipped_days_between(cycle_start, next_cycle))

    total = (day - cycle_start).days - _skipped_days_between(cycle_start, day)
    for index, blatt in enumerate(_YERUSHALMI_BLATT):
        if total < blatt:
            return Daf(YerushalmiMasechta(index), total + 1)
        total -= blatt
    raise RuntimeError(f"Day {day.isoformat()} exceeds the Yerushalmi cycle")
