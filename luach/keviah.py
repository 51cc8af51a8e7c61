"""Rosh Hashana postponements, year lengths and the keviah of a Hebrew year."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

from .cycle import is_leap_year
from .molad import CHALAKIM_PER_DAY, CHALAKIM_PER_HOUR, chalakim_since_molad_tohu

__all__ = [
    "Dechiya",
    "YearLengthCategory",
    "YearInfo",
    "VALID_YEAR_LENGTHS",
    "apply_dechiyos",
    "elapsed_days",
    "days_in_year",
    "category",
    "is_cheshvan_long",
    "is_kislev_short",
    "rosh_hashana_weekday",
    "pesach_weekday",
    "resolve_year",
]

VALID_YEAR_LENGTHS = frozenset({353, 354, 355, 383, 384, 385})

MOLAD_ZAKEN_PARTS = 18 * CHALAKIM_PER_HOUR
GATARAD_PARTS = 9 * CHALAKIM_PER_HOUR + 204
BETUTAKPAT_PARTS = 15 * CHALAKIM_PER_HOUR + 589

# Day numbers modulo 7, counted from the molad tohu day: 0 Sunday ... 6 Shabbos.
_MONDAY = 1
_TUESDAY = 2
_ADU_DAYS = frozenset({0, 3, 5})

# 15 Nissan falls this many days before the following Rosh Hashana.
_PESACH_TO_ROSH_HASHANA = 163


class Dechiya(Enum):
    """Postponement rules that can move Rosh Hashana off the molad day."""

    MOLAD_ZAKEN = "molad_zaken"
    GATARAD = "gatarad"
    BETUTAKPAT = "betutakpat"
    LO_ADU = "lo_adu"


class YearLengthCategory(IntEnum):
    """Deficient, regular or complete year; fixes Cheshvan and Kislev."""

    CHASERIM = 0
    KESIDRAN = 1
    SHELAIMIM = 2


@dataclass(frozen=True)
class YearInfo:
    """Resolved structure of a single Hebrew year."""

    year: int
    is_leap_year: bool
    days_in_year: int
    cheshvan_length: int
    kislev_length: int
    category: YearLengthCategory
    elapsed_days: int
    rosh_hashana_weekday: int
    pesach_weekday: int
    postponements: Tuple[Dechiya, ...]


def apply_dechiyos(year: int, molad_day: int, molad_parts: int) -> Tuple[int, Tuple[Dechiya, ...]]:
    """Apply the postponement rules to the molad of Tishrei of *year*.

    Parameters
    ----------
    year:
        Hebrew year whose Rosh Hashana is being fixed.
    molad_day:
        Whole days from the molad tohu day to the molad of Tishrei.
    molad_parts:
        Chalakim elapsed in that day, counted from 18:00.

    Returns
    -------
    tuple[int, tuple[Dechiya, ...]]
        Day of Rosh Hashana in the same reckoning and the rules that moved it.
    """

    applied = []
    weekday = molad_day % 7
    rosh_hashana = molad_day
    if molad_parts >= MOLAD_ZAKEN_PARTS:
        applied.append(Dechiya.MOLAD_ZAKEN)
    elif weekday == _TUESDAY and molad_parts >= GATARAD_PARTS and not is_leap_year(year):
        applied.append(Dechiya.GATARAD)
    elif (
        weekday == _MONDAY
        and molad_parts >= BETUTAKPAT_PARTS
        and is_leap_year(year - 1)
    ):
        applied.append(Dechiya.BETUTAKPAT)
    if applied:
        rosh_hashana += 1
    if rosh_hashana % 7 in _ADU_DAYS:
        applied.append(Dechiya.LO_ADU)
        rosh_hashana += 1
    return rosh_hashana, tuple(applied)


def elapsed_days(year: int) -> int:
    """Return the day number of Rosh Hashana of *year*, counted from the molad tohu day."""

    molad_day, molad_parts = divmod(chalakim_since_molad_tohu(year), CHALAKIM_PER_DAY)
    return apply_dechiyos(year, molad_day, molad_parts)[0]


def days_in_year(year: int) -> int:
    return elapsed_days(year + 1) - elapsed_days(year)


def category(year: int) -> YearLengthCategory:
    return YearLengthCategory(days_in_year(year) % 10 - 3)


def is_cheshvan_long(year: int) -> bool:
    return category(year) is YearLengthCategory.SHELAIMIM


def is_kislev_short(year: int) -> bool:
    return category(year) is YearLengthCategory.CHASERIM


def rosh_hashana_weekday(year: int) -> int:
    """Weekday of 1 Tishrei, 1 for Sunday through 7 for Shabbos."""

    return elapsed_days(year) % 7 + 1


def pesach_weekday(year: int) -> int:
    """Weekday of 15 Nissan, 1 for Sunday through 7 for Shabbos."""

    return (elapsed_days(year + 1) - _PESACH_TO_ROSH_HASHANA) % 7 + 1


def resolve_year(year: int) -> YearInfo:
    """Resolve every year-level property of *year* in one pass."""

    molad_day, molad_parts = divmod(chalakim_since_molad_tohu(year), CHALAKIM_PER_DAY)
    start, postponements = apply_dechiyos(year, molad_day, molad_parts)
    following = elapsed_days(year + 1)
    length = following - start
    kind = YearLengthCategory(length % 10 - 3)
    return YearInfo(
        year=year,
        is_leap_year=is_leap_year(year),
        days_in_year=length,
        cheshvan_length=30 if kind is YearLengthCategory.SHELAIMIM else 29,
        kislev_length=29 if kind is YearLengthCategory.CHASERIM else 30,
        category=kind,
        elapsed_days=start,
        rosh_hashana_weekday=start % 7 + 1,
        pesach_weekday=(following - _PESACH_TO_ROSH_HASHANA) % 7 + 1,
        postponements=postponements,
    )
