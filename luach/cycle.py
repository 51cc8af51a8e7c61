"""Month ordering and the 19-year Metonic leap cycle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

__all__ = [
    "HebrewMonth",
    "CyclePosition",
    "LEAP_CYCLE_POSITIONS",
    "cycle_position",
    "is_leap_year",
    "month_sequence",
    "month_index",
]

YEARS_PER_CYCLE = 19
MONTHS_PER_CYCLE = 235
LEAP_CYCLE_POSITIONS = frozenset({3, 6, 8, 11, 14, 17, 19})


class HebrewMonth(IntEnum):
    """Hebrew months numbered in the order they occur within a year.

    ``ADAR`` is Adar I in a leap year; ``ADAR_II`` only exists in leap years.
    """

    TISHREI = 1
    CHESHVAN = 2
    KISLEV = 3
    TEVES = 4
    SHEVAT = 5
    ADAR = 6
    ADAR_II = 7
    NISSAN = 8
    IYAR = 9
    SIVAN = 10
    TAMMUZ = 11
    AV = 12
    ELUL = 13


_COMMON_YEAR_MONTHS: Tuple[HebrewMonth, ...] = tuple(
    month for month in HebrewMonth if month is not HebrewMonth.ADAR_II
)
_LEAP_YEAR_MONTHS: Tuple[HebrewMonth, ...] = tuple(HebrewMonth)


@dataclass(frozen=True)
class CyclePosition:
    """Place of a Hebrew year inside its 19-year cycle."""

    position: int
    is_leap: bool


def _check_year(year: int) -> None:
    if year < 1:
        raise ValueError(f"Hebrew year must be 1 or later, got {year}")


def cycle_position(year: int) -> CyclePosition:
    """Return the 1-based cycle position of *year* and whether it is a leap year."""

    _check_year(year)
    position = year % YEARS_PER_CYCLE or YEARS_PER_CYCLE
    return CyclePosition(position=position, is_leap=position in LEAP_CYCLE_POSITIONS)


def is_leap_year(year: int) -> bool:
    """Return ``True`` when *year* carries the thirteenth month (Adar II)."""

    return (7 * year + 1) % YEARS_PER_CYCLE < 7


def month_sequence(year: int) -> Tuple[HebrewMonth, ...]:
    """Months of *year* in calendar order starting from Tishrei."""

    return _LEAP_YEAR_MONTHS if is_leap_year(year) else _COMMON_YEAR_MONTHS


def month_index(year: int, month: HebrewMonth) -> int:
    """Return the zero-based position of *month* within *year*.

    Raises
    ------
    ValueError
        If *month* is Adar II and *year* is not a leap year.
    """

    month = HebrewMonth(month)
    if is_leap_year(year):
        return month - 1
    if month is HebrewMonth.ADAR_II:
        raise ValueError(f"Adar II does not exist in the common year {year}")
    return month - 1 if month < HebrewMonth.ADAR_II else month - 2
