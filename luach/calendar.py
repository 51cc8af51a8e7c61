"""Conversion between Hebrew and proleptic Gregorian dates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from .cycle import HebrewMonth, is_leap_year, month_sequence
from .keviah import YearLengthCategory, category, elapsed_days

__all__ = [
    "HEBREW_EPOCH_RD",
    "CalendarError",
    "InvalidHebrewDateError",
    "OutOfDomainError",
    "HebrewDate",
    "is_gregorian_leap_year",
    "days_in_gregorian_month",
    "fixed_from_gregorian",
    "gregorian_from_fixed",
    "days_in_month",
    "day_of_year",
    "to_absolute",
    "from_absolute",
    "to_fixed",
    "from_fixed",
    "from_gregorian",
    "from_gregorian_ymd",
    "to_gregorian",
    "to_gregorian_ymd",
    "day_of_week",
    "next_day",
    "previous_day",
    "advance",
]

# Proleptic Gregorian ordinal (``date.toordinal``) of 1 Tishrei of year 1.
HEBREW_EPOCH_RD = -1373427

_GREGORIAN_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_GREGORIAN_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Mean Hebrew year of 35975351 / 98496 days, used to estimate the year of a day.
_MEAN_YEAR_NUMERATOR = 98496
_MEAN_YEAR_DENOMINATOR = 35975351

_FULL_MONTHS = frozenset(
    {HebrewMonth.TISHREI, HebrewMonth.SHEVAT, HebrewMonth.NISSAN, HebrewMonth.SIVAN, HebrewMonth.AV}
)


class CalendarError(ValueError):
    """Base class for calendar domain errors."""


class InvalidHebrewDateError(CalendarError):
    """Raised when a year, month and day do not form a Hebrew date."""


class OutOfDomainError(CalendarError):
    """Raised when a calendar cursor is moved before 1 Tishrei of year 1."""


@dataclass(frozen=True, order=True)
class HebrewDate:
    """A validated Hebrew calendar date.

    Instances order chronologically because months are numbered in the order
    they occur within the year.
    """

    year: int
    month: HebrewMonth
    day: int

    def __post_init__(self) -> None:
        if self.year < 1:
            raise InvalidHebrewDateError(f"Hebrew year must be 1 or later, got {self.year}")
        try:
            month = HebrewMonth(self.month)
        except ValueError as exc:
            raise InvalidHebrewDateError(f"Unknown Hebrew month: {self.month!r}") from exc
        object.__setattr__(self, "month", month)
        length = days_in_month(self.year, month)
        if not 1 <= self.day <= length:
            raise InvalidHebrewDateError(
                f"{month.name.title()} {self.year} has {length} days, got day {self.day}"
            )

    def __str__(self) -> str:
        return f"{self.day} {self.month.name.title()} {self.year}"


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_gregorian_month(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_LENGTHS[month - 1]


def fixed_from_gregorian(year: int, month: int, day: int) -> int:
    """Return the proleptic Gregorian ordinal of a date, 1 January 1 CE being day 1.

    Floor division keeps the count correct for years 0 and earlier, which
    :class:`datetime.date` cannot represent.
    """

    prior = year - 1
    fixed = (
        365 * prior
        + prior // 4
        - prior // 100
        + prior // 400
        + _GREGORIAN_DAYS_BEFORE_MONTH[month - 1]
        + day
    )
    if month > 2 and is_gregorian_leap_year(year):
        fixed += 1
    return fixed


def gregorian_from_fixed(fixed: int) -> Tuple[int, int, int]:
    """Inverse of :func:`fixed_from_gregorian`, returning ``(year, month, day)``."""

    year = fixed // 366
    while fixed_from_gregorian(year + 1, 1, 1) <= fixed:
        year += 1
    while fixed_from_gregorian(year, 1, 1) > fixed:
        year -= 1
    month = 1
    while fixed > fixed_from_gregorian(year, month, days_in_gregorian_month(year, month)):
        month += 1
    return year, month, fixed - fixed_from_gregorian(year, month, 1) + 1


def _month_length(month: HebrewMonth, leap: bool, kind: YearLengthCategory) -> int:
    if month in _FULL_MONTHS:
        return 30
    if month is HebrewMonth.CHESHVAN:
        return 30 if kind is YearLengthCategory.SHELAIMIM else 29
    if month is HebrewMonth.KISLEV:
        return 29 if kind is YearLengthCategory.CHASERIM else 30
    if month is HebrewMonth.ADAR:
        return 30 if leap else 29
    return 29


def _year_layout(year: int) -> List[Tuple[HebrewMonth, int]]:
    leap = is_leap_year(year)
    kind = category(year)
    return [(month, _month_length(month, leap, kind)) for month in month_sequence(year)]


def days_in_month(year: int, month: HebrewMonth) -> int:
    """Return the length of *month* in *year*.

    Raises
    ------
    InvalidHebrewDateError
        If *month* is Adar II and *year* is not a leap year.
    """

    month = HebrewMonth(month)
    leap = is_leap_year(year)
    if month is HebrewMonth.ADAR_II and not leap:
        raise InvalidHebrewDateError(f"Adar II does not exist in the common year {year}")
    if month in (HebrewMonth.CHESHVAN, HebrewMonth.KISLEV):
        return _month_length(month, leap, category(year))
    return _month_length(month, leap, YearLengthCategory.KESIDRAN)


def day_of_year(year: int, month: HebrewMonth, day: int) -> int:
    """Return the 1-based day number of a date within its year, Rosh Hashana being 1."""

    total = day
    for candidate, length in _year_layout(year):
        if candidate == month:
            return total
        total += length
    raise InvalidHebrewDateError(f"Adar II does not exist in the common year {year}")


def to_absolute(hebrew_date: HebrewDate) -> int:
    """Return the day count of *hebrew_date*, 1 Tishrei of year 1 being day 1."""

    year = hebrew_date.year
    return elapsed_days(year) + day_of_year(year, hebrew_date.month, hebrew_date.day) - 1


def from_absolute(absolute: int) -> Optional[HebrewDate]:
    """Return the Hebrew date of day *absolute*, or ``None`` before the epoch."""

    if absolute < 1:
        return None
    year = (absolute - 1) * _MEAN_YEAR_NUMERATOR // _MEAN_YEAR_DENOMINATOR + 1
    while elapsed_days(year + 1) <= absolute:
        year += 1
    while year > 1 and elapsed_days(year) > absolute:
        year -= 1
    remaining = absolute - elapsed_days(year)
    for month, length in _year_layout(year):
        if remaining < length:
            return HebrewDate(year, month, remaining + 1)
        remaining -= length
    raise RuntimeError(f"Day {absolute} overflowed Hebrew year {year}")


def to_fixed(hebrew_date: HebrewDate) -> int:
    return to_absolute(hebrew_date) + HEBREW_EPOCH_RD - 1


def from_fixed(fixed: int) -> Optional[HebrewDate]:
    return from_absolute(fixed - HEBREW_EPOCH_RD + 1)


def from_gregorian(gregorian: date) -> Optional[HebrewDate]:
    return from_fixed(gregorian.toordinal())


def from_gregorian_ymd(year: int, month: int, day: int) -> Optional[HebrewDate]:
    """Convert a proleptic Gregorian date given as integers, including years before 1 CE."""

    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if not 1 <= day <= days_in_gregorian_month(year, month):
        raise ValueError(f"day is out of range for month, got {day}")
    return from_fixed(fixed_from_gregorian(year, month, day))


def to_gregorian(hebrew_date: HebrewDate) -> date:
    """Return the civil date on whose daytime *hebrew_date* falls.

    Raises ``ValueError`` for dates before 1 January 1 CE; use
    :func:`to_gregorian_ymd` for those.
    """

    fixed = to_fixed(hebrew_date)
    if fixed < 1:
        raise ValueError(f"{hebrew_date} precedes 1 January 1 CE")
    return date.fromordinal(fixed)


def to_gregorian_ymd(hebrew_date: HebrewDate) -> Tuple[int, int, int]:
    return gregorian_from_fixed(to_fixed(hebrew_date))


def day_of_week(hebrew_date: HebrewDate) -> int:
    """Weekday of *hebrew_date*, 1 for Sunday through 7 for Shabbos."""

    return to_fixed(hebrew_date) % 7 + 1


def next_day(hebrew_date: HebrewDate) -> HebrewDate:
    year, month, day = hebrew_date.year, hebrew_date.month, hebrew_date.day
    if day < days_in_month(year, month):
        return HebrewDate(year, month, day + 1)
    if month is HebrewMonth.ELUL:
        return HebrewDate(year + 1, HebrewMonth.TISHREI, 1)
    months = month_sequence(year)
    return HebrewDate(year, months[months.index(month) + 1], 1)


def previous_day(hebrew_date: HebrewDate) -> Optional[HebrewDate]:
    """Return the preceding day, or ``None`` for 1 Tishrei of year 1."""

    year, month, day = hebrew_date.year, hebrew_date.month, hebrew_date.day
    if day > 1:
        return HebrewDate(year, month, day - 1)
    if month is HebrewMonth.TISHREI:
        if year == 1:
            return None
        return HebrewDate(year - 1, HebrewMonth.ELUL, 29)
    months = month_sequence(year)
    previous = months[months.index(month) - 1]
    return HebrewDate(year, previous, days_in_month(year, previous))


def advance(hebrew_date: HebrewDate, days: int) -> Optional[HebrewDate]:
    """Move *hebrew_date* by *days* (negative to go back); ``None`` if that leaves the epoch."""

    return from_absolute(to_absolute(hebrew_date) + days)
