"""Molad arithmetic carried out in exact integer chalakim."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from .cycle import MONTHS_PER_CYCLE, YEARS_PER_CYCLE, HebrewMonth, month_index

__all__ = [
    "CHALAKIM_PER_MINUTE",
    "CHALAKIM_PER_HOUR",
    "CHALAKIM_PER_DAY",
    "CHALAKIM_PER_MONTH",
    "CHALAKIM_MOLAD_TOHU",
    "Molad",
    "months_elapsed",
    "chalakim_since_molad_tohu",
    "molad",
    "molad_of_tishrei",
    "molad_datetime",
    "tchilas_zman_kiddush_levana_3_days",
    "tchilas_zman_kiddush_levana_7_days",
    "sof_zman_kiddush_levana_between_moldos",
    "sof_zman_kiddush_levana_15_days",
]

CHALAKIM_PER_MINUTE = 18
CHALAKIM_PER_HOUR = 1080
CHALAKIM_PER_DAY = 25920
CHALAKIM_PER_MONTH = 765433  # 29d 12h 793p
CHALAKIM_MOLAD_TOHU = 31524  # BaHaRaD: day 2, 5h 204p

# Hebrew day n (counted from the molad tohu day) begins at 18:00 on the eve of
# this proleptic Gregorian ordinal plus n.
_CIVIL_ORDINAL_OFFSET = -1373429

ISRAEL_STANDARD_TIME = timezone(timedelta(hours=2), "IST")
# Jerusalem (35.2354 E) mean local time runs ahead of UTC+2 by this much.
JERUSALEM_MEAN_TIME_OFFSET = timedelta(minutes=20, seconds=56, microseconds=496000)

HALF_LUNAR_MONTH = timedelta(days=14, hours=18, minutes=22, seconds=1, microseconds=666000)


@dataclass(frozen=True)
class Molad:
    """A molad expressed as weekday, hour and chalakim of the Hebrew day.

    ``hours`` are counted from 18:00 of the preceding civil evening, the
    traditional start of the Hebrew day. ``day_of_week`` is 1 for Sunday.
    """

    day_of_week: int
    hours: int
    chalakim: int

    @classmethod
    def from_chalakim(cls, total: int) -> "Molad":
        days, parts = divmod(total, CHALAKIM_PER_DAY)
        hours, chalakim = divmod(parts, CHALAKIM_PER_HOUR)
        return cls(day_of_week=days % 7 + 1, hours=hours, chalakim=chalakim)

    @property
    def civil_hours(self) -> int:
        """Hour on a midnight-based clock, as the molad is announced."""

        return (self.hours + 18) % 24

    @property
    def minutes(self) -> int:
        return self.chalakim // CHALAKIM_PER_MINUTE

    @property
    def chalakim_remainder(self) -> int:
        return self.chalakim % CHALAKIM_PER_MINUTE


def months_elapsed(year: int, month: HebrewMonth = HebrewMonth.TISHREI) -> int:
    """Return the number of lunar months from the molad tohu to *month* of *year*."""

    if year < 1:
        raise ValueError(f"Hebrew year must be 1 or later, got {year}")
    previous = year - 1
    cycles, position = divmod(previous, YEARS_PER_CYCLE)
    return (
        MONTHS_PER_CYCLE * cycles
        + 12 * position
        + (7 * position + 1) // YEARS_PER_CYCLE
        + month_index(year, month)
    )


def chalakim_since_molad_tohu(year: int, month: HebrewMonth = HebrewMonth.TISHREI) -> int:
    return CHALAKIM_MOLAD_TOHU + CHALAKIM_PER_MONTH * months_elapsed(year, month)


def molad(year: int, month: HebrewMonth) -> Molad:
    return Molad.from_chalakim(chalakim_since_molad_tohu(year, month))


def molad_of_tishrei(year: int) -> Molad:
    return molad(year, HebrewMonth.TISHREI)


def molad_datetime(year: int, month: HebrewMonth) -> datetime:
    """Return the molad of *month* as an aware datetime in Israel standard time.

    The traditional reckoning uses Jerusalem mean local time, which is shifted
    to UTC+2 here. Moldos falling before 1 CE cannot be represented and raise
    ``ValueError``.

    Parameters
    ----------
    year:
        Hebrew year, ``1`` or later.
    month:
        Month whose molad is requested.

    Returns
    -------
    datetime.datetime
        Instant of the molad with ``tzinfo`` set to UTC+2.
    """

    days, parts = divmod(chalakim_since_molad_tohu(year, month), CHALAKIM_PER_DAY)
    ordinal = days + _CIVIL_ORDINAL_OFFSET
    if ordinal < 1:
        raise ValueError(f"Molad of {month.name.title()} {year} precedes the Gregorian era")
    evening = datetime.combine(date.fromordinal(ordinal), time(), ISRAEL_STANDARD_TIME)
    # One chelek is 10/3 seconds.
    elapsed = timedelta(hours=18, microseconds=parts * 10_000_000 // 3)
    return evening + elapsed - JERUSALEM_MEAN_TIME_OFFSET


def tchilas_zman_kiddush_levana_3_days(year: int, month: HebrewMonth) -> datetime:
    return molad_datetime(year, month) + timedelta(days=3)


def tchilas_zman_kiddush_levana_7_days(year: int, month: HebrewMonth) -> datetime:
    return molad_datetime(year, month) + timedelta(days=7)


def sof_zman_kiddush_levana_between_moldos(year: int, month: HebrewMonth) -> datetime:
    """Latest time for Kiddush Levana, halfway to the following molad."""

    return molad_datetime(year, month) + HALF_LUNAR_MONTH


def sof_zman_kiddush_levana_15_days(year: int, month: HebrewMonth) -> datetime:
    return molad_datetime(year, month) + timedelta(days=15)
