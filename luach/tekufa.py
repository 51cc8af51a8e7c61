"""Tekufos of Shmuel: the four seasons of a 365.25-day solar year.

All arithmetic is exact; days and hours are :class:`fractions.Fraction`
values so no tekufa drifts by a rounding error over the millennia.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from fractions import Fraction
from typing import Optional

from .calendar import HEBREW_EPOCH_RD
from .molad import ISRAEL_STANDARD_TIME

__all__ = [
    "SOLAR_YEAR_DAYS",
    "TEKUFA_LENGTH_DAYS",
    "Tekufa",
    "TekufaEvent",
    "tekufa_on",
    "tekufa_datetime",
    "tekufas_tishrei_elapsed_days",
    "is_birkas_hachamah",
]

SOLAR_YEAR_DAYS = Fraction(1461, 4)
TEKUFA_LENGTH_DAYS = SOLAR_YEAR_DAYS / 4
# Tekufas Tishrei of year 1 fell 12.625 days before absolute day 0.
INITIAL_TEKUFA_OFFSET = Fraction(101, 8)

BIRKAS_HACHAMAH_WEEKDAY = 4


class Tekufa(Enum):
    TISHREI = 0
    TEVES = 1
    NISSAN = 2
    TAMMUZ = 3


@dataclass(frozen=True)
class TekufaEvent:
    """A tekufa falling on some Hebrew day.

    ``hours`` run from 18:00 of the civil evening that opens the Hebrew day,
    so a value of 0 is the moment the day begins.
    """

    tekufa: Tekufa
    hours: Fraction


def tekufa_on(absolute: int) -> Optional[TekufaEvent]:
    """Return the tekufa that falls during Hebrew day *absolute*, if any."""

    solar = (absolute + INITIAL_TEKUFA_OFFSET) % SOLAR_YEAR_DAYS
    into_tekufa = solar % TEKUFA_LENGTH_DAYS
    if not 0 < into_tekufa <= 1:
        return None
    hours = ((1 - into_tekufa) * 24) % 24
    return TekufaEvent(Tekufa(int(solar / TEKUFA_LENGTH_DAYS)), hours)


def tekufa_datetime(absolute: int, minus_21_minutes: bool = False) -> Optional[datetime]:
    """Return the tekufa of day *absolute* in Israel standard time, truncated to the minute.

    Some communities move the tekufa 21 minutes earlier to reconcile Jerusalem
    mean time; *minus_21_minutes* applies that adjustment.
    """

    event = tekufa_on(absolute)
    if event is None:
        return None
    civil_date = date.fromordinal(absolute + HEBREW_EPOCH_RD - 1)
    midnight = datetime.combine(civil_date, time(0), tzinfo=ISRAEL_STANDARD_TIME)
    minutes = int((event.hours - 6) * 60)
    if minus_21_minutes:
        minutes -= 21
    return midnight + timedelta(minutes=minutes)


def tekufas_tishrei_elapsed_days(year: int, absolute: int) -> int:
    """Solar day count of day *absolute* within Hebrew *year*.

    Tekufas Tishrei lands near day -12, so day 47 is the sixtieth day of the
    season, when the diaspora begins asking for rain.
    """

    return (4 * absolute + 2 - 1461 * (year - 1)) // 4


def is_birkas_hachamah(absolute: int) -> bool:
    """True on the Wednesday whose evening opens with Tekufas Nissan."""

    if (absolute + HEBREW_EPOCH_RD - 1) % 7 + 1 != BIRKAS_HACHAMAH_WEEKDAY:
        return False
    event = tekufa_on(absolute)
    return event is not None and event.tekufa is Tekufa.NISSAN and event.hours == 0
