from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from luach.calendar import (
    CalendarError,
    HebrewDate,
    InvalidHebrewDateError,
    advance,
    day_of_week,
    day_of_year,
    days_in_month,
    fixed_from_gregorian,
    from_absolute,
    from_gregorian,
    from_gregorian_ymd,
    gregorian_from_fixed,
    next_day,
    previous_day,
    to_absolute,
    to_gregorian,
    to_gregorian_ymd,
)
from luach.cycle import HebrewMonth, month_sequence
from luach.keviah import days_in_year

M = HebrewMonth

KNOWN_CONVERSIONS = [
    (date(2023, 9, 16), HebrewDate(5784, M.TISHREI, 1)),
    (date(2023, 12, 20), HebrewDate(5784, M.TEVES, 8)),
    (date(2024, 10, 3), HebrewDate(5785, M.TISHREI, 1)),
    (date(2023, 3, 7), HebrewDate(5783, M.ADAR, 14)),
    (date(2024, 2, 23), HebrewDate(5784, M.ADAR, 14)),
    (date(2024, 3, 24), HebrewDate(5784, M.ADAR_II, 14)),
    (date(2024, 4, 23), HebrewDate(5784, M.NISSAN, 15)),
    (date(2024, 8, 13), HebrewDate(5784, M.AV, 9)),
]


@pytest.mark.parametrize("civil,hebrew", KNOWN_CONVERSIONS)
def test_known_conversions(civil: date, hebrew: HebrewDate) -> None:
    assert from_gregorian(civil) == hebrew
    assert to_gregorian(hebrew) == civil


def test_weekday_of_known_dates():
    assert day_of_week(HebrewDate(5784, M.TEVES, 8)) == 4
    assert day_of_week(HebrewDate(5784, M.TISHREI, 1)) == 7
    assert day_of_week(HebrewDate(5784, M.NISSAN, 15)) == 3


def test_daily_round_trip_and_stepping():
    day = date(2019, 1, 1)
    hebrew = from_gregorian(day)
    while day < date(2027, 1, 1):
        assert to_gregorian(hebrew) == day
        assert from_absolute(to_absolute(hebrew)) == hebrew
        assert day_of_week(hebrew) == day.isoweekday() % 7 + 1
        following = next_day(hebrew)
        assert previous_day(following) == hebrew
        assert following > hebrew
        day += timedelta(days=1)
        assert from_gregorian(day) == following
        hebrew = following


def test_sampled_round_trip_across_range():
    for absolute in range(1, 2_300_000, 997):
        hebrew = from_absolute(absolute)
        assert to_absolute(hebrew) == absolute


def test_month_lengths_sum_to_year_length():
    for year in range(5700, 5850):
        months = month_sequence(year)
        assert sum(days_in_month(year, month) for month in months) == days_in_year(year)
        assert day_of_year(year, months[-1], 29) == days_in_year(year)


def test_variable_month_lengths():
    assert days_in_month(5784, M.KISLEV) == 29
    assert days_in_month(5785, M.CHESHVAN) == 30
    assert days_in_month(5784, M.ADAR) == 30
    assert days_in_month(5783, M.ADAR) == 29
    assert days_in_month(5784, M.ADAR_II) == 29


def test_month_boundaries():
    assert next_day(HebrewDate(5783, M.ELUL, 29)) == HebrewDate(5784, M.TISHREI, 1)
    assert next_day(HebrewDate(5784, M.ADAR, 30)) == HebrewDate(5784, M.ADAR_II, 1)
    assert next_day(HebrewDate(5783, M.ADAR, 29)) == HebrewDate(5783, M.NISSAN, 1)
    assert previous_day(HebrewDate(5784, M.NISSAN, 1)) == HebrewDate(5784, M.ADAR_II, 29)
    assert previous_day(HebrewDate(5784, M.TISHREI, 1)) == HebrewDate(5783, M.ELUL, 29)


def test_advance():
    start = HebrewDate(5784, M.TISHREI, 1)
    assert advance(start, 383) == HebrewDate(5785, M.TISHREI, 1)
    assert advance(HebrewDate(5785, M.TISHREI, 1), -383) == start
    assert advance(start, 0) == start


def test_dates_order_chronologically():
    dates = [
        HebrewDate(5784, M.NISSAN, 1),
        HebrewDate(5784, M.ADAR_II, 14),
        HebrewDate(5783, M.ELUL, 29),
        HebrewDate(5784, M.ADAR, 14),
    ]
    assert sorted(dates) == sorted(dates, key=to_absolute)


def test_month_number_is_coerced():
    assert HebrewDate(5784, 7, 1).month is M.ADAR_II
    assert str(HebrewDate(5784, M.TEVES, 8)) == "8 Teves 5784"


@pytest.mark.parametrize(
    "year,month,day",
    [
        (5783, M.ADAR_II, 1),
        (5784, M.KISLEV, 30),
        (5784, M.ELUL, 30),
        (5784, 14, 1),
        (5784, M.NISSAN, 0),
        (0, M.TISHREI, 1),
    ],
)
def test_invalid_dates_rejected(year: int, month: int, day: int) -> None:
    with pytest.raises(InvalidHebrewDateError):
        HebrewDate(year, month, day)


def test_invalid_date_is_a_value_error():
    assert issubclass(InvalidHebrewDateError, CalendarError)
    with pytest.raises(ValueError):
        HebrewDate(5783, M.ADAR_II, 1)


def test_epoch():
    first = HebrewDate(1, M.TISHREI, 1)
    assert to_absolute(first) == 1
    assert from_gregorian_ymd(-3760, 9, 7) == first
    assert from_gregorian_ymd(-3760, 9, 6) is None
    assert to_gregorian_ymd(first) == (-3760, 9, 7)
    assert from_absolute(0) is None
    assert previous_day(first) is None
    assert advance(first, -1) is None


def test_dates_before_common_era():
    ancient = HebrewDate(3000, M.TISHREI, 1)
    with pytest.raises(ValueError):
        to_gregorian(ancient)
    year, month, day = to_gregorian_ymd(ancient)
    assert year < 1
    assert from_gregorian_ymd(year, month, day) == ancient


def test_invalid_gregorian_fields_rejected():
    with pytest.raises(ValueError):
        from_gregorian_ymd(2023, 13, 1)
    with pytest.raises(ValueError):
        from_gregorian_ymd(2023, 2, 29)


def test_gregorian_helpers_match_ordinals():
    assert fixed_from_gregorian(0, 12, 31) == 0
    for ordinal in range(1, 800_000, 641):
        civil = date.fromordinal(ordinal)
        assert fixed_from_gregorian(civil.year, civil.month, civil.day) == ordinal
        assert gregorian_from_fixed(ordinal) == (civil.year, civil.month, civil.day)
    for fixed in range(-1_400_000, 1, 977):
        assert fixed_from_gregorian(*gregorian_from_fixed(fixed)) == fixed
