from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from luach.cycle import LEAP_CYCLE_POSITIONS, HebrewMonth, cycle_position, is_leap_year, month_index
from luach.molad import (
    CHALAKIM_MOLAD_TOHU,
    CHALAKIM_PER_MONTH,
    ISRAEL_STANDARD_TIME,
    Molad,
    chalakim_since_molad_tohu,
    molad,
    molad_datetime,
    molad_of_tishrei,
    months_elapsed,
    sof_zman_kiddush_levana_15_days,
    sof_zman_kiddush_levana_between_moldos,
    tchilas_zman_kiddush_levana_3_days,
    tchilas_zman_kiddush_levana_7_days,
)


def test_molad_tohu_is_baharad():
    assert chalakim_since_molad_tohu(1) == CHALAKIM_MOLAD_TOHU
    assert molad_of_tishrei(1) == Molad(day_of_week=2, hours=5, chalakim=204)


def test_molad_of_tishrei_5784():
    result = molad_of_tishrei(5784)
    assert result == Molad(day_of_week=6, hours=11, chalakim=882)
    assert (result.civil_hours, result.minutes, result.chalakim_remainder) == (5, 49, 0)


def test_molad_of_teves_5784_announcement():
    result = molad(5784, HebrewMonth.TEVES)
    assert result == Molad(day_of_week=4, hours=2, chalakim=21)
    assert (result.civil_hours, result.minutes, result.chalakim_remainder) == (20, 1, 3)


def test_other_known_moldos():
    assert molad_of_tishrei(5785) == Molad(day_of_week=5, hours=9, chalakim=391)
    assert molad(5784, HebrewMonth.NISSAN) == Molad(day_of_week=3, hours=4, chalakim=1033)


def test_consecutive_months_are_one_lunation_apart():
    months = [(5784, month) for month in HebrewMonth] + [(5785, HebrewMonth.TISHREI)]
    totals = [chalakim_since_molad_tohu(year, month) for year, month in months]
    assert all(later - earlier == CHALAKIM_PER_MONTH for earlier, later in zip(totals, totals[1:]))


def test_cycle_has_235_months():
    assert months_elapsed(20) - months_elapsed(1) == 235
    assert months_elapsed(5799) - months_elapsed(5780) == 235


def test_leap_rule_matches_cycle_positions():
    for year in range(1, 400):
        position = cycle_position(year)
        assert 1 <= position.position <= 19
        assert position.is_leap == is_leap_year(year)
        assert position.is_leap == (position.position in LEAP_CYCLE_POSITIONS)


def test_adar_ii_index_requires_leap_year():
    assert month_index(5784, HebrewMonth.ADAR_II) == 6
    assert month_index(5783, HebrewMonth.NISSAN) == 6
    with pytest.raises(ValueError):
        month_index(5783, HebrewMonth.ADAR_II)


def test_year_zero_rejected():
    with pytest.raises(ValueError):
        months_elapsed(0)


def test_molad_datetime_teves_5784():
    instant = molad_datetime(5784, HebrewMonth.TEVES)
    assert instant == datetime(2023, 12, 12, 19, 40, 13, 504000, tzinfo=ISRAEL_STANDARD_TIME)
    assert int(instant.timestamp()) == 1702402813
    assert instant.astimezone(UTC).hour == 17


def test_molad_datetime_after_six_hours_rolls_to_next_civil_day():
    instant = molad_datetime(5784, HebrewMonth.TISHREI)
    assert instant == datetime(2023, 9, 15, 5, 28, 3, 504000, tzinfo=ISRAEL_STANDARD_TIME)


def test_molad_datetime_before_common_era_rejected():
    with pytest.raises(ValueError):
        molad_datetime(1, HebrewMonth.TISHREI)


def test_kiddush_levana_windows():
    base = molad_datetime(5784, HebrewMonth.TEVES)
    assert tchilas_zman_kiddush_levana_3_days(5784, HebrewMonth.TEVES) - base == timedelta(days=3)
    assert tchilas_zman_kiddush_levana_7_days(5784, HebrewMonth.TEVES) - base == timedelta(days=7)
    assert sof_zman_kiddush_levana_15_days(5784, HebrewMonth.TEVES) - base == timedelta(days=15)
    halfway = sof_zman_kiddush_levana_between_moldos(5784, HebrewMonth.TEVES)
    assert halfway - base == timedelta(days=14, hours=18, minutes=22, seconds=1, microseconds=666000)
    assert halfway < molad_datetime(5784, HebrewMonth.SHEVAT)
