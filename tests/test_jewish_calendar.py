from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path

import json
import logging
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from luach.calendar import HebrewDate, OutOfDomainError, from_gregorian, next_day
from luach.cycle import HebrewMonth
from luach.holidays import YomTov
from luach.jewish_calendar import JewishCalendar
from luach.keviah import YearLengthCategory
from luach.models import CalendarSettings
from luach.molad import Molad
from luach.parsha import Parsha
from luach.yomi import BavliMasechta, Daf

M = HebrewMonth

ISRAEL = CalendarSettings(in_israel=True)
MODERN = CalendarSettings(use_modern_holidays=True)
WALLED_CITY = CalendarSettings(mukaf_choma=True)


def _on(year: int, month: int, day: int, settings: CalendarSettings | None = None) -> JewishCalendar:
    return JewishCalendar(date(year, month, day), settings)


@pytest.fixture
def teves_8() -> JewishCalendar:
    return _on(2023, 12, 20)


def test_cursor_reports_both_calendars(teves_8: JewishCalendar):
    assert teves_8.jewish_date == HebrewDate(5784, M.TEVES, 8)
    assert (teves_8.jewish_year, teves_8.jewish_month, teves_8.jewish_day_of_month) == (5784, M.TEVES, 8)
    assert teves_8.gregorian_date == date(2023, 12, 20)
    assert teves_8.gregorian_ymd == (2023, 12, 20)
    assert teves_8.day_of_week == 4
    assert teves_8.yom_tov_index is None


def test_year_structure(teves_8: JewishCalendar):
    assert teves_8.is_jewish_leap_year
    assert teves_8.days_in_jewish_year == 383
    assert teves_8.days_in_jewish_month == 29
    assert teves_8.is_kislev_short and not teves_8.is_cheshvan_long
    assert teves_8.cheshvan_kislev_kviah is YearLengthCategory.CHASERIM


def test_molad_of_cursor_month(teves_8: JewishCalendar):
    assert teves_8.molad == Molad(day_of_week=4, hours=2, chalakim=21)
    assert int(teves_8.molad_datetime.timestamp()) == 1702402813
    assert teves_8.tchilas_zman_kiddush_levana_3_days < teves_8.tchilas_zman_kiddush_levana_7_days
    assert teves_8.sof_zman_kiddush_levana_between_moldos < teves_8.sof_zman_kiddush_levana_15_days


def test_forward_and_back(teves_8: JewishCalendar):
    teves_8.forward(24)
    assert teves_8.jewish_date == HebrewDate(5784, M.SHEVAT, 3)
    teves_8.back(24)
    assert teves_8.gregorian_date == date(2023, 12, 20)
    teves_8.forward()
    assert teves_8.jewish_day_of_month == 9


def test_single_steps_match_civil_arithmetic_over_a_full_cycle():
    start = date(2023, 9, 16)
    calendar = JewishCalendar(start)
    steps = 7000
    for offset in range(1, steps + 1):
        previous = calendar.jewish_date
        calendar.forward()
        expected = start + timedelta(days=offset)
        assert calendar.gregorian_date == expected, offset
        assert calendar.jewish_date == from_gregorian(expected), offset
        assert calendar.jewish_date == next_day(previous), offset
    assert calendar.jewish_year == 5803
    calendar.back(steps)
    assert calendar.jewish_date == HebrewDate(5784, M.TISHREI, 1)


def test_copy_is_independent(teves_8: JewishCalendar):
    other = teves_8.copy()
    other.forward(7)
    assert teves_8.jewish_day_of_month == 8
    assert other.jewish_day_of_month == 15
    assert other.settings == teves_8.settings


def test_set_dates():
    calendar = JewishCalendar(settings=ISRAEL)
    calendar.set_jewish_date(5784, M.NISSAN, 15)
    assert calendar.gregorian_date == date(2024, 4, 23)
    calendar.set_gregorian_date(2023, 9, 16)
    assert calendar.jewish_date == HebrewDate(5784, M.TISHREI, 1)
    assert calendar.days_since_start_of_jewish_year == 1
    assert calendar.settings.in_israel


def test_invalid_positions_rejected(teves_8: JewishCalendar):
    with pytest.raises(ValueError):
        teves_8.set_gregorian_date(2023, 2, 30)
    with pytest.raises(ValueError):
        teves_8.set_jewish_date(5783, M.ADAR_II, 1)
    assert teves_8.jewish_date == HebrewDate(5784, M.TEVES, 8)


def test_back_before_epoch_raises(caplog: pytest.LogCaptureFixture):
    calendar = JewishCalendar(HebrewDate(1, M.TISHREI, 1))
    assert calendar.absolute_day == 1
    with caplog.at_level(logging.WARNING, logger="luach.jewish_calendar"):
        with pytest.raises(OutOfDomainError):
            calendar.back()
    events = [json.loads(record.getMessage())["event"] for record in caplog.records]
    assert events == ["cursor_out_of_domain"]
    assert calendar.absolute_day == 1


def test_dates_before_common_era():
    calendar = JewishCalendar(HebrewDate(3000, M.TISHREI, 1))
    assert calendar.gregorian_ymd[0] < 1
    with pytest.raises(ValueError):
        calendar.gregorian_date
    assert calendar.daf_yomi_bavli is None
    assert calendar.daf_yomi_yerushalmi is None


def test_pesach_diaspora_and_israel():
    diaspora = _on(2024, 4, 23)
    israel = _on(2024, 4, 23, ISRAEL)
    for calendar in (diaspora, israel):
        assert calendar.is_pesach and calendar.is_yom_tov
        assert calendar.is_assur_bemelacha
    assert diaspora.is_erev_yom_tov_sheni and diaspora.has_candle_lighting
    assert not israel.is_erev_yom_tov_sheni and not israel.has_candle_lighting

    second_day = _on(2024, 4, 24)
    assert second_day.is_pesach
    assert _on(2024, 4, 24, ISRAEL).is_chol_hamoed_pesach


def test_chol_hamoed_and_isru_chag():
    last_chol_hamoed = _on(2024, 4, 28)
    assert last_chol_hamoed.is_chol_hamoed and last_chol_hamoed.is_yom_tov
    assert last_chol_hamoed.is_erev_yom_tov
    assert not last_chol_hamoed.is_assur_bemelacha

    isru_chag = _on(2024, 5, 1)
    assert isru_chag.is_isru_chag and not isru_chag.is_yom_tov
    assert _on(2024, 4, 30, ISRAEL).is_isru_chag


def test_erev_pesach_is_taanis_bechoros():
    erev = _on(2024, 4, 22)
    assert erev.yom_tov_index is YomTov.EREV_PESACH
    assert erev.is_erev_yom_tov and not erev.is_yom_tov
    assert erev.is_taanis_bechoros and erev.has_candle_lighting


def test_succos_season_5785():
    hoshana_rabba = _on(2024, 10, 23)
    assert hoshana_rabba.is_hoshana_rabba
    assert hoshana_rabba.is_yom_tov and hoshana_rabba.is_erev_yom_tov
    assert _on(2024, 10, 24).is_shemini_atzeres
    assert _on(2024, 10, 25).is_simchas_torah
    assert _on(2024, 10, 25, ISRAEL).is_isru_chag
    assert _on(2024, 10, 18).is_succos
    assert _on(2024, 10, 19).is_chol_hamoed_succos
    assert _on(2024, 10, 18, ISRAEL).is_chol_hamoed_succos
    assert _on(2024, 10, 18, ISRAEL).is_chol_hamoed


def test_yamim_noraim():
    rosh_hashana = _on(2023, 9, 16)
    assert rosh_hashana.is_rosh_hashana and rosh_hashana.is_aseres_yemei_teshuva
    assert not rosh_hashana.is_rosh_chodesh
    assert rosh_hashana.is_erev_yom_tov_sheni
    yom_kippur = _on(2023, 9, 25)
    assert yom_kippur.is_yom_kippur and yom_kippur.is_taanis and yom_kippur.is_yom_tov
    assert not yom_kippur.is_regular_taanis
    assert _on(2023, 9, 18).yom_tov_index is YomTov.FAST_OF_GEDALYAH
    assert not _on(2023, 9, 26).is_aseres_yemei_teshuva


def test_fasts_that_move_off_shabbos():
    assert _on(2022, 8, 6).yom_tov_index is None
    assert _on(2022, 8, 7).is_tisha_beav
    assert _on(2024, 8, 13).is_tisha_beav
    assert _on(2024, 3, 21).yom_tov_index is YomTov.FAST_OF_ESTHER
    assert _on(2024, 3, 23).yom_tov_index is None


def test_minor_fasts_are_not_yom_tov():
    tenth_of_teves = _on(2023, 12, 22)
    assert tenth_of_teves.yom_tov_index is YomTov.TENTH_OF_TEVES
    assert tenth_of_teves.is_taanis and not tenth_of_teves.is_yom_tov
    assert tenth_of_teves.is_regular_taanis
    assert not _on(2023, 12, 20).is_regular_taanis


def test_purim_and_shushan_purim():
    assert _on(2024, 3, 24).is_purim
    assert not _on(2024, 3, 24, WALLED_CITY).is_purim
    assert _on(2024, 3, 25, WALLED_CITY).is_purim
    assert _on(2024, 2, 23).yom_tov_index is YomTov.PURIM_KATAN
    assert _on(2023, 3, 7).is_purim


def test_chanukah_5784():
    assert _on(2023, 12, 7).day_of_chanukah is None
    assert _on(2023, 12, 8).day_of_chanukah == 1
    assert _on(2023, 12, 13).day_of_chanukah == 6
    assert _on(2023, 12, 15).day_of_chanukah == 8
    assert _on(2023, 12, 15).is_chanukah
    assert _on(2023, 12, 16).day_of_chanukah is None


def test_modern_holidays_need_flag():
    assert _on(2024, 5, 13).yom_tov_index is None
    assert _on(2024, 5, 13, MODERN).yom_tov_index is YomTov.YOM_HAZIKARON
    assert _on(2024, 5, 14, MODERN).yom_tov_index is YomTov.YOM_HAATZMAUT


def test_omer():
    assert _on(2024, 4, 23).day_of_omer is None
    assert _on(2024, 4, 24).day_of_omer == 1
    lag_baomer = _on(2024, 5, 26)
    assert lag_baomer.day_of_omer == 33
    assert lag_baomer.yom_tov_index is YomTov.LAG_BAOMER


def test_rosh_chodesh():
    assert _on(2024, 1, 11).is_rosh_chodesh
    assert _on(2024, 1, 10).is_erev_rosh_chodesh
    calendar = JewishCalendar(HebrewDate(5785, M.CHESHVAN, 30))
    assert calendar.is_rosh_chodesh and calendar.gregorian_date == date(2024, 12, 1)


def test_yom_kippur_katan():
    assert _on(2025, 2, 27).is_yom_kippur_katan
    assert not _on(2025, 2, 28).is_yom_kippur_katan


def test_behab():
    calendar = JewishCalendar(HebrewDate(5784, M.CHESHVAN, 1))
    found = []
    for _ in range(29):
        if calendar.is_behab:
            found.append(calendar.day_of_week)
        calendar.forward()
    assert found == [2, 5, 2]


def test_shmita_and_birkas_hachamah():
    assert _on(2021, 9, 7).is_shmita_year
    assert not _on(2023, 9, 16).is_shmita_year
    assert _on(2009, 4, 8).is_birkas_hachamah
    assert not _on(2009, 4, 7).is_birkas_hachamah


def test_readings(teves_8: JewishCalendar):
    assert teves_8.parshah is Parsha.NONE
    assert teves_8.upcoming_parshah is Parsha.VAYIGASH
    assert teves_8.daf_yomi_bavli == Daf(BavliMasechta.BAVA_KAMMA, 48)
    teves_8.forward()
    assert teves_8.daf_yomi_bavli == Daf(BavliMasechta.BAVA_KAMMA, 49)
