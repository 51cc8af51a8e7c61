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

from luach.yomi import (
    BAVLI_CYCLE_LENGTH,
    BavliMasechta,
    Daf,
    YerushalmiMasechta,
    bavli_cycle_position,
    daf_yomi_bavli,
    daf_yomi_yerushalmi,
    julian_day_number,
)


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2023, 12, 21), Daf(BavliMasechta.BAVA_KAMMA, 49)),
        (date(2024, 2, 4), Daf(BavliMasechta.BAVA_KAMMA, 94)),
        (date(2020, 6, 18), Daf(BavliMasechta.SHABBOS, 104)),
        (date(2020, 1, 5), Daf(BavliMasechta.BERACHOS, 2)),
        (date(2020, 1, 4), Daf(BavliMasechta.NIDDAH, 73)),
        (date(1975, 6, 24), Daf(BavliMasechta.BERACHOS, 2)),
        (date(1975, 6, 23), Daf(BavliMasechta.NIDDAH, 73)),
        (date(1923, 9, 11), Daf(BavliMasechta.BERACHOS, 2)),
    ],
)
def test_known_bavli_pages(day: date, expected: Daf) -> None:
    assert daf_yomi_bavli(day) == expected


def test_bavli_cycle_numbers():
    assert bavli_cycle_position(date(1923, 9, 11)).cycle_number == 1
    assert bavli_cycle_position(date(1975, 6, 23)).cycle_number == 7
    change = bavli_cycle_position(date(1975, 6, 24))
    assert (change.cycle_number, change.day_in_cycle, change.shekalim_blatt) == (8, 0, 22)
    assert bavli_cycle_position(date(2020, 1, 5)).cycle_number == 14
    assert bavli_cycle_position(date(2020, 1, 4)).cycle_number == 13


def test_bavli_cycle_visits_every_page_once():
    start = date(2020, 1, 5)
    pages = [daf_yomi_bavli(start + timedelta(days=offset)) for offset in range(BAVLI_CYCLE_LENGTH)]
    assert len(set(pages)) == BAVLI_CYCLE_LENGTH
    assert pages[-1] == Daf(BavliMasechta.NIDDAH, 73)
    assert daf_yomi_bavli(start + timedelta(days=BAVLI_CYCLE_LENGTH)) == pages[0]


def test_bavli_pages_after_shared_masechtos():
    start = date(2020, 1, 5)
    firsts = {}
    for offset in range(BAVLI_CYCLE_LENGTH):
        page = daf_yomi_bavli(start + timedelta(days=offset))
        firsts.setdefault(page.masechta, page.daf)
    assert firsts[BavliMasechta.KINNIM] == 23
    assert firsts[BavliMasechta.TAMID] == 26
    assert firsts[BavliMasechta.MIDOS] == 34


def test_bavli_before_first_cycle(caplog: pytest.LogCaptureFixture):
    assert bavli_cycle_position(date(1923, 9, 10)) is None
    with caplog.at_level(logging.DEBUG, logger="luach.yomi"):
        assert daf_yomi_bavli(date(1923, 9, 10)) is None
    payload = json.loads(caplog.records[-1].getMessage())
    assert payload == {"event": "daf_yomi_unavailable", "cycle": "bavli", "date": "1923-09-10"}


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(1980, 2, 2), Daf(YerushalmiMasechta.BERACHOS, 1)),
        (date(2020, 6, 18), Daf(YerushalmiMasechta.YOMA, 17)),
        (date(2023, 12, 21), Daf(YerushalmiMasechta.SHABBOS, 8)),
        (date(2024, 2, 4), Daf(YerushalmiMasechta.SHABBOS, 53)),
    ],
)
def test_known_yerushalmi_pages(day: date, expected: Daf) -> None:
    assert daf_yomi_yerushalmi(day) == expected


def test_yerushalmi_skips_yom_kippur_and_tisha_beav():
    assert daf_yomi_yerushalmi(date(2023, 9, 25)) is None
    assert daf_yomi_yerushalmi(date(2024, 8, 13)) is None
    before = daf_yomi_yerushalmi(date(2023, 9, 24))
    after = daf_yomi_yerushalmi(date(2023, 9, 26))
    assert before.masechta == after.masechta
    assert after.daf == before.daf + 1


def test_yerushalmi_before_first_cycle():
    assert daf_yomi_yerushalmi(date(1980, 2, 1)) is None


def test_julian_day_number():
    assert julian_day_number(date(2000, 1, 1)) == 2451545
