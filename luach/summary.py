"""Assemble a day's calendar facts into a presentation-ready payload."""

from __future__ import annotations

import json
import logging
import time
from datetime import date
from typing import Optional

from .jewish_calendar import JewishCalendar
from .models import CalendarSettings, DafPayload, DaySummary, MoladPayload, TefilaCustoms
from .parsha import Parsha
from .tefila import TefilaRules

__all__ = ["summarize_day"]

LOGGER = logging.getLogger(__name__)


def _parsha_name(parsha: Parsha) -> Optional[str]:
    return None if parsha is Parsha.NONE else parsha.name


def _molad_payload(calendar: JewishCalendar) -> MoladPayload:
    molad = calendar.molad
    try:
        instant = calendar.molad_datetime
    except ValueError:  # moldos before 1 CE have no datetime
        instant = None
    return MoladPayload(
        day_of_week=molad.day_of_week,
        hours=molad.civil_hours,
        minutes=molad.minutes,
        chalakim=molad.chalakim_remainder,
        instant=instant,
    )


def summarize_day(
    day: date,
    settings: Optional[CalendarSettings] = None,
    customs: Optional[TefilaCustoms] = None,
) -> DaySummary:
    """Build the :class:`DaySummary` for the civil date *day*.

    Parameters
    ----------
    day:
        Civil date already localized by the caller.
    settings:
        Observance options; read from the environment when omitted.
    customs:
        Local prayer customs; the common Ashkenazi defaults when omitted.
    """

    start_time = time.perf_counter()
    if settings is None:
        settings = CalendarSettings.from_env()
    calendar = JewishCalendar(day, settings)
    rules = TefilaRules(customs)
    tekufa = calendar.tekufa_name

    info = calendar.year_info
    summary = DaySummary(
        gregorian_date=day,
        day_of_week=calendar.day_of_week,
        jewish_year=calendar.jewish_year,
        jewish_month=calendar.jewish_month,
        jewish_day=calendar.jewish_day_of_month,
        is_leap_year=info.is_leap_year,
        days_in_year=info.days_in_year,
        year_category=info.category,
        yom_tov=calendar.yom_tov_index,
        day_of_chanukah=calendar.day_of_chanukah,
        day_of_omer=calendar.day_of_omer,
        is_rosh_chodesh=calendar.is_rosh_chodesh,
        is_tachanun_recited=rules.is_tachanun_recited_shacharis(calendar),
        is_hallel_recited=rules.is_hallel_recited(calendar),
        tekufa=tekufa.name if tekufa is not None else None,
        parsha=_parsha_name(calendar.parshah),
        special_shabbos=_parsha_name(calendar.special_shabbos),
        molad=_molad_payload(calendar),
        daf_yomi_bavli=DafPayload.from_daf(calendar.daf_yomi_bavli),
        daf_yomi_yerushalmi=DafPayload.from_daf(calendar.daf_yomi_yerushalmi),
        settings=settings,
        customs=rules.customs,
    )

    duration_ms = (time.perf_counter() - start_time) * 1000.0
    LOGGER.info(
        json.dumps(
            {
                "event": "day_summary",
                "date": day.isoformat(),
                "hebrew_date": str(calendar.jewish_date),
                "yom_tov": summary.yom_tov.name if summary.yom_tov is not None else None,
                "in_israel": settings.in_israel,
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return summary
