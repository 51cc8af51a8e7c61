"""Hebrew calendar arithmetic, holiday rules and Daf Yomi cycles."""

from .calendar import (
    CalendarError,
    HebrewDate,
    InvalidHebrewDateError,
    OutOfDomainError,
    advance,
    day_of_week,
    days_in_month,
    from_absolute,
    from_gregorian,
    from_gregorian_ymd,
    next_day,
    previous_day,
    to_absolute,
    to_gregorian,
    to_gregorian_ymd,
)
from .cycle import CyclePosition, HebrewMonth, cycle_position, is_leap_year
from .holidays import YomTov, yom_tov_index
from .jewish_calendar import JewishCalendar
from .keviah import YearInfo, YearLengthCategory, days_in_year, resolve_year
from .models import CalendarSettings, DaySummary, TefilaCustoms
from .molad import Molad, chalakim_since_molad_tohu, molad, molad_datetime
from .parsha import Parsha, parshah, special_shabbos
from .summary import summarize_day
from .tefila import TefilaRules
from .tekufa import Tekufa, TekufaEvent, tekufa_on
from .yomi import BavliMasechta, Daf, YerushalmiMasechta, daf_yomi_bavli, daf_yomi_yerushalmi

__all__ = [
    "BavliMasechta",
    "CalendarError",
    "CalendarSettings",
    "CyclePosition",
    "Daf",
    "DaySummary",
    "HebrewDate",
    "HebrewMonth",
    "InvalidHebrewDateError",
    "JewishCalendar",
    "Molad",
    "OutOfDomainError",
    "Parsha",
    "TefilaCustoms",
    "TefilaRules",
    "Tekufa",
    "TekufaEvent",
    "YearInfo",
    "YearLengthCategory",
    "YerushalmiMasechta",
    "YomTov",
    "advance",
    "chalakim_since_molad_tohu",
    "cycle_position",
    "daf_yomi_bavli",
    "daf_yomi_yerushalmi",
    "day_of_week",
    "days_in_month",
    "days_in_year",
    "from_absolute",
    "from_gregorian",
    "from_gregorian_ymd",
    "is_leap_year",
    "molad",
    "molad_datetime",
    "next_day",
    "parshah",
    "previous_day",
    "resolve_year",
    "special_shabbos",
    "tekufa_on",
    "summarize_day",
    "to_absolute",
    "to_gregorian",
    "to_gregorian_ymd",
    "yom_tov_index",
]
