"""A movable calendar cursor exposing every per-day query."""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from typing import Optional, Tuple, Union

from .calendar import (
    HEBREW_EPOCH_RD,
    HebrewDate,
    OutOfDomainError,
    day_of_year,
    days_in_month,
    from_absolute,
    gregorian_from_fixed,
    to_absolute,
)
from .cycle import HebrewMonth
from .holidays import (
    EREV_YOM_TOV_DAYS,
    TAANIS_DAYS,
    YOM_TOV_ASSUR_BEMELACHA,
    YomTov,
    day_of_chanukah,
    day_of_omer,
    is_behab,
    is_erev_rosh_chodesh,
    is_erev_yom_tov_sheni,
    is_machar_chodesh,
    is_rosh_chodesh,
    is_shabbos_mevorchim,
    is_taanis_bechoros,
    is_yom_kippur_katan,
    yom_tov_index,
)
from .keviah import YearInfo, YearLengthCategory, resolve_year
from .models import CalendarSettings
from .molad import (
    Molad,
    molad,
    molad_datetime,
    sof_zman_kiddush_levana_15_days,
    sof_zman_kiddush_levana_between_moldos,
    tchilas_zman_kiddush_levana_3_days,
    tchilas_zman_kiddush_levana_7_days,
)
from .parsha import Parsha, parshah, special_shabbos, upcoming_parshah
from .tekufa import (
    Tekufa,
    TekufaEvent,
    is_birkas_hachamah,
    tekufa_datetime,
    tekufa_on,
    tekufas_tishrei_elapsed_days,
)
from .yomi import Daf, daf_yomi_bavli, daf_yomi_yerushalmi

__all__ = ["JewishCalendar"]

LOGGER = logging.getLogger(__name__)

FRIDAY = 6
SHABBOS = 7


class JewishCalendar:
    """A single day that can be set from either calendar and stepped by days.

    The cursor always holds a valid date on or after 1 Tishrei of year 1.
    Every query is computed from that date and the observance
    :class:`~luach.models.CalendarSettings`; nothing is cached.

    Parameters
    ----------
    day:
        Initial civil or Hebrew date; defaults to today's civil date.
    settings:
        Observance options; defaults to the diaspora schedule.
    """

    def __init__(
        self,
        day: Union[date, HebrewDate, None] = None,
        settings: Optional[CalendarSettings] = None,
    ) -> None:
        self.settings = settings if settings is not None else CalendarSettings()
        if day is None:
            day = date.today()
        if isinstance(day, HebrewDate):
            self._move_to(to_absolute(day))
        else:
            self._move_to(day.toordinal() - HEBREW_EPOCH_RD + 1)

    def __repr__(self) -> str:
        return f"JewishCalendar({self._hebrew_date!s}, settings={self.settings!r})"

    def _move_to(self, absolute: int) -> None:
        hebrew_date = from_absolute(absolute)
        if hebrew_date is None:
            LOGGER.warning(json.dumps({"event": "cursor_out_of_domain", "absolute_day": absolute}))
            raise OutOfDomainError(f"Day {absolute} precedes 1 Tishrei of year 1")
        self._absolute = absolute
        self._hebrew_date = hebrew_date

    # Positioning

    def set_gregorian_date(self, year: int, month: int, day: int) -> None:
        """Move to a civil date; invalid fields raise ``ValueError``."""

        self._move_to(date(year, month, day).toordinal() - HEBREW_EPOCH_RD + 1)

    def set_jewish_date(self, year: int, month: HebrewMonth, day: int) -> None:
        """Move to a Hebrew date; invalid fields raise ``InvalidHebrewDateError``."""

        self._move_to(to_absolute(HebrewDate(year, month, day)))

    def forward(self, days: int = 1) -> None:
        self._move_to(self._absolute + days)

    def back(self, days: int = 1) -> None:
        """Step back *days*; raises :class:`OutOfDomainError` before the epoch."""

        self._move_to(self._absolute - days)

    def copy(self) -> "JewishCalendar":
        return JewishCalendar(self._hebrew_date, self.settings)

    # Dates

    @property
    def _fixed(self) -> int:
        return self._absolute + HEBREW_EPOCH_RD - 1

    @property
    def jewish_date(self) -> HebrewDate:
        return self._hebrew_date

    @property
    def jewish_year(self) -> int:
        return self._hebrew_date.year

    @property
    def jewish_month(self) -> HebrewMonth:
        return self._hebrew_date.month

    @property
    def jewish_day_of_month(self) -> int:
        return self._hebrew_date.day

    @property
    def absolute_day(self) -> int:
        return self._absolute

    @property
    def gregorian_ymd(self) -> Tuple[int, int, int]:
        """Proleptic Gregorian ``(year, month, day)``, also before 1 CE."""

        return gregorian_from_fixed(self._fixed)

    @property
    def gregorian_date(self) -> date:
        fixed = self._fixed
        if fixed < 1:
            raise ValueError(f"{self._hebrew_date} precedes 1 January 1 CE")
        return date.fromordinal(fixed)

    @property
    def day_of_week(self) -> int:
        """1 for Sunday through 7 for Shabbos."""

        return self._fixed % 7 + 1

    # Year structure

    @property
    def year_info(self) -> YearInfo:
        return resolve_year(self.jewish_year)

    @property
    def is_jewish_leap_year(self) -> bool:
        return self.year_info.is_leap_year

    @property
    def days_in_jewish_year(self) -> int:
        return self.year_info.days_in_year

    @property
    def days_in_jewish_month(self) -> int:
        return days_in_month(self.jewish_year, self.jewish_month)

    @property
    def is_cheshvan_long(self) -> bool:
        return self.year_info.cheshvan_length == 30

    @property
    def is_kislev_short(self) -> bool:
        return self.year_info.kislev_length == 29

    @property
    def cheshvan_kislev_kviah(self) -> YearLengthCategory:
        return self.year_info.category

    @property
    def days_since_start_of_jewish_year(self) -> int:
        """Day number within the year, Rosh Hashana being 1."""

        return day_of_year(self.jewish_year, self.jewish_month, self.jewish_day_of_month)

    @property
    def is_shmita_year(self) -> bool:
        return self.jewish_year % 7 == 0

    @property
    def is_birkas_hachamah(self) -> bool:
        return is_birkas_hachamah(self._absolute)

    # Tekufos

    @property
    def tekufa(self) -> Optional[TekufaEvent]:
        return tekufa_on(self._absolute)

    @property
    def tekufa_name(self) -> Optional[Tekufa]:
        event = tekufa_on(self._absolute)
        return event.tekufa if event is not None else None

    def tekufa_datetime(self, minus_21_minutes: bool = False) -> Optional[datetime]:
        """Instant of the tekufa falling on this Hebrew day, or ``None``."""

        return tekufa_datetime(self._absolute, minus_21_minutes)

    @property
    def tekufas_tishrei_elapsed_days(self) -> int:
        return tekufas_tishrei_elapsed_days(self.jewish_year, self._absolute)

    # Molad

    @property
    def molad(self) -> Molad:
        return molad(self.jewish_year, self.jewish_month)

    @property
    def molad_datetime(self) -> datetime:
        return molad_datetime(self.jewish_year, self.jewish_month)

    @property
    def tchilas_zman_kiddush_levana_3_days(self) -> datetime:
        return tchilas_zman_kiddush_levana_3_days(self.jewish_year, self.jewish_month)

    @property
    def tchilas_zman_kiddush_levana_7_days(self) -> datetime:
        return tchilas_zman_kiddush_levana_7_days(self.jewish_year, self.jewish_month)

    @property
    def sof_zman_kiddush_levana_between_moldos(self) -> datetime:
        return sof_zman_kiddush_levana_between_moldos(self.jewish_year, self.jewish_month)

    @property
    def sof_zman_kiddush_levana_15_days(self) -> datetime:
        return sof_zman_kiddush_levana_15_days(self.jewish_year, self.jewish_month)

    # Holidays

    @property
    def yom_tov_index(self) -> Optional[YomTov]:
        return yom_tov_index(
            self._hebrew_date,
            self.day_of_week,
            in_israel=self.settings.in_israel,
            use_modern_holidays=self.settings.use_modern_holidays,
        )

    @property
    def is_erev_yom_tov(self) -> bool:
        index = self.yom_tov_index
        return index in EREV_YOM_TOV_DAYS or (
            index is YomTov.CHOL_HAMOED_PESACH and self.jewish_day_of_month == 20
        )

    @property
    def is_yom_tov(self) -> bool:
        """True on Yom Tov, Chol Hamoed and the minor festivals.

        Erev Yom Tov (other than Hoshana Rabba and the last day of Chol Hamoed
        Pesach), fast days other than Yom Kippur and Isru Chag are excluded.
        """

        index = self.yom_tov_index
        if index is None or index is YomTov.ISRU_CHAG:
            return False
        if index in EREV_YOM_TOV_DAYS and index is not YomTov.HOSHANA_RABBA:
            return False
        return index not in TAANIS_DAYS or index is YomTov.YOM_KIPPUR

    @property
    def is_yom_tov_assur_bemelacha(self) -> bool:
        return self.yom_tov_index in YOM_TOV_ASSUR_BEMELACHA

    @property
    def is_assur_bemelacha(self) -> bool:
        return self.day_of_week == SHABBOS or self.is_yom_tov_assur_bemelacha

    @property
    def is_erev_yom_tov_sheni(self) -> bool:
        return is_erev_yom_tov_sheni(self._hebrew_date, in_israel=self.settings.in_israel)

    @property
    def has_candle_lighting(self) -> bool:
        """True when the following day is Shabbos or Yom Tov."""

        return self.day_of_week == FRIDAY or self.is_erev_yom_tov or self.is_erev_yom_tov_sheni

    @property
    def is_aseres_yemei_teshuva(self) -> bool:
        return self.jewish_month is HebrewMonth.TISHREI and self.jewish_day_of_month <= 10

    @property
    def is_rosh_hashana(self) -> bool:
        return self.yom_tov_index is YomTov.ROSH_HASHANA

    @property
    def is_yom_kippur(self) -> bool:
        return self.yom_tov_index is YomTov.YOM_KIPPUR

    @property
    def is_pesach(self) -> bool:
        return self.yom_tov_index in (YomTov.PESACH, YomTov.CHOL_HAMOED_PESACH)

    @property
    def is_chol_hamoed_pesach(self) -> bool:
        return self.yom_tov_index is YomTov.CHOL_HAMOED_PESACH

    @property
    def is_shavuos(self) -> bool:
        return self.yom_tov_index is YomTov.SHAVUOS

    @property
    def is_succos(self) -> bool:
        return self.yom_tov_index in (YomTov.SUCCOS, YomTov.CHOL_HAMOED_SUCCOS, YomTov.HOSHANA_RABBA)

    @property
    def is_chol_hamoed_succos(self) -> bool:
        return self.yom_tov_index in (YomTov.CHOL_HAMOED_SUCCOS, YomTov.HOSHANA_RABBA)

    @property
    def is_chol_hamoed(self) -> bool:
        return self.is_chol_hamoed_pesach or self.is_chol_hamoed_succos

    @property
    def is_hoshana_rabba(self) -> bool:
        return self.yom_tov_index is YomTov.HOSHANA_RABBA

    @property
    def is_shemini_atzeres(self) -> bool:
        return self.yom_tov_index is YomTov.SHEMINI_ATZERES

    @property
    def is_simchas_torah(self) -> bool:
        return self.yom_tov_index is YomTov.SIMCHAS_TORAH

    @property
    def is_isru_chag(self) -> bool:
        return self.yom_tov_index is YomTov.ISRU_CHAG

    @property
    def is_taanis(self) -> bool:
        return self.yom_tov_index in TAANIS_DAYS

    @property
    def is_regular_taanis(self) -> bool:
        """A fast day other than Yom Kippur."""

        index = self.yom_tov_index
        return index in TAANIS_DAYS and index is not YomTov.YOM_KIPPUR

    @property
    def is_tisha_beav(self) -> bool:
        return self.yom_tov_index is YomTov.TISHA_BEAV

    @property
    def is_taanis_bechoros(self) -> bool:
        return is_taanis_bechoros(self._hebrew_date, self.day_of_week)

    @property
    def is_chanukah(self) -> bool:
        return self.yom_tov_index is YomTov.CHANUKAH

    @property
    def day_of_chanukah(self) -> Optional[int]:
        return day_of_chanukah(self._hebrew_date)

    @property
    def is_purim(self) -> bool:
        """Purim, or Shushan Purim in a walled city."""

        expected = YomTov.SHUSHAN_PURIM if self.settings.mukaf_choma else YomTov.PURIM
        return self.yom_tov_index is expected

    @property
    def day_of_omer(self) -> Optional[int]:
        return day_of_omer(self._hebrew_date)

    @property
    def is_rosh_chodesh(self) -> bool:
        return is_rosh_chodesh(self._hebrew_date)

    @property
    def is_erev_rosh_chodesh(self) -> bool:
        return is_erev_rosh_chodesh(self._hebrew_date)

    @property
    def is_yom_kippur_katan(self) -> bool:
        return is_yom_kippur_katan(self._hebrew_date, self.day_of_week)

    @property
    def is_behab(self) -> bool:
        return is_behab(self._hebrew_date, self.day_of_week)

    @property
    def is_machar_chodesh(self) -> bool:
        return is_machar_chodesh(self._hebrew_date, self.day_of_week)

    @property
    def is_shabbos_mevorchim(self) -> bool:
        return is_shabbos_mevorchim(self._hebrew_date, self.day_of_week)

    # Readings and learning

    @property
    def parshah(self) -> Parsha:
        return parshah(self._hebrew_date, self.day_of_week, self.settings.in_israel)

    @property
    def upcoming_parshah(self) -> Parsha:
        return upcoming_parshah(self._hebrew_date, self.day_of_week, self.settings.in_israel)

    @property
    def special_shabbos(self) -> Parsha:
        return special_shabbos(self._hebrew_date, self.day_of_week, self.settings.in_israel)

    @property
    def daf_yomi_bavli(self) -> Optional[Daf]:
        if self._fixed < 1:
            return None
        return daf_yomi_bavli(self.gregorian_date)

    @property
    def daf_yomi_yerushalmi(self) -> Optional[Daf]:
        if self._fixed < 1:
            return None
        return daf_yomi_yerushalmi(self.gregorian_date)
