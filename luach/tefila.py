"""Which additions and omissions apply to the day's prayers."""

from __future__ import annotations

from typing import Optional

from .calendar import HebrewDate
from .cycle import HebrewMonth
from .holidays import FRIDAY, SHABBOS, SUNDAY, YomTov
from .jewish_calendar import JewishCalendar
from .models import TefilaCustoms

__all__ = ["TefilaRules"]

# Diaspora rain request begins on the sixtieth day of the Tishrei season.
VESEIN_TAL_UMATAR_START_DAY = 47

# Days whose eve keeps Tachanun at Mincha even though the day itself has none.
_MINCHA_EVE_EXCEPTIONS = frozenset({YomTov.EREV_ROSH_HASHANA, YomTov.EREV_YOM_KIPPUR, YomTov.PESACH_SHENI})


class TefilaRules:
    """Answers prayer questions for a :class:`JewishCalendar` day.

    Location and modern holidays come from the calendar's settings; the
    remaining local variations come from *customs*.
    """

    def __init__(self, customs: Optional[TefilaCustoms] = None) -> None:
        self.customs = customs if customs is not None else TefilaCustoms()

    def __repr__(self) -> str:
        return f"TefilaRules(customs={self.customs!r})"

    # Tachanun

    def is_tachanun_recited_shacharis(self, calendar: JewishCalendar) -> bool:
        customs = self.customs
        month = calendar.jewish_month
        day = calendar.jewish_day_of_month
        weekday = calendar.day_of_week
        in_israel = calendar.settings.in_israel
        index = calendar.yom_tov_index
        purim_month = HebrewMonth.ADAR_II if calendar.is_jewish_leap_year else HebrewMonth.ADAR

        if weekday == SHABBOS:
            return False
        if weekday == SUNDAY and not customs.tachanun_recited_sundays:
            return False
        if weekday == FRIDAY and not customs.tachanun_recited_fridays:
            return False
        if month is HebrewMonth.NISSAN:
            return False
        if month is HebrewMonth.TISHREI and day > 8:
            if day < 22 or not customs.tachanun_recited_end_of_tishrei:
                return False
        if month is HebrewMonth.SIVAN:
            if customs.tachanun_recited_week_after_shavuos:
                last_day_without = 6
            elif not in_israel and not customs.tachanun_recited_13_sivan_out_of_israel:
                last_day_without = 13
            else:
                last_day_without = 12
            if day <= last_day_without:
                return False
        if calendar.is_yom_tov:
            if not (index is YomTov.PESACH_SHENI and customs.tachanun_recited_pesach_sheni):
                return False
        if (
            not in_israel
            and month is HebrewMonth.IYAR
            and day == 15
            and not customs.tachanun_recited_pesach_sheni
            and not customs.tachanun_recited_15_iyar_out_of_israel
        ):
            return False
        if index is YomTov.TISHA_BEAV or calendar.is_isru_chag or calendar.is_rosh_chodesh:
            return False
        if month is purim_month:
            if day > 22 and not customs.tachanun_recited_shivas_yemei_hamiluim:
                return False
            if 10 < day < 18 and not customs.tachanun_recited_week_of_purim:
                return False
        if calendar.settings.use_modern_holidays and index in (YomTov.YOM_HAATZMAUT, YomTov.YOM_YERUSHALAYIM):
            return False
        if month is HebrewMonth.IYAR and 13 < day < 21 and not customs.tachanun_recited_week_of_hod:
            return False
        return True

    def is_tachanun_recited_mincha(self, calendar: JewishCalendar) -> bool:
        """Tachanun at Mincha, which also depends on the following day."""

        if not self.customs.tachanun_recited_mincha_all_year or calendar.day_of_week == FRIDAY:
            return False
        if not self.is_tachanun_recited_shacharis(calendar):
            return False
        tomorrow = calendar.copy()
        tomorrow.forward()
        tomorrow_index = tomorrow.yom_tov_index
        if tomorrow_index is YomTov.LAG_BAOMER and not self.customs.tachanun_recited_mincha_erev_lag_baomer:
            return False
        return tomorrow_index in _MINCHA_EVE_EXCEPTIONS or self.is_tachanun_recited_shacharis(tomorrow)

    # Rain and dew

    def is_vesein_tal_umatar_start_date(self, calendar: JewishCalendar) -> bool:
        if calendar.settings.in_israel:
            return calendar.jewish_month is HebrewMonth.CHESHVAN and calendar.jewish_day_of_month == 7
        weekday = calendar.day_of_week
        elapsed = calendar.tekufas_tishrei_elapsed_days
        if weekday == SHABBOS:
            return False
        if weekday == SUNDAY:
            return elapsed in (VESEIN_TAL_UMATAR_START_DAY, VESEIN_TAL_UMATAR_START_DAY + 1)
        return elapsed == VESEIN_TAL_UMATAR_START_DAY

    def is_vesein_tal_umatar_starting_tonight(self, calendar: JewishCalendar) -> bool:
        """True on the day whose Maariv is the first with Vesein Tal Umatar."""

        if calendar.settings.in_israel:
            return calendar.jewish_month is HebrewMonth.CHESHVAN and calendar.jewish_day_of_month == 6
        weekday = calendar.day_of_week
        elapsed = calendar.tekufas_tishrei_elapsed_days
        if weekday == FRIDAY:
            return False
        if weekday == SHABBOS:
            return elapsed in (VESEIN_TAL_UMATAR_START_DAY - 1, VESEIN_TAL_UMATAR_START_DAY)
        return elapsed == VESEIN_TAL_UMATAR_START_DAY - 1

    def is_vesein_tal_umatar_recited(self, calendar: JewishCalendar) -> bool:
        month = calendar.jewish_month
        day = calendar.jewish_day_of_month
        if month is HebrewMonth.NISSAN and day < 15:
            return True
        if month is HebrewMonth.TISHREI or month >= HebrewMonth.NISSAN:
            return False
        if calendar.settings.in_israel:
            return month is not HebrewMonth.CHESHVAN or day >= 7
        return calendar.tekufas_tishrei_elapsed_days >= VESEIN_TAL_UMATAR_START_DAY

    def is_vesein_beracha_recited(self, calendar: JewishCalendar) -> bool:
        return not self.is_vesein_tal_umatar_recited(calendar)

    def is_mashiv_haruach_start_date(self, calendar: JewishCalendar) -> bool:
        return calendar.jewish_month is HebrewMonth.TISHREI and calendar.jewish_day_of_month == 22

    def is_mashiv_haruach_end_date(self, calendar: JewishCalendar) -> bool:
        return calendar.jewish_month is HebrewMonth.NISSAN and calendar.jewish_day_of_month == 15

    def is_mashiv_haruach_recited(self, calendar: JewishCalendar) -> bool:
        """Said from Musaf of Shemini Atzeres until Musaf of the first day of Pesach.

        Both boundary days count as not recited since they open with the
        previous season's text.
        """

        year = calendar.jewish_year
        start = HebrewDate(year, HebrewMonth.TISHREI, 22)
        end = HebrewDate(year, HebrewMonth.NISSAN, 15)
        return start < calendar.jewish_date < end

    def is_morid_hatal_recited(self, calendar: JewishCalendar) -> bool:
        return (
            not self.is_mashiv_haruach_recited(calendar)
            or self.is_mashiv_haruach_start_date(calendar)
            or self.is_mashiv_haruach_end_date(calendar)
        )

    # Hallel

    def is_hallel_recited(self, calendar: JewishCalendar) -> bool:
        if calendar.is_rosh_chodesh or calendar.is_chanukah:
            return True
        month = calendar.jewish_month
        day = calendar.jewish_day_of_month
        in_israel = calendar.settings.in_israel
        if month is HebrewMonth.NISSAN:
            return 15 <= day <= (21 if in_israel else 22)
        if month is HebrewMonth.IYAR:
            return calendar.settings.use_modern_holidays and calendar.yom_tov_index in (
                YomTov.YOM_HAATZMAUT,
                YomTov.YOM_YERUSHALAYIM,
            )
        if month is HebrewMonth.SIVAN:
            return day == 6 or (not in_israel and day == 7)
        if month is HebrewMonth.TISHREI:
            return 15 <= day <= (22 if in_israel else 23)
        return False

    def is_hallel_shalem_recited(self, calendar: JewishCalendar) -> bool:
        """Whole Hallel, as opposed to the shortened Hallel of Rosh Chodesh and late Pesach."""

        if not self.is_hallel_recited(calendar):
            return False
        if calendar.is_rosh_chodesh and not calendar.is_chanukah:
            return False
        last_full_day = 15 if calendar.settings.in_israel else 16
        if calendar.jewish_month is HebrewMonth.NISSAN:
            return calendar.jewish_day_of_month <= last_full_day
        return True

    # Other insertions

    def is_al_hanissim_recited(self, calendar: JewishCalendar) -> bool:
        return calendar.is_purim or calendar.is_chanukah

    def is_yaaleh_veyavo_recited(self, calendar: JewishCalendar) -> bool:
        return (
            calendar.is_pesach
            or calendar.is_shavuos
            or calendar.is_rosh_hashana
            or calendar.is_yom_kippur
            or calendar.is_succos
            or calendar.is_shemini_atzeres
            or calendar.is_simchas_torah
            or calendar.is_rosh_chodesh
        )

    def is_mizmor_lesoda_recited(self, calendar: JewishCalendar) -> bool:
        if calendar.is_assur_bemelacha:
            return False
        if self.customs.mizmor_lesoda_recited_erev_yom_kippur_and_pesach:
            return True
        index = calendar.yom_tov_index
        return index not in (YomTov.EREV_YOM_KIPPUR, YomTov.EREV_PESACH, YomTov.CHOL_HAMOED_PESACH)
