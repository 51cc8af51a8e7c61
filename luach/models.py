"""Pydantic models for calendar settings and day summaries."""

from __future__ import annotations

import os
from datetime import date, datetime
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cycle import HebrewMonth
from .holidays import YomTov
from .keviah import VALID_YEAR_LENGTHS, YearLengthCategory
from .yomi import Daf

ENV_IN_ISRAEL = "LUACH_IN_ISRAEL"
ENV_MODERN_HOLIDAYS = "LUACH_MODERN_HOLIDAYS"
ENV_MUKAF_CHOMA = "LUACH_MUKAF_CHOMA"


class CalendarSettings(BaseModel):
    """Observance options that change which holidays and readings apply."""

    model_config = ConfigDict(frozen=True)

    in_israel: bool = Field(False, description="Use the Israeli Yom Tov and parsha schedule")
    use_modern_holidays: bool = Field(
        False, description="Include Yom Hashoah, Yom Hazikaron, Yom Haatzmaut and Yom Yerushalayim"
    )
    mukaf_choma: bool = Field(False, description="Observe Purim on 15 Adar as in a walled city")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalendarSettings":
        """Build settings from ``LUACH_*`` environment variables.

        Unset variables keep their defaults; values are parsed with pydantic's
        boolean rules (``1``/``0``, ``true``/``false``, ``yes``/``no``,
        ``on``/``off``).
        """

        environ = os.environ if environ is None else environ
        names = {
            "in_israel": ENV_IN_ISRAEL,
            "use_modern_holidays": ENV_MODERN_HOLIDAYS,
            "mukaf_choma": ENV_MUKAF_CHOMA,
        }
        values = {field: environ[name].strip() for field, name in names.items() if environ.get(name)}
        return cls.model_validate(values)


class TefilaCustoms(BaseModel):
    """Local customs that change when Tachanun and related additions are said.

    Defaults follow the most common Ashkenazi practice.
    """

    model_config = ConfigDict(frozen=True)

    tachanun_recited_end_of_tishrei: bool = Field(
        True, description="Tachanun from 22 Tishrei to Rosh Chodesh"
    )
    tachanun_recited_week_after_shavuos: bool = Field(
        False, description="Tachanun from 7 Sivan instead of after Isru Chag week"
    )
    tachanun_recited_13_sivan_out_of_israel: bool = True
    tachanun_recited_pesach_sheni: bool = False
    tachanun_recited_15_iyar_out_of_israel: bool = True
    tachanun_recited_mincha_erev_lag_baomer: bool = False
    tachanun_recited_shivas_yemei_hamiluim: bool = Field(
        True, description="Tachanun from 23 Adar to Rosh Chodesh Nissan"
    )
    tachanun_recited_week_of_hod: bool = Field(True, description="Tachanun from 14 to 20 Iyar")
    tachanun_recited_week_of_purim: bool = Field(True, description="Tachanun from 11 to 17 Adar")
    tachanun_recited_fridays: bool = True
    tachanun_recited_sundays: bool = True
    tachanun_recited_mincha_all_year: bool = True
    mizmor_lesoda_recited_erev_yom_kippur_and_pesach: bool = False


class MoladPayload(BaseModel):
    """Molad of the month in announcement form."""

    day_of_week: int = Field(..., ge=1, le=7, description="1 for Sunday through 7 for Shabbos")
    hours: int = Field(..., ge=0, le=23, description="Hour on a midnight-based clock")
    minutes: int = Field(..., ge=0, le=59)
    chalakim: int = Field(..., ge=0, le=17, description="Chalakim past the minute")
    instant: Optional[datetime] = Field(None, description="Molad in Israel standard time")


class DafPayload(BaseModel):
    """A Daf Yomi page as plain values."""

    masechta: str = Field(..., description="Masechta identifier")
    masechta_number: int = Field(..., ge=0)
    daf: int = Field(..., ge=1)

    @classmethod
    def from_daf(cls, daf: Optional[Daf]) -> Optional["DafPayload"]:
        if daf is None:
            return None
        return cls(masechta=daf.masechta.name, masechta_number=int(daf.masechta), daf=daf.daf)


class DaySummary(BaseModel):
    """Everything the calendar knows about one civil date."""

    gregorian_date: date
    day_of_week: int = Field(..., ge=1, le=7)
    jewish_year: int = Field(..., ge=1)
    jewish_month: HebrewMonth
    jewish_day: int = Field(..., ge=1, le=30)
    is_leap_year: bool
    days_in_year: int
    year_category: YearLengthCategory
    yom_tov: Optional[YomTov] = None
    day_of_chanukah: Optional[int] = Field(None, ge=1, le=8)
    day_of_omer: Optional[int] = Field(None, ge=1, le=49)
    is_rosh_chodesh: bool = False
    is_tachanun_recited: bool = Field(False, description="Tachanun at Shacharis under the given customs")
    is_hallel_recited: bool = False
    tekufa: Optional[str] = Field(None, description="Tekufa that begins during this Hebrew day")
    parsha: Optional[str] = Field(None, description="Portion read on this Shabbos")
    special_shabbos: Optional[str] = None
    molad: MoladPayload
    daf_yomi_bavli: Optional[DafPayload] = None
    daf_yomi_yerushalmi: Optional[DafPayload] = None
    settings: CalendarSettings = Field(default_factory=CalendarSettings)
    customs: TefilaCustoms = Field(default_factory=TefilaCustoms)

    @field_validator("days_in_year")
    def validate_days_in_year(cls, value: int) -> int:
        if value not in VALID_YEAR_LENGTHS:
            raise ValueError(f"Impossible Hebrew year length: {value}")
        return value
