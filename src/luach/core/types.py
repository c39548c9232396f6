from __future__ import annotations
from dataclasses import dataclass
from datetime import date, timedelta, timezone
from enum import Enum, IntEnum
from typing import Any, Dict, Optional

from .names import DEFAULT_NAMES, MasechtaNames

# Hebrew months, counted from Nissan as in the Torah.
NISSAN = 1
IYAR = 2
SIVAN = 3
TAMMUZ = 4
AV = 5
ELUL = 6
TISHREI = 7
CHESHVAN = 8
KISLEV = 9
TEVES = 10
SHEVAT = 11
ADAR = 12
ADAR_II = 13

SUNDAY = 1
MONDAY = 2
TUESDAY = 3
WEDNESDAY = 4
THURSDAY = 5
FRIDAY = 6
SHABBOS = 7


class Field(Enum):
    """Units accepted by JewishDate.forward()."""
    DATE = "date"
    MONTH = "month"
    YEAR = "year"


class Kviah(IntEnum):
    """Cheshvan/Kislev length pattern of a year."""
    CHASERIM = 0   # both 29
    KESIDRAN = 1   # Cheshvan 29, Kislev 30
    SHELAIMIM = 2  # both 30


class YomTov(IntEnum):
    EREV_PESACH = 0
    PESACH = 1
    CHOL_HAMOED_PESACH = 2
    PESACH_SHENI = 3
    EREV_SHAVUOS = 4
    SHAVUOS = 5
    SEVENTEEN_OF_TAMMUZ = 6
    TISHA_BEAV = 7
    TU_BEAV = 8
    EREV_ROSH_HASHANA = 9
    ROSH_HASHANA = 10
    FAST_OF_GEDALYAH = 11
    EREV_YOM_KIPPUR = 12
    YOM_KIPPUR = 13
    EREV_SUCCOS = 14
    SUCCOS = 15
    CHOL_HAMOED_SUCCOS = 16
    HOSHANA_RABBA = 17
    SHEMINI_ATZERES = 18
    SIMCHAS_TORAH = 19
    # 20 was Erev Chanukah, never produced
    CHANUKAH = 21
    TENTH_OF_TEVES = 22
    TU_BESHVAT = 23
    FAST_OF_ESTHER = 24
    PURIM = 25
    SHUSHAN_PURIM = 26
    PURIM_KATAN = 27
    ROSH_CHODESH = 28
    YOM_HASHOAH = 29
    YOM_HAZIKARON = 30
    YOM_HAATZMAUT = 31
    YOM_YERUSHALAYIM = 32


class Parsha(IntEnum):
    NONE = 0
    BERESHIS = 1
    NOACH = 2
    LECH_LECHA = 3
    VAYERA = 4
    CHAYEI_SARA = 5
    TOLDOS = 6
    VAYETZEI = 7
    VAYISHLACH = 8
    VAYESHEV = 9
    MIKETZ = 10
    VAYIGASH = 11
    VAYECHI = 12
    SHEMOS = 13
    VAERA = 14
    BO = 15
    BESHALACH = 16
    YISRO = 17
    MISHPATIM = 18
    TERUMAH = 19
    TETZAVEH = 20
    KI_SISA = 21
    VAYAKHEL = 22
    PEKUDEI = 23
    VAYIKRA = 24
    TZAV = 25
    SHMINI = 26
    TAZRIA = 27
    METZORA = 28
    ACHREI_MOS = 29
    KEDOSHIM = 30
    EMOR = 31
    BEHAR = 32
    BECHUKOSAI = 33
    BAMIDBAR = 34
    NASSO = 35
    BEHAALOSCHA = 36
    SHLACH = 37
    KORACH = 38
    CHUKAS = 39
    BALAK = 40
    PINCHAS = 41
    MATOS = 42
    MASEI = 43
    DEVARIM = 44
    VAESCHANAN = 45
    EIKEV = 46
    REEH = 47
    SHOFTIM = 48
    KI_SEITZEI = 49
    KI_SAVO = 50
    NITZAVIM = 51
    VAYEILECH = 52
    HAAZINU = 53
    VZOS_HABERACHA = 54
    VAYAKHEL_PEKUDEI = 55
    TAZRIA_METZORA = 56
    ACHREI_MOS_KEDOSHIM = 57
    BEHAR_BECHUKOSAI = 58
    CHUKAS_BALAK = 59
    MATOS_MASEI = 60
    NITZAVIM_VAYEILECH = 61
    SHKALIM = 62
    ZACHOR = 63
    PARA = 64
    HACHODESH = 65


@dataclass(frozen=True)
class Daf:
    """A tractate (0-based index into the Bavli or Yerushalmi order) and page."""
    masechta_number: int
    daf: int

    def masechta(self, names: MasechtaNames = DEFAULT_NAMES) -> str:
        return names.bavli[self.masechta_number]

    def masechta_transliterated(self, names: MasechtaNames = DEFAULT_NAMES) -> str:
        return names.bavli_transliterated[self.masechta_number]

    def yerushalmi_masechta(self, names: MasechtaNames = DEFAULT_NAMES) -> str:
        return names.yerushalmi[self.masechta_number]

    def yerushalmi_masechta_transliterated(self, names: MasechtaNames = DEFAULT_NAMES) -> str:
        return names.yerushalmi_transliterated[self.masechta_number]


@dataclass(frozen=True)
class Location:
    """A fixed observer used to turn a molad into a civil instant."""
    name: str
    lat_deg: float
    lon_deg: float     # positive East
    utc_offset_hours: int

    @property
    def standard_tz(self) -> timezone:
        return timezone(timedelta(hours=self.utc_offset_hours), self.name)

    @property
    def local_mean_time_offset(self) -> timedelta:
        """Local mean time minus standard time (4 minutes per degree of longitude)."""
        return timedelta(minutes=self.lon_deg * 4 - self.utc_offset_hours * 60)


# Har Habayis. Molad times are always given in standard time, so a fixed
# offset is used rather than Asia/Jerusalem (which observes DST).
JERUSALEM = Location("Jerusalem, Israel", 31.778, 35.2354, 2)


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    jewish_year: int
    jewish_month: int
    jewish_day: int
    day_of_week: int
    in_israel: bool
    yom_tov: Optional[YomTov] = None
    attributes: Optional[Dict[str, Any]] = None
