"""
luach.engines.parsha
--------------------
Weekly Torah portion read on a given Shabbos, and the four special
Shabbosos of Adar and Nissan.

A year's reading schedule depends only on the weekday of Rosh Hashana, the
Cheshvan/Kislev kviah, whether the year is leap, and (for some years)
whether the reader is in Israel. Those combinations give seventeen year
types; each row of PARSHA_LIST indexes its portions by the week of the year,
counted from the Shabbos before Rosh Hashana.
"""

from __future__ import annotations

from typing import Optional, Tuple

from luach.core.types import ADAR, ADAR_II, NISSAN, SHABBOS, SHEVAT, Parsha as P
from luach.engines import arithmetic as ar

# Rows 0-5 common years, 6-11 leap years, 12-16 the Israeli variants.
PARSHA_LIST: Tuple[Tuple[P, ...], ...] = (
    # 0
    (P.NONE, P.VAYEILECH, P.HAAZINU, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL_PEKUDEI, P.VAYIKRA, P.TZAV, P.NONE, P.SHMINI,
        P.TAZRIA_METZORA, P.ACHREI_MOS_KEDOSHIM, P.EMOR, P.BEHAR_BECHUKOSAI, P.BAMIDBAR, P.NASSO,
        P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI, P.DEVARIM,
        P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO, P.NITZAVIM_VAYEILECH),
    # 1
    (P.NONE, P.VAYEILECH, P.HAAZINU, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL_PEKUDEI, P.VAYIKRA, P.TZAV, P.NONE, P.SHMINI,
        P.TAZRIA_METZORA, P.ACHREI_MOS_KEDOSHIM, P.EMOR, P.BEHAR_BECHUKOSAI, P.BAMIDBAR, P.NONE,
        P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS_BALAK, P.PINCHAS, P.MATOS_MASEI,
        P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO,
        P.NITZAVIM_VAYEILECH),
    # 2
    (P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL_PEKUDEI, P.VAYIKRA, P.TZAV, P.NONE, P.NONE, P.SHMINI,
        P.TAZRIA_METZORA, P.ACHREI_MOS_KEDOSHIM, P.EMOR, P.BEHAR_BECHUKOSAI, P.BAMIDBAR, P.NASSO,
        P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI, P.DEVARIM,
        P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO, P.NITZAVIM),
    # 3
    (P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.NONE, P.SHMINI,
        P.TAZRIA_METZORA, P.ACHREI_MOS_KEDOSHIM, P.EMOR, P.BEHAR_BECHUKOSAI, P.BAMIDBAR, P.NASSO,
        P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI, P.DEVARIM,
        P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO, P.NITZAVIM),
    # 4
    (P.NONE, P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL_PEKUDEI, P.VAYIKRA, P.TZAV, P.NONE, P.SHMINI,
        P.TAZRIA_METZORA, P.ACHREI_MOS_KEDOSHIM, P.EMOR, P.BEHAR_BECHUKOSAI, P.BAMIDBAR, P.NASSO,
        P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI, P.DEVARIM,
        P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO, P.NITZAVIM),
    # 5
    (P.NONE, P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL_PEKUDEI, P.VAYIKRA, P.TZAV, P.NONE, P.SHMINI,
        P.TAZRIA_METZORA, P.ACHREI_MOS_KEDOSHIM, P.EMOR, P.BEHAR_BECHUKOSAI, P.BAMIDBAR, P.NASSO,
        P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI, P.DEVARIM,
        P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO, P.NITZAVIM_VAYEILECH),
    # 6
    (P.NONE, P.VAYEILECH, P.HAAZINU, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.SHMINI, P.TAZRIA,
        P.METZORA, P.NONE, P.ACHREI_MOS, P.KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI, P.BAMIDBAR,
        P.NONE, P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS_BALAK, P.PINCHAS,
        P.MATOS_MASEI, P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI,
        P.KI_SAVO, P.NITZAVIM_VAYEILECH),
    # 7
    (P.NONE, P.VAYEILECH, P.HAAZINU, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.SHMINI, P.TAZRIA,
        P.METZORA, P.NONE, P.NONE, P.ACHREI_MOS, P.KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI,
        P.BAMIDBAR, P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS,
        P.MATOS_MASEI, P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI,
        P.KI_SAVO, P.NITZAVIM),
    # 8
    (P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.SHMINI, P.TAZRIA,
        P.METZORA, P.ACHREI_MOS, P.NONE, P.KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI, P.BAMIDBAR,
        P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS, P.MASEI,
        P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO, P.NITZAVIM),
    # 9
    (P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.SHMINI, P.TAZRIA,
        P.METZORA, P.ACHREI_MOS, P.NONE, P.KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI, P.BAMIDBAR,
        P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS, P.MASEI,
        P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO,
        P.NITZAVIM_VAYEILECH),
    # 10
    (P.NONE, P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.SHMINI, P.TAZRIA,
        P.METZORA, P.NONE, P.ACHREI_MOS, P.KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI, P.BAMIDBAR,
        P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI,
        P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO,
        P.NITZAVIM_VAYEILECH),
    # 11
    (P.NONE, P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.SHMINI, P.TAZRIA,
        P.METZORA, P.NONE, P.ACHREI_MOS, P.KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI, P.BAMIDBAR,
        P.NONE, P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS_BALAK, P.PINCHAS,
        P.MATOS_MASEI, P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI,
        P.KI_SAVO, P.NITZAVIM_VAYEILECH),
    # 12
    (P.NONE, P.VAYEILECH, P.HAAZINU, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL_PEKUDEI, P.VAYIKRA, P.TZAV, P.NONE, P.SHMINI,
        P.TAZRIA_METZORA, P.ACHREI_MOS_KEDOSHIM, P.EMOR, P.BEHAR_BECHUKOSAI, P.BAMIDBAR, P.NASSO,
        P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI, P.DEVARIM,
        P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO, P.NITZAVIM_VAYEILECH),
    # 13
    (P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL_PEKUDEI, P.VAYIKRA, P.TZAV, P.NONE, P.SHMINI,
        P.TAZRIA_METZORA, P.ACHREI_MOS_KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI, P.BAMIDBAR,
        P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI,
        P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO, P.NITZAVIM),
    # 14
    (P.NONE, P.VAYEILECH, P.HAAZINU, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.SHMINI, P.TAZRIA,
        P.METZORA, P.NONE, P.ACHREI_MOS, P.KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI, P.BAMIDBAR,
        P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI,
        P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO,
        P.NITZAVIM_VAYEILECH),
    # 15
    (P.NONE, P.VAYEILECH, P.HAAZINU, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.SHMINI, P.TAZRIA,
        P.METZORA, P.NONE, P.ACHREI_MOS, P.KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI, P.BAMIDBAR,
        P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS, P.MASEI,
        P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO, P.NITZAVIM),
    # 16
    (P.NONE, P.NONE, P.HAAZINU, P.NONE, P.NONE, P.BERESHIS, P.NOACH, P.LECH_LECHA, P.VAYERA,
        P.CHAYEI_SARA, P.TOLDOS, P.VAYETZEI, P.VAYISHLACH, P.VAYESHEV, P.MIKETZ, P.VAYIGASH,
        P.VAYECHI, P.SHEMOS, P.VAERA, P.BO, P.BESHALACH, P.YISRO, P.MISHPATIM, P.TERUMAH,
        P.TETZAVEH, P.KI_SISA, P.VAYAKHEL, P.PEKUDEI, P.VAYIKRA, P.TZAV, P.SHMINI, P.TAZRIA,
        P.METZORA, P.NONE, P.ACHREI_MOS, P.KEDOSHIM, P.EMOR, P.BEHAR, P.BECHUKOSAI, P.BAMIDBAR,
        P.NASSO, P.BEHAALOSCHA, P.SHLACH, P.KORACH, P.CHUKAS, P.BALAK, P.PINCHAS, P.MATOS_MASEI,
        P.DEVARIM, P.VAESCHANAN, P.EIKEV, P.REEH, P.SHOFTIM, P.KI_SEITZEI, P.KI_SAVO,
        P.NITZAVIM_VAYEILECH),
)


def year_type(calendar) -> Optional[int]:
    """Row of PARSHA_LIST for the calendar's year, or None if the year cannot occur."""
    year = calendar.jewish_year
    # 0=Shabbos, 1=Sunday .. 6=Friday
    rh_wday = ar.rosh_hashana_day_of_week(year) % 7
    kislev_short = ar.is_kislev_short(year)
    cheshvan_long = ar.is_cheshvan_long(year)
    in_israel = calendar.in_israel

    if ar.is_jewish_leap_year(year):
        if rh_wday == 2:
            if kislev_short:
                return 14 if in_israel else 6
            if cheshvan_long:
                return 15 if in_israel else 7
        elif rh_wday == 3:
            return 15 if in_israel else 7
        elif rh_wday == 5:
            if kislev_short:
                return 8
            if cheshvan_long:
                return 9
        elif rh_wday == 0:
            if kislev_short:
                return 10
            if cheshvan_long:
                return 16 if in_israel else 11
    else:
        if rh_wday == 2:
            if kislev_short:
                return 0
            if cheshvan_long:
                return 12 if in_israel else 1
        elif rh_wday == 3:
            return 12 if in_israel else 1
        elif rh_wday == 5:
            if cheshvan_long:
                return 3
            if not kislev_short:
                return 13 if in_israel else 2
        elif rh_wday == 0:
            if kislev_short:
                return 4
            if cheshvan_long:
                return 5
    return None


def parsha(calendar) -> P:
    """The portion read this Shabbos; NONE on weekdays and when a yom tov displaces it."""
    if calendar.day_of_week != SHABBOS:
        return P.NONE
    row = year_type(calendar)
    if row is None:
        return P.NONE
    week = (ar.jewish_calendar_elapsed_days(calendar.jewish_year) % 7 + calendar.days_since_start_of_jewish_year()) // 7
    return PARSHA_LIST[row][week]


def special_shabbos(calendar) -> P:
    """Shekalim, Zachor, Parah or HaChodesh; NONE otherwise."""
    if calendar.day_of_week != SHABBOS:
        return P.NONE
    month = calendar.jewish_month
    day = calendar.jewish_day_of_month
    leap = calendar.is_jewish_leap_year()

    if (month == SHEVAT and not leap) or (month == ADAR and leap):
        if day in (25, 27, 29):
            return P.SHKALIM

    if (month == ADAR and not leap) or month == ADAR_II:
        if day == 1:
            return P.SHKALIM
        if day in (8, 9, 11, 13):
            return P.ZACHOR
        if day in (18, 20, 22, 23):
            return P.PARA
        if day in (25, 27, 29):
            return P.HACHODESH

    if month == NISSAN and day == 1:
        return P.HACHODESH

    return P.NONE
