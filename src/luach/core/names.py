"""
luach.core.names
----------------
Tractate name tables for the Bavli and Yerushalmi Daf Yomi orders.

The tables are immutable. Callers wanting different transliterations build
their own MasechtaNames and pass it to the Daf accessors.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

BAVLI_TRANSLITERATED: Tuple[str, ...] = (
    "Berachos", "Shabbos", "Eruvin", "Pesachim", "Shekalim", "Yoma", "Sukkah", "Beitzah",
    "Rosh Hashana", "Taanis", "Megillah", "Moed Katan", "Chagigah", "Yevamos", "Kesubos",
    "Nedarim", "Nazir", "Sotah", "Gitin", "Kiddushin", "Bava Kamma", "Bava Metzia",
    "Bava Basra", "Sanhedrin", "Makkos", "Shevuos", "Avodah Zarah", "Horiyos", "Zevachim",
    "Menachos", "Chullin", "Bechoros", "Arachin", "Temurah", "Kerisos", "Meilah", "Kinnim",
    "Tamid", "Midos", "Niddah",
)

BAVLI: Tuple[str, ...] = (
        "\u05D1\u05E8\u05DB\u05D5\u05EA",
        "\u05E9\u05D1\u05EA",
        "\u05E2\u05D9\u05E8\u05D5\u05D1\u05D9\u05DF",
        "\u05E4\u05E1\u05D7\u05D9\u05DD",
        "\u05E9\u05E7\u05DC\u05D9\u05DD",
        "\u05D9\u05D5\u05DE\u05D0",
        "\u05E1\u05D5\u05DB\u05D4",
        "\u05D1\u05D9\u05E6\u05D4",
        "\u05E8\u05D0\u05E9 \u05D4\u05E9\u05E0\u05D4",
        "\u05EA\u05E2\u05E0\u05D9\u05EA",
        "\u05DE\u05D2\u05D9\u05DC\u05D4",
        "\u05DE\u05D5\u05E2\u05D3 \u05E7\u05D8\u05DF",
        "\u05D7\u05D2\u05D9\u05D2\u05D4",
        "\u05D9\u05D1\u05DE\u05D5\u05EA",
        "\u05DB\u05EA\u05D5\u05D1\u05D5\u05EA",
        "\u05E0\u05D3\u05E8\u05D9\u05DD",
        "\u05E0\u05D6\u05D9\u05E8",
        "\u05E1\u05D5\u05D8\u05D4",
        "\u05D2\u05D9\u05D8\u05D9\u05DF",
        "\u05E7\u05D9\u05D3\u05D5\u05E9\u05D9\u05DF",
        "\u05D1\u05D1\u05D0 \u05E7\u05DE\u05D0",
        "\u05D1\u05D1\u05D0 \u05DE\u05E6\u05D9\u05E2\u05D0",
        "\u05D1\u05D1\u05D0 \u05D1\u05EA\u05E8\u05D0",
        "\u05E1\u05E0\u05D4\u05D3\u05E8\u05D9\u05DF",
        "\u05DE\u05DB\u05D5\u05EA",
        "\u05E9\u05D1\u05D5\u05E2\u05D5\u05EA",
        "\u05E2\u05D1\u05D5\u05D3\u05D4 \u05D6\u05E8\u05D4",
        "\u05D4\u05D5\u05E8\u05D9\u05D5\u05EA",
        "\u05D6\u05D1\u05D7\u05D9\u05DD",
        "\u05DE\u05E0\u05D7\u05D5\u05EA",
        "\u05D7\u05D5\u05DC\u05D9\u05DF",
        "\u05D1\u05DB\u05D5\u05E8\u05D5\u05EA",
        "\u05E2\u05E8\u05DB\u05D9\u05DF",
        "\u05EA\u05DE\u05D5\u05E8\u05D4",
        "\u05DB\u05E8\u05D9\u05EA\u05D5\u05EA",
        "\u05DE\u05E2\u05D9\u05DC\u05D4",
        "\u05E7\u05D9\u05E0\u05D9\u05DD",
        "\u05EA\u05DE\u05D9\u05D3",
        "\u05DE\u05D9\u05D3\u05D5\u05EA",
        "\u05E0\u05D3\u05D4",
)

YERUSHALMI_TRANSLITERATED: Tuple[str, ...] = (
    "Berachos", "Pe'ah", "Demai", "Kilayim", "Shevi'is", "Terumos", "Ma'asros",
    "Ma'aser Sheni", "Chalah", "Orlah", "Bikurim", "Shabbos", "Eruvin", "Pesachim",
    "Beitzah", "Rosh Hashanah", "Yoma", "Sukah", "Ta'anis", "Shekalim", "Megilah",
    "Chagigah", "Moed Katan", "Yevamos", "Kesuvos", "Sotah", "Nedarim", "Nazir", "Gitin",
    "Kidushin", "Bava Kama", "Bava Metzia", "Bava Basra", "Shevuos", "Makos", "Sanhedrin",
    "Avodah Zarah", "Horayos", "Nidah",
)

YERUSHALMI: Tuple[str, ...] = (
        "\u05D1\u05E8\u05DB\u05D5\u05EA",
        "\u05E4\u05D9\u05D0\u05D4",
        "\u05D3\u05DE\u05D0\u05D9",
        "\u05DB\u05DC\u05D0\u05D9\u05DD",
        "\u05E9\u05D1\u05D9\u05E2\u05D9\u05EA",
        "\u05EA\u05E8\u05D5\u05DE\u05D5\u05EA",
        "\u05DE\u05E2\u05E9\u05E8\u05D5\u05EA",
        "\u05DE\u05E2\u05E9\u05E8 \u05E9\u05E0\u05D9",
        "\u05D7\u05DC\u05D4",
        "\u05E2\u05D5\u05E8\u05DC\u05D4",
        "\u05D1\u05D9\u05DB\u05D5\u05E8\u05D9\u05DD",
        "\u05E9\u05D1\u05EA",
        "\u05E2\u05D9\u05E8\u05D5\u05D1\u05D9\u05DF",
        "\u05E4\u05E1\u05D7\u05D9\u05DD",
        "\u05D1\u05D9\u05E6\u05D4",
        "\u05E8\u05D0\u05E9 \u05D4\u05E9\u05E0\u05D4",
        "\u05D9\u05D5\u05DE\u05D0",
        "\u05E1\u05D5\u05DB\u05D4",
        "\u05EA\u05E2\u05E0\u05D9\u05EA",
        "\u05E9\u05E7\u05DC\u05D9\u05DD",
        "\u05DE\u05D2\u05D9\u05DC\u05D4",
        "\u05D7\u05D2\u05D9\u05D2\u05D4",
        "\u05DE\u05D5\u05E2\u05D3 \u05E7\u05D8\u05DF",
        "\u05D9\u05D1\u05DE\u05D5\u05EA",
        "\u05DB\u05EA\u05D5\u05D1\u05D5\u05EA",
        "\u05E1\u05D5\u05D8\u05D4",
        "\u05E0\u05D3\u05E8\u05D9\u05DD",
        "\u05E0\u05D6\u05D9\u05E8",
        "\u05D2\u05D9\u05D8\u05D9\u05DF",
        "\u05E7\u05D9\u05D3\u05D5\u05E9\u05D9\u05DF",
        "\u05D1\u05D1\u05D0 \u05E7\u05DE\u05D0",
        "\u05D1\u05D1\u05D0 \u05DE\u05E6\u05D9\u05E2\u05D0",
        "\u05D1\u05D1\u05D0 \u05D1\u05EA\u05E8\u05D0",
        "\u05E9\u05D1\u05D5\u05E2\u05D5\u05EA",
        "\u05DE\u05DB\u05D5\u05EA",
        "\u05E1\u05E0\u05D4\u05D3\u05E8\u05D9\u05DF",
        "\u05E2\u05D1\u05D5\u05D3\u05D4 \u05D6\u05E8\u05D4",
        "\u05D4\u05D5\u05E8\u05D9\u05D5\u05EA",
        "\u05E0\u05D9\u05D3\u05D4",
)


@dataclass(frozen=True)
class MasechtaNames:
    bavli: Tuple[str, ...] = BAVLI
    bavli_transliterated: Tuple[str, ...] = BAVLI_TRANSLITERATED
    yerushalmi: Tuple[str, ...] = YERUSHALMI
    yerushalmi_transliterated: Tuple[str, ...] = YERUSHALMI_TRANSLITERATED

    def __post_init__(self) -> None:
        if len(self.bavli) != 40 or len(self.bavli_transliterated) != 40:
            raise ValueError("Bavli name tables must list 40 tractates")
        if len(self.yerushalmi) != 39 or len(self.yerushalmi_transliterated) != 39:
            raise ValueError("Yerushalmi name tables must list 39 tractates")


DEFAULT_NAMES = MasechtaNames()
