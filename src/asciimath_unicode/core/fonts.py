"""Font maps onto the Mathematical Alphanumeric Symbols block.

Each map is declared as a table of letterlike exceptions plus a list of
contiguous ranges shifted into their styled counterpart. Besides the plain
Latin, Greek and digit ranges, every map also accepts characters already
produced by another map so styles compose (bold applied to an italic letter
yields the bold italic letter). Characters outside every range are returned
unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FontMap:
    """Character-to-character mapping for one mathematical alphabet."""

    name: str
    ranges: tuple[tuple[int, int, int], ...]
    exceptions: Mapping[str, str] = field(default_factory=dict)

    def __call__(self, char: str) -> str:
        mapped = self.exceptions.get(char)
        if mapped is not None:
            return mapped
        code = ord(char)
        for first, last, target in self.ranges:
            if first <= code <= last:
                return chr(code - first + target)
        return char


def _span(first: str, last: str, target: int) -> tuple[int, int, int]:
    return ord(first), ord(last), target


# Greek symbol variants share the same offsets in every Greek alphabet.
_GREEK_VARIANTS = ("∂", "ϵ", "ϑ", "ϰ", "ϕ", "ϱ", "ϖ")


def _greek_variants(partial: int) -> dict[str, str]:
    return {char: chr(partial + offset) for offset, char in enumerate(_GREEK_VARIANTS)}


bold_map = FontMap(
    "bold",
    ranges=(
        _span("A", "Z", 0x1D400),
        _span("a", "z", 0x1D41A),
        _span("0", "9", 0x1D7CE),
        _span("Α", "Ω", 0x1D6A8),
        _span("α", "ω", 0x1D6C2),
        # italic
        (0x1D434, 0x1D467, 0x1D468),
        (0x1D6E2, 0x1D71B, 0x1D71C),
        # calligraphic
        (0x1D49C, 0x1D4CF, 0x1D4D0),
        # fraktur
        (0x1D504, 0x1D537, 0x1D56C),
        # sans serif
        (0x1D5A0, 0x1D5D3, 0x1D5D4),
        (0x1D7E2, 0x1D7EB, 0x1D7EC),
        # sans serif italic
        (0x1D608, 0x1D63B, 0x1D63C),
    ),
    exceptions={
        "ϴ": "\U0001d6b9",
        "∇": "\U0001d6c1",
        **_greek_variants(0x1D6DB),
        # italic
        "ℎ": "\U0001d489",
        # calligraphic letterlike
        "ℬ": "\U0001d4d1",
        "ℰ": "\U0001d4d4",
        "ℱ": "\U0001d4d5",
        "ℋ": "\U0001d4d7",
        "ℐ": "\U0001d4d8",
        "ℒ": "\U0001d4db",
        "ℳ": "\U0001d4dc",
        "ℛ": "\U0001d4e1",
        "ℯ": "\U0001d4ee",
        "ℊ": "\U0001d4f0",
        "ℴ": "\U0001d4f8",
        # fraktur letterlike
        "ℭ": "\U0001d56e",
        "ℌ": "\U0001d573",
        "ℑ": "\U0001d574",
        "ℜ": "\U0001d57d",
        "ℨ": "\U0001d585",
    },
)

italic_map = FontMap(
    "italic",
    ranges=(
        _span("A", "Z", 0x1D434),
        _span("a", "z", 0x1D44E),
        _span("Α", "Ω", 0x1D6E2),
        _span("α", "ω", 0x1D6FC),
        # bold
        (0x1D400, 0x1D433, 0x1D468),
        (0x1D6A8, 0x1D6E1, 0x1D71C),
        # sans serif
        (0x1D5A0, 0x1D5D3, 0x1D608),
        # sans serif bold
        (0x1D5D4, 0x1D607, 0x1D63C),
        (0x1D756, 0x1D78F, 0x1D790),
    ),
    exceptions={
        "h": "ℎ",
        "ϴ": "\U0001d6f3",
        "∇": "\U0001d6fb",
        **_greek_variants(0x1D715),
        # double-struck italic letterlike
        "\U0001d53b": "ⅅ",
        "\U0001d555": "ⅆ",
        "\U0001d556": "ⅇ",
        "\U0001d55a": "ⅈ",
        "\U0001d55b": "ⅉ",
    },
)

cal_map = FontMap(
    "calligraphic",
    ranges=(
        _span("A", "Z", 0x1D49C),
        _span("a", "z", 0x1D4B6),
        # bold
        (0x1D400, 0x1D433, 0x1D4D0),
    ),
    exceptions={
        "B": "ℬ",
        "E": "ℰ",
        "F": "ℱ",
        "H": "ℋ",
        "I": "ℐ",
        "L": "ℒ",
        "M": "ℳ",
        "R": "ℛ",
        "e": "ℯ",
        "g": "ℊ",
        "o": "ℴ",
    },
)

frak_map = FontMap(
    "fraktur",
    ranges=(
        _span("A", "Z", 0x1D504),
        _span("a", "z", 0x1D51E),
        # bold
        (0x1D400, 0x1D433, 0x1D56C),
    ),
    exceptions={
        "C": "ℭ",
        "H": "ℌ",
        "I": "ℑ",
        "R": "ℜ",
        "Z": "ℨ",
    },
)

double_map = FontMap(
    "double-struck",
    ranges=(
        _span("A", "Z", 0x1D538),
        _span("a", "z", 0x1D552),
        _span("0", "9", 0x1D7D8),
    ),
    exceptions={
        "C": "ℂ",
        "H": "ℍ",
        "N": "ℕ",
        "P": "ℙ",
        "Q": "ℚ",
        "R": "ℝ",
        "Z": "ℤ",
        "π": "ℼ",
        "γ": "ℽ",
        "Π": "ℾ",
        "Γ": "ℿ",
        "∑": "⅀",
        # italic
        "\U0001d437": "ⅅ",
        "\U0001d451": "ⅆ",
        "\U0001d452": "ⅇ",
        "\U0001d456": "ⅈ",
        "\U0001d457": "ⅉ",
    },
)

sans_map = FontMap(
    "sans-serif",
    ranges=(
        _span("A", "Z", 0x1D5A0),
        _span("a", "z", 0x1D5BA),
        _span("0", "9", 0x1D7E2),
        # bold
        (0x1D400, 0x1D433, 0x1D5D4),
        (0x1D7CE, 0x1D7D7, 0x1D7EC),
        (0x1D6A8, 0x1D6E1, 0x1D756),
        # italic
        (0x1D434, 0x1D467, 0x1D608),
        # bold italic
        (0x1D468, 0x1D49B, 0x1D63C),
        (0x1D71C, 0x1D755, 0x1D790),
    ),
    exceptions={"ℎ": "\U0001d629"},
)

mono_map = FontMap(
    "monospace",
    ranges=(
        _span("A", "Z", 0x1D670),
        _span("a", "z", 0x1D68A),
        _span("0", "9", 0x1D7F6),
    ),
)

FONT_MAPS: tuple[FontMap, ...] = (
    bold_map,
    italic_map,
    cal_map,
    frak_map,
    double_map,
    sans_map,
    mono_map,
)


__all__ = [
    "FONT_MAPS",
    "FontMap",
    "bold_map",
    "cal_map",
    "double_map",
    "frak_map",
    "italic_map",
    "mono_map",
    "sans_map",
]
