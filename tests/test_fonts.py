from __future__ import annotations

from asciimath_unicode.core.fonts import (
    FONT_MAPS,
    bold_map,
    cal_map,
    double_map,
    frak_map,
    italic_map,
    mono_map,
    sans_map,
)


def _seed() -> set[str]:
    chars = {chr(code) for code in range(ord("A"), ord("Z") + 1)}
    chars |= {chr(code) for code in range(ord("a"), ord("z") + 1)}
    chars |= {chr(code) for code in range(ord("0"), ord("9") + 1)}
    chars |= {chr(code) for code in range(ord("Α"), ord("Ω") + 1)}
    chars |= {chr(code) for code in range(ord("α"), ord("ω") + 1)}
    chars |= set("∂ϵϑϰϕϱϖ∇")
    chars |= set("ℎℬℰℱℋℐℒℳℛℯℊℴℭℌℑℜℨ")
    return chars


def test_maps_stay_within_single_characters() -> None:
    chars = _seed()
    for _ in range(3):
        chars = {font(char) for char in chars for font in FONT_MAPS}
        assert all(len(char) == 1 for char in chars)


def test_registry_lists_every_map() -> None:
    assert [font.name for font in FONT_MAPS] == [
        "bold",
        "italic",
        "calligraphic",
        "fraktur",
        "double-struck",
        "sans-serif",
        "monospace",
    ]


def test_letterlike_exceptions() -> None:
    assert double_map("E") == "\U0001d53c"
    assert double_map("R") == "ℝ"
    assert frak_map("H") == "ℌ"
    assert cal_map("B") == "ℬ"
    assert italic_map("h") == "ℎ"


def test_bold_greek() -> None:
    assert bold_map("Α") == "\U0001d6a8"
    assert bold_map("α") == "\U0001d6c2"


def test_styles_compose() -> None:
    assert bold_map(italic_map("x")) == "\U0001d499"
    assert sans_map(bold_map("A")) == "\U0001d5d4"
    assert bold_map(cal_map("B")) == "\U0001d4d1"
    assert bold_map(frak_map("H")) == "\U0001d573"


def test_unmapped_characters_pass_through() -> None:
    assert mono_map("+") == "+"
    assert mono_map("α") == "α"
