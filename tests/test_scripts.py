from __future__ import annotations

import pytest

from asciimath_unicode.core.scripts import (
    subscript_char,
    superscript_char,
    to_subscript,
    to_superscript,
)


@pytest.mark.parametrize("char", [" ", "\t"])
def test_whitespace_is_its_own_script(char: str) -> None:
    assert subscript_char(char) == char
    assert superscript_char(char) == char


def test_known_script_characters() -> None:
    assert to_subscript("2") == "₂"
    assert to_subscript("x") == "ₓ"
    assert to_superscript("n") == "ⁿ"
    assert to_superscript("(") == "⁽"


def test_missing_script_characters() -> None:
    assert subscript_char("y") is None
    assert superscript_char("ρ") is None
    assert subscript_char("ρ") == "ᵨ"


def test_unmapped_characters_pass_through() -> None:
    assert to_subscript("y") == "y"
    assert to_superscript("\U0001d41a") == "\U0001d41a"
