from __future__ import annotations

import pytest

from asciimath_unicode.core.emoji import SkinTone
from asciimath_unicode.core.exceptions import UnknownSymbolError, UnmappedBracketError
from asciimath_unicode.core.symbols import (
    is_shortcode,
    left_bracket_str,
    right_bracket_str,
    symbol_str,
)
from asciimath_unicode.parser.tokens import UNICODE_TOKENS, TokenKind


_SYMBOLIC = {TokenKind.SYMBOL, TokenKind.FRAC, TokenKind.SUB, TokenKind.SUPER, TokenKind.SEP}


@pytest.mark.parametrize(("spelling", "kind"), UNICODE_TOKENS)
def test_every_token_has_a_rendering(spelling: str, kind: TokenKind) -> None:
    if kind is TokenKind.OPEN_BRACKET:
        assert isinstance(left_bracket_str(spelling), str)
    elif kind is TokenKind.CLOSE_BRACKET:
        assert isinstance(right_bracket_str(spelling), str)
    elif kind is TokenKind.OPEN_CLOSE_BRACKET:
        left_bracket_str(spelling)
        right_bracket_str(spelling)
        symbol_str(spelling)
    elif kind in _SYMBOLIC:
        assert symbol_str(spelling)


def test_empty_brackets_render_nothing() -> None:
    assert left_bracket_str("") == ""
    assert right_bracket_str("") == ""
    assert left_bracket_str("{:") == ""
    assert right_bracket_str(":}") == ""


def test_unknown_brackets_raise() -> None:
    with pytest.raises(UnmappedBracketError) as excinfo:
        left_bracket_str(")")

    assert excinfo.value.token == ")"
    assert excinfo.value.side == "left"


def test_symbol_spellings() -> None:
    assert symbol_str("alpha") == "α"
    assert symbol_str("<=") == "≤"
    assert symbol_str("land") == "∧"
    assert symbol_str("lor") == "∨"
    assert symbol_str("if") == " if "


def test_shortcodes_resolve_through_emoji() -> None:
    assert symbol_str(":thumbs_up:") == "\U0001f44d"
    assert symbol_str(":thumbs_up:", SkinTone.LIGHT) == "\U0001f44d\U0001f3fb"


@pytest.mark.parametrize("token", ["nope", ":definitely_not_an_emoji:"])
def test_unknown_symbols_raise(token: str) -> None:
    with pytest.raises(UnknownSymbolError, match="unmapped symbol"):
        symbol_str(token)


def test_is_shortcode() -> None:
    assert is_shortcode(":x:")
    assert not is_shortcode("::")
    assert not is_shortcode(":x")
