from __future__ import annotations

import pytest

from asciimath_unicode.parser.tokenizer import tokenize
from asciimath_unicode.parser.tokens import Token, TokenKind, token_lengths, token_table


def _tokens(text: str) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.text) for token in tokenize(text)]


def test_longest_spelling_wins() -> None:
    assert _tokens("sinx") == [(TokenKind.FUNCTION, "sin"), (TokenKind.IDENT, "x")]
    assert _tokens("<=>") == [(TokenKind.SYMBOL, "<=>")]
    assert _tokens("sinh") == [(TokenKind.FUNCTION, "sinh")]


def test_text_and_numbers() -> None:
    assert _tokens('"ab c" 1.5') == [(TokenKind.TEXT, "ab c"), (TokenKind.NUMBER, "1.5")]
    assert _tokens("12x") == [(TokenKind.NUMBER, "12"), (TokenKind.IDENT, "x")]


def test_unterminated_text_runs_to_end() -> None:
    assert _tokens('x "open end') == [(TokenKind.IDENT, "x"), (TokenKind.TEXT, "open end")]


def test_greater_than_is_a_symbol() -> None:
    assert _tokens("x>y") == [
        (TokenKind.IDENT, "x"),
        (TokenKind.SYMBOL, ">"),
        (TokenKind.IDENT, "y"),
    ]


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("(", TokenKind.OPEN_BRACKET),
        (":)", TokenKind.CLOSE_BRACKET),
        ("|", TokenKind.OPEN_CLOSE_BRACKET),
        ("/", TokenKind.FRAC),
        ("_", TokenKind.SUB),
        ("^", TokenKind.SUPER),
        (",", TokenKind.SEP),
        ("sqrt", TokenKind.UNARY),
        ("mathbb", TokenKind.UNARY),
        ("stackrel", TokenKind.BINARY),
        ("lim", TokenKind.IDENT),
        ("dx", TokenKind.IDENT),
        (":thumbs_up:", TokenKind.SYMBOL),
    ],
)
def test_token_kinds(text: str, kind: TokenKind) -> None:
    assert list(tokenize(text)) == [Token(kind, text)]


def test_whitespace_only() -> None:
    assert list(tokenize(" \t\n")) == []


def test_unknown_characters_are_identifiers() -> None:
    assert _tokens("?€") == [(TokenKind.IDENT, "?"), (TokenKind.IDENT, "€")]


def test_token_table_includes_shortcodes() -> None:
    table = token_table()

    assert table[":thumbs_up:"] is TokenKind.SYMBOL
    assert table["sin"] is TokenKind.FUNCTION
    lengths = token_lengths()
    assert list(lengths) == sorted(lengths, reverse=True)
