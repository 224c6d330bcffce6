"""Longest-prefix tokenizer for asciimath input."""

from __future__ import annotations

from collections.abc import Iterator
import re

from asciimath_unicode.parser.tokens import Token, TokenKind, token_lengths, token_table


_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_SPACE = re.compile(r"\s+")


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text``.

    Whitespace only separates tokens. A double-quoted run is a text token, an
    unterminated quote extending to the end of the input. Digits with an
    optional fractional part form a number. Anything else is the longest known
    spelling at the cursor, or a one-character identifier when none matches.
    """
    table = token_table()
    lengths = token_lengths()
    position = 0
    end = len(text)
    while position < end:
        space = _SPACE.match(text, position)
        if space is not None:
            position = space.end()
            continue

        if text[position] == '"':
            closing = text.find('"', position + 1)
            if closing == -1:
                yield Token(TokenKind.TEXT, text[position + 1 :])
                return
            yield Token(TokenKind.TEXT, text[position + 1 : closing])
            position = closing + 1
            continue

        number = _NUMBER.match(text, position)
        if number is not None:
            yield Token(TokenKind.NUMBER, number.group())
            position = number.end()
            continue

        for length in lengths:
            candidate = text[position : position + length]
            if len(candidate) == length and candidate in table:
                yield Token(table[candidate], candidate)
                position += length
                break
        else:
            yield Token(TokenKind.IDENT, text[position])
            position += 1


__all__ = ["tokenize"]
