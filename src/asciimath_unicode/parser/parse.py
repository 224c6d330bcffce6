"""Recursive-descent parser turning tokens into an expression tree.

Grammar::

    expression   := intermediate*
    intermediate := scriptfunc ("/" scriptfunc)?
    scriptfunc   := FUNCTION script scriptfunc | simple script
    script       := ("_" simple)? ("^" simple)?
    simple       := NUMBER | TEXT | IDENT | SYMBOL | UNARY simple
                  | BINARY simple simple | FUNCTION simple | group

A close bracket ends the enclosing expression, as does ``|`` directly inside
a ``|`` group. Malformed input never fails: unterminated groups close with an
empty bracket and stray closers become groups with an empty opening bracket.
Only nesting deeper than the interpreter's recursion limit is rejected.
"""

from __future__ import annotations

import logging

from asciimath_unicode.core.exceptions import ExpressionTooDeepError
from asciimath_unicode.parser.tokenizer import tokenize
from asciimath_unicode.parser.tokens import Token, TokenKind
from asciimath_unicode.parser.tree import (
    NO_SCRIPT,
    Expression,
    Frac,
    Func,
    Group,
    Ident,
    Intermediate,
    Matrix,
    Missing,
    Number,
    Script,
    ScriptFunc,
    Simple,
    SimpleBinary,
    SimpleFunc,
    SimpleScript,
    SimpleUnary,
    Symbol,
    Text,
    is_plain,
    sole_simple,
)


logger = logging.getLogger(__name__)

_PIPE = "|"
_BRACKET = "bracket"

_SYMBOLIC_KINDS = frozenset(
    {TokenKind.FRAC, TokenKind.SUB, TokenKind.SUPER, TokenKind.SEP, TokenKind.SYMBOL}
)


class Parser:
    """Parse a token list into an :data:`Expression`."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.position = 0
        self._contexts: list[str] = []
        self._failed_pipes: set[int] = set()

    def peek(self) -> Token | None:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.position]
        self.position += 1
        return token

    @property
    def in_pipe(self) -> bool:
        return bool(self._contexts) and self._contexts[-1] == _PIPE

    def _at_closer(self, token: Token) -> bool:
        if token.kind is TokenKind.CLOSE_BRACKET:
            return bool(self._contexts)
        return token.kind is TokenKind.OPEN_CLOSE_BRACKET and self.in_pipe

    def parse(self) -> Expression:
        return self.parse_expression()

    def parse_expression(self) -> Expression:
        items: list[Intermediate] = []
        while (token := self.peek()) is not None:
            if self._at_closer(token):
                break
            if token.kind is TokenKind.CLOSE_BRACKET:
                self.advance()
                items.append(SimpleScript(Group("", (), token.text), self.parse_script()))
                continue
            items.append(self.parse_intermediate())
        return tuple(items)

    def parse_intermediate(self) -> Intermediate:
        numer = self.parse_scriptfunc()
        token = self.peek()
        if token is not None and token.kind is TokenKind.FRAC:
            self.advance()
            return Frac(numer, self.parse_scriptfunc())
        return numer

    def parse_scriptfunc(self) -> ScriptFunc:
        token = self.peek()
        if token is not None and token.kind is TokenKind.FUNCTION:
            self.advance()
            script = self.parse_script()
            return Func(token.text, script, self.parse_scriptfunc())
        simple = self.parse_simple()
        return SimpleScript(simple, self.parse_script())

    def parse_script(self) -> Script:
        sub: Simple | None = None
        sup: Simple | None = None
        token = self.peek()
        if token is not None and token.kind is TokenKind.SUB:
            self.advance()
            sub = self.parse_simple()
            token = self.peek()
        if token is not None and token.kind is TokenKind.SUPER:
            self.advance()
            sup = self.parse_simple()
        if sub is None and sup is None:
            return NO_SCRIPT
        return Script(sub, sup)

    def parse_simple(self) -> Simple:
        token = self.peek()
        if token is None:
            return Missing()
        kind = token.kind
        if kind is TokenKind.CLOSE_BRACKET:
            return Missing()
        if kind is TokenKind.OPEN_CLOSE_BRACKET:
            if self.in_pipe:
                return Missing()
            return self.parse_pipe_group()

        self.advance()
        if kind in _SYMBOLIC_KINDS:
            return Symbol(token.text)
        if kind is TokenKind.NUMBER:
            return Number(token.text)
        if kind is TokenKind.TEXT:
            return Text(token.text)
        if kind is TokenKind.IDENT:
            return Ident(token.text)
        if kind is TokenKind.FUNCTION:
            return SimpleFunc(token.text, self.parse_simple())
        if kind is TokenKind.UNARY:
            return SimpleUnary(token.text, self.parse_simple())
        if kind is TokenKind.BINARY:
            first = self.parse_simple()
            return SimpleBinary(token.text, first, self.parse_simple())
        return self.parse_group(token.text)

    def parse_group(self, left: str) -> Simple:
        self._contexts.append(_BRACKET)
        try:
            expr = self.parse_expression()
        finally:
            self._contexts.pop()
        token = self.peek()
        right = ""
        if token is not None and token.kind is TokenKind.CLOSE_BRACKET:
            self.advance()
            right = token.text
        return _as_matrix(left, expr, right) or Group(left, expr, right)

    def parse_pipe_group(self) -> Simple:
        start = self.position
        self.advance()
        if start in self._failed_pipes:
            return Symbol(_PIPE)

        self._contexts.append(_PIPE)
        try:
            expr = self.parse_expression()
        finally:
            self._contexts.pop()
        token = self.peek()
        if token is not None and token.kind is TokenKind.OPEN_CLOSE_BRACKET:
            self.advance()
            return _as_matrix(_PIPE, expr, _PIPE) or Group(_PIPE, expr, _PIPE)

        logger.debug("Unmatched '|' at token %d, reading it as a symbol.", start)
        self._failed_pipes.add(start)
        self.position = start + 1
        return Symbol(_PIPE)


def _split_on_commas(expr: Expression) -> list[Expression]:
    segments: list[list[Intermediate]] = [[]]
    for item in expr:
        if is_plain(item) and item.simple == Symbol(","):
            segments.append([])
        else:
            segments[-1].append(item)
    return [tuple(segment) for segment in segments]


def _as_matrix(left: str, expr: Expression, right: str) -> Matrix | None:
    """Return a matrix when ``expr`` is two or more comma-separated bracketed rows."""
    segments = _split_on_commas(expr)
    if len(segments) < 2:
        return None
    rows: list[Group] = []
    for segment in segments:
        row = sole_simple(segment)
        if not isinstance(row, Group) or not row.right_bracket:
            return None
        rows.append(row)
    first = rows[0]
    if any(
        row.left_bracket != first.left_bracket or row.right_bracket != first.right_bracket
        for row in rows
    ):
        return None
    cells = [tuple(_split_on_commas(row.expr)) for row in rows]
    width = len(cells[0])
    if width < 1 or any(len(row) != width for row in cells):
        return None
    return Matrix(left, tuple(cells), right)


def parse_unicode(text: str) -> Expression:
    """Parse asciimath ``text`` into an expression tree."""
    try:
        return Parser(list(tokenize(text))).parse()
    except RecursionError as exc:
        raise ExpressionTooDeepError("expression nests too deeply to parse") from exc


__all__ = ["Parser", "parse_unicode"]
