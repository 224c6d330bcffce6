"""Inline Unicode renderer for asciimath expression trees.

Every ``render_*`` method returns a :class:`RenderChars` so the caller can
decide on a compact form (script characters, vulgar fractions, combining
marks) from the metadata of already rendered operands without scanning the
output again. Characters are produced lazily; nothing is materialised until
the result is iterated.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging
from typing import IO

from asciimath_unicode.core.chars import RenderChars
from asciimath_unicode.core.config import RenderOptions
from asciimath_unicode.core.exceptions import ExpressionTooDeepError, OutputWriteError
from asciimath_unicode.core.fonts import (
    FontMap,
    bold_map,
    cal_map,
    double_map,
    frak_map,
    italic_map,
    mono_map,
    sans_map,
)
from asciimath_unicode.core.iterators import interleave, modified
from asciimath_unicode.core.scripts import to_subscript, to_superscript
from asciimath_unicode.core.symbols import left_bracket_str, right_bracket_str, symbol_str
from asciimath_unicode.parser.parse import parse_unicode
from asciimath_unicode.parser.tree import (
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

FRACTION_SLASH = "⁄"
ONE_FRACTION = "⅟"

VULGAR_FRACTIONS: dict[tuple[str, str], str] = {
    ("0", "3"): "↉",
    ("1", "10"): "⅒",
    ("1", "9"): "⅑",
    ("1", "8"): "⅛",
    ("1", "7"): "⅐",
    ("1", "6"): "⅙",
    ("1", "5"): "⅕",
    ("1", "4"): "¼",
    ("1", "3"): "⅓",
    ("1", "2"): "½",
    ("2", "5"): "⅖",
    ("2", "3"): "⅔",
    ("3", "8"): "⅜",
    ("3", "5"): "⅗",
    ("3", "4"): "¾",
    ("4", "5"): "⅘",
    ("5", "8"): "⅝",
    ("5", "6"): "⅚",
    ("7", "8"): "⅞",
}

LETTERLIKE_FRACTIONS: dict[tuple[str, str], str] = {
    ("a", "c"): "℀",
    ("a", "s"): "℁",
    ("A", "S"): "⅍",
    ("c", "o"): "℅",
    ("c", "u"): "℆",
}

ROOTS: dict[str, str] = {"2": "√", "3": "∛", "4": "∜"}

# Combining Latin small letters stacked by ``stackrel``/``overset``.
COMBINING_LETTERS: dict[str, str] = {
    "a": "\u0363",
    "e": "\u0364",
    "i": "\u0365",
    "o": "\u0366",
    "u": "\u0367",
    "c": "\u0368",
    "d": "\u0369",
    "h": "\u036a",
    "m": "\u036b",
    "r": "\u036c",
    "t": "\u036d",
    "v": "\u036e",
    "x": "\u036f",
}

# Relations written as ``stackrel <above> =``.
STACKED_EQUALS: dict[str, str] = {
    "∘": "≗",
    "⋆": "≛",
    "△": "≜",
    "def": "≝",
    "m": "≞",
    "?": "≟",
}

FONTS: dict[str, FontMap] = {
    "bb": bold_map,
    "mathbf": bold_map,
    "bbb": double_map,
    "mathbb": double_map,
    "cc": cal_map,
    "mathcal": cal_map,
    "tt": mono_map,
    "mathtt": mono_map,
    "fr": frak_map,
    "mathfrak": frak_map,
    "sf": sans_map,
    "mathsf": sans_map,
    "it": italic_map,
    "mathit": italic_map,
}

WRAPPERS: dict[str, tuple[str, str]] = {
    "abs": ("|", "|"),
    "Abs": ("|", "|"),
    "ceil": ("⌈", "⌉"),
    "floor": ("⌊", "⌋"),
    "norm": ("||", "||"),
    "text": ("", ""),
}

# Marks repeated after every character of the argument.
LINE_MARKS: dict[str, str] = {
    "overline": "\u0305",
    "underline": "\u0332",
    "ul": "\u0332",
}

# Marks applied to a single-character argument only.
ACCENTS: dict[str, str] = {
    "hat": "\u0302",
    "tilde": "\u0303",
    "bar": "\u0304",
    "dot": "\u0307",
    "ddot": "\u0308",
    "overarc": "\u0311",
    "overparen": "\u0311",
}


def _literal(simple: Simple, kind: type[Number] | type[Ident]) -> tuple[str, bool] | None:
    """Return ``(value, bracketed)`` when ``simple`` is ``kind`` or a group around one."""
    if isinstance(simple, kind):
        return simple.value, False
    if isinstance(simple, Group):
        inner = sole_simple(simple.expr)
        if isinstance(inner, kind):
            return inner.value, True
    return None


def _superscripted(chars: RenderChars) -> RenderChars:
    return chars.map_chars(to_superscript)


def _subscripted(chars: RenderChars) -> RenderChars:
    return chars.map_chars(to_subscript)


def _slash(numer: RenderChars, denom: RenderChars) -> RenderChars:
    return numer.chain(RenderChars.from_char("/")).chain(denom)


def _script_slash(numer: RenderChars, denom: RenderChars) -> RenderChars:
    return (
        _superscripted(numer)
        .chain(RenderChars.from_char(FRACTION_SLASH))
        .chain(_subscripted(denom))
    )


class RenderedUnicode:
    """Lazily rendered characters of an expression.

    Each iteration renders the tree again, so the object can be iterated,
    converted with :func:`str` or written to a sink any number of times.
    """

    __slots__ = ("_expression", "_renderer")

    def __init__(self, renderer: InlineRenderer, expression: Expression) -> None:
        self._renderer = renderer
        self._expression = expression

    def __iter__(self) -> Iterator[str]:
        try:
            yield from self._renderer.render_expression(self._expression)
        except RecursionError as exc:
            raise ExpressionTooDeepError("expression nests too deeply to render") from exc

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"RenderedUnicode({str(self)!r})"

    def write_to(self, sink: IO[str]) -> None:
        """Stream the characters to ``sink``, one at a time."""
        try:
            for char in self:
                sink.write(char)
        except OSError as exc:
            raise OutputWriteError(f"Failed to write rendered output: {exc}") from exc


class InlineRenderer(RenderOptions):
    """Render asciimath as a single line of Unicode text.

    The renderer is its own immutable configuration: build one with the
    desired options and call :meth:`render` as often as needed.
    """

    def render(self, text: str) -> RenderedUnicode:
        """Parse and render ``text``."""
        expression = parse_unicode(text)
        logger.debug("Parsed %d top-level item(s) from %r.", len(expression), text)
        return self.render_tree(expression)

    def render_tree(self, expression: Expression) -> RenderedUnicode:
        """Render an already parsed expression."""
        return RenderedUnicode(self, expression)

    # Expressions ---------------------------------------------------------

    def render_expression(self, expr: Expression) -> RenderChars:
        return RenderChars.concat(self.render_intermediate(item) for item in expr)

    def render_intermediate(self, item: Intermediate) -> RenderChars:
        if isinstance(item, Frac):
            return self.render_frac(item)
        return self.render_scriptfunc(item)

    def render_scriptfunc(self, func: ScriptFunc) -> RenderChars:
        if isinstance(func, Func):
            return self.render_func(func)
        return self.render_simplescript(func)

    def render_simplescript(self, simple: SimpleScript) -> RenderChars:
        return self.render_simple(simple.simple).chain(self.render_script(simple.script))

    def render_func(self, func: Func) -> RenderChars:
        return (
            RenderChars.from_str(func.func)
            .chain(self.render_script(func.script))
            .chain(RenderChars.from_char(" "))
            .chain(self.render_scriptfunc(func.arg))
        )

    def render_simplefunc(self, func: SimpleFunc) -> RenderChars:
        return (
            RenderChars.from_str(func.func)
            .chain(RenderChars.from_char(" "))
            .chain(self.render_simple(func.arg))
        )

    def render_script(self, script: Script) -> RenderChars:
        sub, sup = script.sub, script.sup
        if sub is None and sup is None:
            return RenderChars.empty()
        if sup is None:
            rendered = self.render_simple(sub)
            if rendered.sub:
                return _subscripted(rendered)
            return RenderChars.from_char("_").chain(rendered)
        if sub is None:
            rendered = self.render_simple(sup)
            if rendered.sup:
                return _superscripted(rendered)
            return RenderChars.from_char("^").chain(rendered)

        rend_sub = self.render_simple(sub)
        rend_sup = self.render_simple(sup)
        if rend_sub.sub and rend_sup.sup:
            return _subscripted(rend_sub).chain(_superscripted(rend_sup))
        return (
            RenderChars.from_char("_")
            .chain(rend_sub)
            .chain(RenderChars.from_char("^"))
            .chain(rend_sup)
        )

    # Simples -------------------------------------------------------------

    def render_simple(self, simple: Simple) -> RenderChars:
        match simple:
            case Missing():
                return RenderChars.empty()
            case Number(value) | Text(value) | Ident(value):
                return RenderChars.from_str(value)
            case Symbol(value):
                return RenderChars.from_str(symbol_str(value, self.skin_tone))
            case SimpleFunc():
                return self.render_simplefunc(simple)
            case SimpleUnary():
                return self.render_simpleunary(simple)
            case SimpleBinary():
                return self.render_simplebinary(simple)
            case Group():
                return self.render_group(simple)
            case Matrix():
                return self.render_matrix(simple)
        raise TypeError(f"Unsupported expression node: {simple!r}")

    def render_operand(self, simple: Simple) -> RenderChars:
        """Render ``simple``, dropping the brackets of a group when allowed."""
        if self.strip_brackets and isinstance(simple, Group):
            return self.render_expression(simple.expr)
        return self.render_simple(simple)

    def render_group(self, group: Group) -> RenderChars:
        return (
            RenderChars.from_str(left_bracket_str(group.left_bracket))
            .chain(self.render_expression(group.expr))
            .chain(RenderChars.from_str(right_bracket_str(group.right_bracket)))
        )

    def render_matrix(self, matrix: Matrix) -> RenderChars:
        left = left_bracket_str(matrix.left_bracket)
        right = right_bracket_str(matrix.right_bracket)
        num_rows = len(matrix.rows)
        num_cols = len(matrix.rows[0]) if matrix.rows else 0

        length = (num_rows + 1) * (len(left) + len(right))
        length += num_rows * max(num_cols - 1, 0) + max(num_rows - 1, 0)
        rows: list[Iterator[str]] = []
        for row in matrix.rows:
            cells: list[Iterator[str]] = []
            for cell in row:
                rendered = self.render_expression(cell)
                length += rendered.length
                cells.append(rendered.chars)
            rows.append(_bracketed(left, interleave(cells, ","), right))
        chars = _bracketed(left, interleave(rows, ","), right)
        return RenderChars(chars, length, sub=False, sup=False)

    # Unary operators -----------------------------------------------------

    def render_simpleunary(self, unary: SimpleUnary) -> RenderChars:
        op, arg = unary.op, unary.arg
        if op == "sqrt":
            return RenderChars.from_char("√").chain(self.render_simple(arg))
        font = FONTS.get(op)
        if font is not None:
            return self.render_operand(arg).map_chars(font)
        wrapper = WRAPPERS.get(op)
        if wrapper is not None:
            opening, closing = wrapper
            return (
                RenderChars.from_str(opening)
                .chain(self.render_operand(arg))
                .chain(RenderChars.from_str(closing))
            )
        mark = LINE_MARKS.get(op)
        if mark is not None:
            return self.render_operand(arg).map_iter(lambda chars: modified(chars, mark))
        mark = ACCENTS.get(op)
        if mark is not None:
            rendered = self.render_operand(arg)
            if rendered.length == 1:
                return rendered.chain(RenderChars.from_char(mark))
        return self._unary_generic(op, arg)

    def _unary_generic(self, op: str, arg: Simple) -> RenderChars:
        return (
            RenderChars.from_str(op)
            .chain(RenderChars.from_char(" "))
            .chain(self.render_simple(arg))
        )

    # Binary operators ----------------------------------------------------

    def render_simplebinary(self, binary: SimpleBinary) -> RenderChars:
        op, first, second = binary.op, binary.first, binary.second
        if op == "root":
            literal = _literal(first, Number)
            glyph = ROOTS.get(literal[0]) if literal else None
            if glyph is not None:
                return RenderChars.from_char(glyph).chain(self.render_simple(second))
        elif op == "frac":
            return self.render_simplefrac(first, second)
        elif op in {"stackrel", "overset"}:
            literal = _literal(first, Ident)
            mark = COMBINING_LETTERS.get(literal[0]) if literal else None
            if mark is not None and (self.strip_brackets or not literal[1]):
                return self._cover(binary, mark)
            if second == Symbol("="):
                above = self.render_operand(first).collect()
                glyph = STACKED_EQUALS.get(above)
                if glyph is not None:
                    return RenderChars.from_char(glyph)
        return self._binary_generic(binary)

    def _cover(self, binary: SimpleBinary, mark: str) -> RenderChars:
        rendered = self.render_operand(binary.second)
        if rendered.length == 1:
            return rendered.chain(RenderChars.from_char(mark))
        return self._binary_generic(binary)

    def _binary_generic(self, binary: SimpleBinary) -> RenderChars:
        return (
            RenderChars.from_str(binary.op)
            .chain(RenderChars.from_char(" "))
            .chain(self.render_simple(binary.first))
            .chain(RenderChars.from_char(" "))
            .chain(self.render_simple(binary.second))
        )

    # Fractions -----------------------------------------------------------

    def _vulgar(self, numer: Simple, denom: Simple) -> str | None:
        for kind, table in ((Number, VULGAR_FRACTIONS), (Ident, LETTERLIKE_FRACTIONS)):
            top = _literal(numer, kind)
            bottom = _literal(denom, kind)
            if top is None or bottom is None:
                continue
            glyph = table.get((top[0], bottom[0]))
            if glyph is not None and (self.strip_brackets or not (top[1] or bottom[1])):
                return glyph
        return None

    def _is_one(self, simple: Simple) -> bool:
        literal = _literal(simple, Number)
        return literal is not None and literal[0] == "1" and (
            self.strip_brackets or not literal[1]
        )

    def render_simplefrac(self, numer: Simple, denom: Simple) -> RenderChars:
        """Render ``numer/denom`` for two simple operands."""
        if self.vulgar_fracs:
            glyph = self._vulgar(numer, denom)
            if glyph is not None:
                return RenderChars.from_char(glyph)
            if self.script_fracs and self._is_one(numer):
                rend_den = self.render_operand(denom)
                if rend_den.sub:
                    return RenderChars.from_char(ONE_FRACTION).chain(_subscripted(rend_den))
                return _slash(self.render_simple(numer), self.render_simple(denom))
        if self.script_fracs:
            rend_num = self.render_operand(numer)
            rend_den = self.render_operand(denom)
            if rend_num.sup and rend_den.sub:
                return _script_slash(rend_num, rend_den)
        return _slash(self.render_simple(numer), self.render_simple(denom))

    def _render_fraction_operand(self, func: ScriptFunc) -> RenderChars:
        if self.strip_brackets and is_plain(func) and isinstance(func.simple, Group):
            return self.render_expression(func.simple.expr)
        return self.render_scriptfunc(func)

    def render_frac(self, frac: Frac) -> RenderChars:
        """Render a fraction whose operands may carry scripts or functions."""
        numer, denom = frac.numer, frac.denom
        if is_plain(numer) and is_plain(denom):
            return self.render_simplefrac(numer.simple, denom.simple)
        if (
            self.vulgar_fracs
            and self.script_fracs
            and is_plain(numer)
            and self._is_one(numer.simple)
        ):
            rend_den = self.render_scriptfunc(denom)
            if rend_den.sub:
                return RenderChars.from_char(ONE_FRACTION).chain(_subscripted(rend_den))
            return RenderChars.from_str("1/").chain(rend_den)
        if self.script_fracs:
            rend_num = self._render_fraction_operand(numer)
            rend_den = self._render_fraction_operand(denom)
            if rend_num.sup and rend_den.sub:
                return _script_slash(rend_num, rend_den)
        return _slash(self.render_scriptfunc(numer), self.render_scriptfunc(denom))


def _bracketed(left: str, chars: Iterator[str], right: str) -> Iterator[str]:
    yield from left
    yield from chars
    yield from right


def convert_unicode(text: str) -> str:
    """Convert asciimath ``text`` into a Unicode string with default options."""
    return str(InlineRenderer().render(text))


def write_unicode(text: str, sink: IO[str]) -> None:
    """Convert asciimath ``text`` with default options and write it to ``sink``."""
    InlineRenderer().render(text).write_to(sink)


__all__ = [
    "InlineRenderer",
    "RenderedUnicode",
    "convert_unicode",
    "write_unicode",
]
