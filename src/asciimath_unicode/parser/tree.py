"""Immutable expression tree produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Missing:
    """Placeholder for an operand absent from the input."""


@dataclass(frozen=True, slots=True)
class Number:
    value: str


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class Ident:
    value: str


@dataclass(frozen=True, slots=True)
class Symbol:
    value: str


@dataclass(frozen=True, slots=True)
class SimpleFunc:
    """Named function applied to a simple argument, e.g. ``sin x`` as an operand."""

    func: str
    arg: Simple


@dataclass(frozen=True, slots=True)
class SimpleUnary:
    op: str
    arg: Simple


@dataclass(frozen=True, slots=True)
class SimpleBinary:
    op: str
    first: Simple
    second: Simple


@dataclass(frozen=True, slots=True)
class Group:
    """Bracketed expression. Either bracket may be the empty token."""

    left_bracket: str
    expr: Expression
    right_bracket: str


@dataclass(frozen=True, slots=True)
class Matrix:
    """Bracketed rows of cells; rows reuse the outer brackets when rendered."""

    left_bracket: str
    rows: tuple[tuple[Expression, ...], ...]
    right_bracket: str


@dataclass(frozen=True, slots=True)
class Script:
    """Optional subscript and superscript attached to an operand."""

    sub: Simple | None = None
    sup: Simple | None = None


NO_SCRIPT = Script()


@dataclass(frozen=True, slots=True)
class SimpleScript:
    simple: Simple
    script: Script = NO_SCRIPT


@dataclass(frozen=True, slots=True)
class Func:
    """Named function with its own script and a script-function argument."""

    func: str
    script: Script
    arg: ScriptFunc


@dataclass(frozen=True, slots=True)
class Frac:
    numer: ScriptFunc
    denom: ScriptFunc


Simple = Union[
    Missing,
    Number,
    Text,
    Ident,
    Symbol,
    SimpleFunc,
    SimpleUnary,
    SimpleBinary,
    Group,
    Matrix,
]
ScriptFunc = Union[SimpleScript, Func]
Intermediate = Union[ScriptFunc, Frac]
Expression = tuple[Intermediate, ...]


def is_plain(node: Intermediate) -> bool:
    """Return True for a simple operand carrying no script."""
    return isinstance(node, SimpleScript) and node.script == NO_SCRIPT


def sole_simple(expr: Expression) -> Simple | None:
    """Return the only simple of ``expr`` when it is a single unscripted operand."""
    if len(expr) == 1 and is_plain(expr[0]):
        return expr[0].simple
    return None


__all__ = [
    "Expression",
    "Frac",
    "Func",
    "Group",
    "Ident",
    "Intermediate",
    "Matrix",
    "Missing",
    "NO_SCRIPT",
    "Number",
    "Script",
    "ScriptFunc",
    "Simple",
    "SimpleBinary",
    "SimpleFunc",
    "SimpleScript",
    "SimpleUnary",
    "Symbol",
    "Text",
    "is_plain",
    "sole_simple",
]
