"""Custom exception hierarchy for the Unicode rendering pipeline."""

from __future__ import annotations


class AsciimathUnicodeError(RuntimeError):
    """Base exception for asciimath to Unicode conversion failures."""


class UnmappedBracketError(AsciimathUnicodeError):
    """Raised when a bracket token has no string representation.

    The tokenizer only emits bracket tokens listed in the bracket tables, so
    this signals a mismatch between the token table and the bracket tables.
    """

    def __init__(self, token: str, *, side: str) -> None:
        super().__init__(f'unmapped {side} bracket "{token}"')
        self.token = token
        self.side = side


class UnknownSymbolError(AsciimathUnicodeError):
    """Raised when a symbol token is neither a known spelling nor an emoji shortcode."""

    def __init__(self, token: str) -> None:
        super().__init__(f'unmapped symbol "{token}"')
        self.token = token


class ExpressionTooDeepError(AsciimathUnicodeError):
    """Raised when nesting exceeds what the recursive parser and renderer can walk."""


class ConfigurationError(AsciimathUnicodeError):
    """Raised when renderer options cannot be loaded or validated."""


class OutputWriteError(AsciimathUnicodeError, OSError):
    """Raised when rendered characters cannot be written to the output sink."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "AsciimathUnicodeError",
    "ConfigurationError",
    "ExpressionTooDeepError",
    "OutputWriteError",
    "UnknownSymbolError",
    "UnmappedBracketError",
    "exception_messages",
]
