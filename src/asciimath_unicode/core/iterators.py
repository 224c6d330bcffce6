"""Generators composing character streams."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def interleave(sequences: Iterable[Iterable[str]], sep: str) -> Iterator[str]:
    """Yield every sequence in turn with ``sep`` between consecutive ones."""
    first = True
    for sequence in sequences:
        if not first:
            yield sep
        first = False
        yield from sequence


def modified(chars: Iterable[str], mark: str) -> Iterator[str]:
    """Yield ``mark`` after every character of ``chars``."""
    for char in chars:
        yield char
        yield mark


__all__ = ["interleave", "modified"]
