"""Lazy character sequences that remember their length and script eligibility."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
import itertools

from asciimath_unicode.core.scripts import subscript_char, superscript_char


@dataclass(frozen=True, slots=True)
class RenderChars:
    """A single-pass character iterator annotated with rendering metadata.

    ``length`` counts the characters the iterator yields, ``sub`` and ``sup``
    tell whether every one of them has a subscript or superscript image. The
    empty sequence is both subscriptable and superscriptable.

    ``map_chars`` and ``map_iter`` keep the metadata of the source untouched:
    once characters are transformed the sequence is only meant to be emitted,
    never inspected again.
    """

    chars: Iterator[str]
    length: int = 0
    sub: bool = True
    sup: bool = True

    def __iter__(self) -> Iterator[str]:
        return self.chars

    @classmethod
    def empty(cls) -> RenderChars:
        return cls(iter(()))

    @classmethod
    def from_str(cls, text: str) -> RenderChars:
        """Build a sequence from ``text``, scanning it once for metadata."""
        length = 0
        sub = True
        sup = True
        for char in text:
            length += 1
            sub = sub and subscript_char(char) is not None
            sup = sup and superscript_char(char) is not None
        return cls(iter(text), length, sub, sup)

    @classmethod
    def from_char(cls, char: str) -> RenderChars:
        return cls(
            iter((char,)),
            1,
            subscript_char(char) is not None,
            superscript_char(char) is not None,
        )

    @classmethod
    def concat(cls, parts: Iterable[RenderChars]) -> RenderChars:
        """Concatenate ``parts`` in order, combining metadata like :meth:`chain`."""
        iterators: list[Iterator[str]] = []
        length = 0
        sub = True
        sup = True
        for part in parts:
            iterators.append(part.chars)
            length += part.length
            sub = sub and part.sub
            sup = sup and part.sup
        return cls(itertools.chain.from_iterable(iterators), length, sub, sup)

    def chain(self, other: RenderChars) -> RenderChars:
        return RenderChars(
            itertools.chain(self.chars, other.chars),
            self.length + other.length,
            self.sub and other.sub,
            self.sup and other.sup,
        )

    def map_chars(self, func: Callable[[str], str]) -> RenderChars:
        """Apply ``func`` to every character lazily; metadata is not recomputed."""
        return RenderChars(map(func, self.chars), self.length, self.sub, self.sup)

    def map_iter(self, func: Callable[[Iterator[str]], Iterator[str]]) -> RenderChars:
        """Replace the iterator with ``func(chars)``; metadata is not recomputed."""
        return RenderChars(func(self.chars), self.length, self.sub, self.sup)

    def collect(self) -> str:
        return "".join(self.chars)


__all__ = ["RenderChars"]
