from __future__ import annotations

from asciimath_unicode.core.iterators import interleave, modified


def test_interleave() -> None:
    assert "".join(interleave([["a"], ["b", "c"], []], ",")) == "a,bc,"
    assert "".join(interleave([], ",")) == ""
    assert "".join(interleave(["x"], ",")) == "x"


def test_modified() -> None:
    assert "".join(modified("ab", "\u0305")) == "a\u0305b\u0305"
    assert list(modified("", "\u0305")) == []
