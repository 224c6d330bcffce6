from __future__ import annotations

from asciimath_unicode.core.chars import RenderChars
from asciimath_unicode.core.scripts import to_subscript


def test_empty_is_scriptable() -> None:
    chars = RenderChars.empty()

    assert chars.length == 0
    assert chars.sub and chars.sup
    assert chars.collect() == ""


def test_from_str_scans_metadata() -> None:
    chars = RenderChars.from_str("ab")

    assert chars.length == 2
    assert chars.sub is False
    assert chars.sup is True
    assert chars.collect() == "ab"


def test_from_char() -> None:
    chars = RenderChars.from_char("y")

    assert (chars.length, chars.sub, chars.sup) == (1, False, True)


def test_chain_and_concat_combine_metadata() -> None:
    chained = RenderChars.from_str("x").chain(RenderChars.from_str("yz"))
    assert (chained.length, chained.sub, chained.sup) == (3, False, True)
    assert chained.collect() == "xyz"

    joined = RenderChars.concat(
        [RenderChars.from_str("1"), RenderChars.empty(), RenderChars.from_str("+n")]
    )
    assert (joined.length, joined.sub, joined.sup) == (3, True, True)
    assert "".join(joined) == "1+n"


def test_mapping_keeps_source_metadata() -> None:
    mapped = RenderChars.from_str("2").map_chars(to_subscript)

    assert (mapped.length, mapped.sub, mapped.sup) == (1, True, True)
    assert mapped.collect() == "₂"


def test_map_iter_replaces_iterator() -> None:
    mapped = RenderChars.from_str("ab").map_iter(lambda chars: reversed(list(chars)))

    assert mapped.length == 2
    assert mapped.collect() == "ba"


def test_single_pass() -> None:
    chars = RenderChars.from_str("abc")

    assert chars.collect() == "abc"
    assert chars.collect() == ""
