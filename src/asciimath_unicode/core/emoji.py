"""Emoji shortcode lookup backed by the ``emoji`` package."""

from __future__ import annotations

from enum import Enum
from functools import cache
import itertools
import logging

import emoji


logger = logging.getLogger(__name__)

_VARIATION_SELECTOR = "\ufe0f"
_ZERO_WIDTH_JOINER = "\u200d"


class SkinTone(str, Enum):
    """Fitzpatrick skin tone applied to emoji that support one."""

    DEFAULT = "default"
    LIGHT = "light"
    MEDIUM_LIGHT = "medium-light"
    MEDIUM = "medium"
    MEDIUM_DARK = "medium-dark"
    DARK = "dark"

    @property
    def modifier(self) -> str:
        """Return the modifier code point, empty for the default tone."""
        return _MODIFIERS[self]


_MODIFIERS: dict[SkinTone, str] = {
    SkinTone.DEFAULT: "",
    SkinTone.LIGHT: "\U0001f3fb",
    SkinTone.MEDIUM_LIGHT: "\U0001f3fc",
    SkinTone.MEDIUM: "\U0001f3fd",
    SkinTone.MEDIUM_DARK: "\U0001f3fe",
    SkinTone.DARK: "\U0001f3ff",
}


@cache
def shortcode_index() -> dict[str, str]:
    """Return a mapping of bare shortcode names to emoji glyphs.

    Fully-qualified sequences win when several glyphs share a name.
    """
    fully_qualified = emoji.STATUS["fully_qualified"]
    entries = sorted(
        emoji.EMOJI_DATA.items(),
        key=lambda item: item[1].get("status") != fully_qualified,
    )
    index: dict[str, str] = {}
    for glyph, data in entries:
        names = [data.get("en"), *data.get("alias", ())]
        for name in names:
            if not name:
                continue
            index.setdefault(name.strip(":"), glyph)
    logger.debug("Indexed %d emoji shortcodes.", len(index))
    return index


def emoji_shortcodes() -> list[str]:
    """Return every known shortcode in its ``:name:`` spelling."""
    return [f":{name}:" for name in shortcode_index()]


def _toned(component: str, tone: SkinTone) -> str:
    base = component.replace(_VARIATION_SELECTOR, "")
    return base[:1] + tone.modifier + base[1:]


def with_skin_tone(glyph: str, tone: SkinTone) -> str | None:
    """Return ``glyph`` in the requested tone, or ``None`` when undefined.

    The modifier follows the first code point of every zero-width-joined
    component that accepts one on its own. Sequences such as
    ``people_holding_hands`` tone only some of those components, so smaller
    selections are tried until one is a known emoji.
    """
    if tone is SkinTone.DEFAULT:
        return glyph
    components = glyph.split(_ZERO_WIDTH_JOINER)
    toneable = [
        index
        for index, component in enumerate(components)
        if _toned(component, tone) in emoji.EMOJI_DATA
    ]
    for size in range(len(toneable), 0, -1):
        for chosen in itertools.combinations(toneable, size):
            candidate = _ZERO_WIDTH_JOINER.join(
                _toned(component, tone) if index in chosen else component
                for index, component in enumerate(components)
            )
            for spelling in (candidate, candidate.replace(_VARIATION_SELECTOR, "")):
                if spelling in emoji.EMOJI_DATA:
                    return spelling
    return None


def lookup_emoji(name: str, tone: SkinTone = SkinTone.DEFAULT) -> str | None:
    """Resolve a bare shortcode name to a glyph in the requested skin tone.

    Unknown names yield ``None``. Emoji without a variant for ``tone`` fall
    back to their toneless glyph.
    """
    glyph = shortcode_index().get(name)
    if glyph is None:
        return None
    toned = with_skin_tone(glyph, tone)
    if toned is None:
        logger.debug("Emoji ':%s:' has no %s skin tone variant.", name, tone.value)
        return glyph
    return toned


__all__ = [
    "SkinTone",
    "emoji_shortcodes",
    "lookup_emoji",
    "shortcode_index",
    "with_skin_tone",
]
