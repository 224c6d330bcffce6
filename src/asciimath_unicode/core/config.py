"""Options controlling how expressions are compacted.

RenderOptions

`strip_brackets` (`bool`)
: Render the inner expression of a bracketed operand when doing so unlocks a
  more compact form, e.g. `(1)/2` becomes `½`.

`vulgar_fracs` (`bool`)
: Emit precomposed vulgar fractions (`½`, `⅞`, `℁`) and the `⅟` prefix for
  fractions with a unit numerator.

`script_fracs` (`bool`)
: Render fractions as a superscript numerator, a fraction slash and a
  subscript denominator when every character has a script image.

`skin_tone` (`SkinTone`)
: Skin tone applied to emoji shortcodes that support one.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
import yaml

from asciimath_unicode.core.emoji import SkinTone
from asciimath_unicode.core.exceptions import ConfigurationError


class RenderOptions(BaseModel):
    """Immutable rendering configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    strip_brackets: bool = True
    vulgar_fracs: bool = True
    script_fracs: bool = True
    skin_tone: SkinTone = SkinTone.DEFAULT


def options_from_mapping(data: Mapping[str, Any] | None) -> RenderOptions:
    """Validate ``data`` into :class:`RenderOptions`."""
    if data is None:
        return RenderOptions()
    if not isinstance(data, Mapping):
        raise ConfigurationError("Renderer options must be a mapping.")
    try:
        return RenderOptions.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid renderer options: {exc}") from exc


def load_options(path: Path | str) -> RenderOptions:
    """Load renderer options from a YAML file."""
    source = Path(path)
    try:
        payload = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read options file '{source}': {exc}") from exc

    try:
        parsed = yaml.safe_load(payload)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in options file '{source}': {exc}") from exc
    return options_from_mapping(parsed)


__all__ = ["RenderOptions", "load_options", "options_from_mapping"]
