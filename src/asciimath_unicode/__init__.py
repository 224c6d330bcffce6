"""Render asciimath expressions as inline Unicode text."""

from __future__ import annotations

from asciimath_unicode.core.chars import RenderChars
from asciimath_unicode.core.config import RenderOptions, load_options
from asciimath_unicode.core.emoji import SkinTone
from asciimath_unicode.core.exceptions import (
    AsciimathUnicodeError,
    ConfigurationError,
    ExpressionTooDeepError,
    OutputWriteError,
    UnknownSymbolError,
    UnmappedBracketError,
)
from asciimath_unicode.core.renderer import (
    InlineRenderer,
    RenderedUnicode,
    convert_unicode,
    write_unicode,
)
from asciimath_unicode.parser.parse import parse_unicode
from asciimath_unicode.version import get_version


__version__ = get_version()

__all__ = [
    "AsciimathUnicodeError",
    "ConfigurationError",
    "ExpressionTooDeepError",
    "InlineRenderer",
    "OutputWriteError",
    "RenderChars",
    "RenderOptions",
    "RenderedUnicode",
    "SkinTone",
    "UnknownSymbolError",
    "UnmappedBracketError",
    "__version__",
    "convert_unicode",
    "get_version",
    "load_options",
    "parse_unicode",
    "write_unicode",
]
