"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from asciimath_unicode.core.emoji import SkinTone


INPUTS_PANEL = "Input Handling"
RENDERING_PANEL = "Rendering"
DIAGNOSTICS_PANEL = "Diagnostics"

ExpressionArgument = Annotated[
    list[str] | None,
    typer.Argument(
        metavar="EXPRESSION...",
        help=(
            "Asciimath expression to convert; several arguments are joined with spaces. "
            "Reads standard input when omitted."
        ),
        show_default=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        metavar="PATH",
        help="YAML file providing renderer options. Command-line flags take precedence.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

NoStripBracketsOption = Annotated[
    bool,
    typer.Option(
        "--no-strip-brackets",
        help="Keep the brackets of grouped operands even when a compact form needs them gone.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

NoVulgarFracsOption = Annotated[
    bool,
    typer.Option(
        "--no-vulgar-fracs",
        help="Do not emit precomposed vulgar fractions such as ½ or ⅟.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

NoScriptFracsOption = Annotated[
    bool,
    typer.Option(
        "--no-script-fracs",
        help="Do not render fractions with superscript numerators and subscript denominators.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

SkinToneOption = Annotated[
    SkinTone | None,
    typer.Option(
        "--skin-tone",
        help="Skin tone applied to emoji shortcodes that support one.",
        case_sensitive=False,
        show_default=False,
        rich_help_panel=RENDERING_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show a full traceback when conversion fails.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "DIAGNOSTICS_PANEL",
    "INPUTS_PANEL",
    "RENDERING_PANEL",
    "ConfigOption",
    "DebugOption",
    "ExpressionArgument",
    "NoScriptFracsOption",
    "NoStripBracketsOption",
    "NoVulgarFracsOption",
    "SkinToneOption",
    "VerboseOption",
]
