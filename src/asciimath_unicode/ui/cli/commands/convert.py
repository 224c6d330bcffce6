"""Implementation of the `asciimath-unicode` convert command."""

from __future__ import annotations

import sys
from typing import IO, Annotated

import typer

from asciimath_unicode.core.config import RenderOptions, load_options
from asciimath_unicode.core.emoji import SkinTone
from asciimath_unicode.core.exceptions import ConfigurationError, OutputWriteError
from asciimath_unicode.core.renderer import InlineRenderer, RenderedUnicode
from asciimath_unicode.version import get_version

from .._options import (
    DIAGNOSTICS_PANEL,
    ConfigOption,
    DebugOption,
    ExpressionArgument,
    NoScriptFracsOption,
    NoStripBracketsOption,
    NoVulgarFracsOption,
    SkinToneOption,
    VerboseOption,
)
from ..state import configure_logging, emit_error, emit_warning, set_cli_state


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


def _read_stdin_expression() -> str | None:
    """Return piped stdin content, or ``None`` for an interactive terminal."""
    stream = sys.stdin
    if stream is None or stream.closed:
        return None
    try:
        if stream.isatty():
            return None
    except (AttributeError, ValueError):
        return None
    return stream.read()


def _stream(rendered: RenderedUnicode, sink: IO[str]) -> None:
    """Write ``rendered`` followed by a newline, then flush ``sink``."""
    rendered.write_to(sink)
    try:
        sink.write("\n")
        sink.flush()
    except OSError as exc:
        raise OutputWriteError(f"Failed to write rendered output: {exc}") from exc


def build_renderer(
    base: RenderOptions,
    *,
    no_strip_brackets: bool = False,
    no_vulgar_fracs: bool = False,
    no_script_fracs: bool = False,
    skin_tone: SkinTone | None = None,
) -> InlineRenderer:
    """Merge command-line flags over ``base`` into a renderer."""
    values = base.model_dump()
    if no_strip_brackets:
        values["strip_brackets"] = False
    if no_vulgar_fracs:
        values["vulgar_fracs"] = False
    if no_script_fracs:
        values["script_fracs"] = False
    if skin_tone is not None:
        values["skin_tone"] = skin_tone
    return InlineRenderer(**values)


def convert(
    expression: ExpressionArgument = None,
    config: ConfigOption = None,
    no_strip_brackets: NoStripBracketsOption = False,
    no_vulgar_fracs: NoVulgarFracsOption = False,
    no_script_fracs: NoScriptFracsOption = False,
    skin_tone: SkinToneOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the installed version and exit.",
            callback=_version_callback,
            is_eager=True,
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = False,
) -> None:
    """Convert asciimath into a single line of Unicode text."""

    state = set_cli_state(verbosity=verbose, debug=debug)
    configure_logging(state)

    try:
        base = load_options(config) if config is not None else RenderOptions()
    except ConfigurationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    renderer = build_renderer(
        base,
        no_strip_brackets=no_strip_brackets,
        no_vulgar_fracs=no_vulgar_fracs,
        no_script_fracs=no_script_fracs,
        skin_tone=skin_tone,
    )

    source = " ".join(expression) if expression else _read_stdin_expression()
    if source is None or not source.strip():
        emit_warning("No asciimath expression provided.")
        raise typer.Exit(code=1)

    _stream(renderer.render(source), sys.stdout)


__all__ = ["build_renderer", "convert"]
