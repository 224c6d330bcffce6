"""Typer application wiring for the asciimath-unicode CLI."""

from __future__ import annotations

from typing import NoReturn

import typer

from asciimath_unicode.core.exceptions import AsciimathUnicodeError, OutputWriteError
from asciimath_unicode.ui.cli.commands.convert import convert

from .state import debug_enabled, emit_error, emit_traceback


app = typer.Typer(
    help="Convert asciimath expressions into inline Unicode text.",
    context_settings={"help_option_names": ["--help", "-h"]},
)


app.command()(convert)


def _fail(message: str, exc: AsciimathUnicodeError) -> NoReturn:
    if debug_enabled():
        emit_traceback(exc)
    else:
        emit_error(message, exception=exc)
    raise SystemExit(1) from exc


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except OutputWriteError as exc:
        reason = exc.__cause__ if exc.__cause__ is not None else exc
        _fail(f"Could not write the rendered expression: {reason}", exc)
    except AsciimathUnicodeError as exc:
        _fail(str(exc), exc)


__all__ = ["app", "main"]
