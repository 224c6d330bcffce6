"""Diagnostics state for the single `asciimath-unicode` command."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text
from rich.traceback import Traceback

from asciimath_unicode.core.exceptions import exception_messages


_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


@dataclass(slots=True)
class CLIState:
    """Verbosity and traceback settings of the running command."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def err_console(self) -> Console:
        """Return a stderr console, rebuilt when ``sys.stderr`` was swapped."""
        if self._err_console is None or self._err_console.file is not sys.stderr:
            self._err_console = Console(file=sys.stderr, highlight=False)
        return self._err_console

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[min(self.verbosity, len(_LOG_LEVELS) - 1)]


_STATE_VAR: ContextVar[CLIState | None] = ContextVar("asciimath_unicode_cli_state", default=None)


def get_cli_state() -> CLIState:
    """Return the state of the running command, creating a default one."""
    state = _STATE_VAR.get()
    if state is None:
        state = CLIState()
        _STATE_VAR.set(state)
    return state


def set_cli_state(*, verbosity: int = 0, debug: bool = False) -> CLIState:
    """Install fresh state for a command invocation."""
    state = CLIState(verbosity=max(0, verbosity), show_tracebacks=debug)
    _STATE_VAR.set(state)
    return state


def configure_logging(state: CLIState) -> None:
    """Route library logging to stderr at the state's verbosity."""
    handler = RichHandler(
        console=state.err_console,
        show_path=state.verbosity >= 2,
        rich_tracebacks=state.show_tracebacks,
    )
    logger = logging.getLogger("asciimath_unicode")
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(state.log_level)


def _report(level: str, style: str, message: str, exception: BaseException | None) -> None:
    state = get_cli_state()
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))
    if exception is not None and state.verbosity >= 1:
        causes = exception_messages(exception)[1:]
        text.append(f"\n{type(exception).__name__}", style=style)
        for cause in causes:
            text.append(f"\n  caused by: {cause}", style=style)
    state.err_console.print(text)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    """Print a warning to stderr."""
    _report("warning", "yellow", message, exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    """Print an error to stderr, with its type and causes when verbose."""
    _report("error", "red", message, exception)


def emit_traceback(exception: BaseException) -> None:
    """Print a rich traceback of ``exception`` to stderr."""
    state = get_cli_state()
    state.err_console.print(
        Traceback.from_exception(
            type(exception),
            exception,
            exception.__traceback__,
            show_locals=state.verbosity >= 2,
        )
    )


def debug_enabled() -> bool:
    """Return whether full tracebacks were requested."""
    return get_cli_state().show_tracebacks


__all__ = [
    "CLIState",
    "configure_logging",
    "debug_enabled",
    "emit_error",
    "emit_traceback",
    "emit_warning",
    "get_cli_state",
    "set_cli_state",
]
