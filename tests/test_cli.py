from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path
import sys

from click.testing import Result
import pytest
from typer.testing import CliRunner

from asciimath_unicode.core import symbols
from asciimath_unicode.core.exceptions import OutputWriteError, UnknownSymbolError
from asciimath_unicode.core.renderer import RenderedUnicode
from asciimath_unicode.ui.cli import app, main


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("asciimath_unicode")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def _invoke(*args: str, stdin: str | None = None) -> Result:
    return CliRunner().invoke(app, list(args), input=stdin)


def test_converts_argument() -> None:
    result = _invoke("1/2")

    assert result.exit_code == 0, result.output
    assert result.stdout == "½\n"


def test_joins_arguments_with_spaces() -> None:
    result = _invoke("sum_(i=1)^n", "i^3")

    assert result.exit_code == 0, result.output
    assert result.stdout == "∑₍ᵢ₌₁₎ⁿi³\n"


def test_reads_standard_input() -> None:
    result = _invoke(stdin="root 3 x\n")

    assert result.exit_code == 0, result.output
    assert result.stdout == "∛x\n"


def test_rendering_flags() -> None:
    result = _invoke("--no-vulgar-fracs", "1/2")
    assert result.stdout == "¹⁄₂\n"

    result = _invoke("--no-strip-brackets", "--no-vulgar-fracs", "--no-script-fracs", "1/x")
    assert result.exit_code == 0, result.output
    assert result.stdout == "1/x\n"


def test_skin_tone_option() -> None:
    result = _invoke("--skin-tone", "dark", ":thumbs_up:")

    assert result.exit_code == 0, result.output
    assert result.stdout == "\U0001f44d\U0001f3ff\n"


def test_config_file_with_flag_override(tmp_path: Path) -> None:
    config = tmp_path / "options.yml"
    config.write_text("vulgar_fracs: false\nskin_tone: light\n", encoding="utf-8")

    result = _invoke("--config", str(config), "1/2")
    assert result.stdout == "¹⁄₂\n"

    result = _invoke("-c", str(config), "--skin-tone", "dark", ":thumbs_up:")
    assert result.stdout == "\U0001f44d\U0001f3ff\n"


def test_invalid_config_exits(tmp_path: Path) -> None:
    config = tmp_path / "options.yml"
    config.write_text("unknown: 1\n", encoding="utf-8")

    result = _invoke("--config", str(config), "x")

    assert result.exit_code == 1
    assert "Invalid renderer options" in result.output


def test_missing_config_is_rejected_by_cli(tmp_path: Path) -> None:
    result = _invoke("--config", str(tmp_path / "missing.yml"), "x")

    assert result.exit_code == 2


def test_empty_input_warns() -> None:
    result = _invoke(stdin="   ")

    assert result.exit_code == 1
    assert "No asciimath expression provided." in result.output


def test_verbosity_sets_log_level() -> None:
    result = _invoke("-vv", "x")

    assert result.exit_code == 0, result.output
    assert logging.getLogger("asciimath_unicode").level == logging.DEBUG


def test_help_lists_panels() -> None:
    result = _invoke("--help")

    assert result.exit_code == 0
    assert "--skin-tone" in result.stdout
    assert "Rendering" in result.stdout


def _run_main(monkeypatch: pytest.MonkeyPatch, *args: str) -> int | str | None:
    monkeypatch.setattr(sys, "argv", ["asciimath-unicode", *args])
    with pytest.raises(SystemExit) as excinfo:
        main()
    return excinfo.value.code


def test_render_errors_propagate_from_command(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delitem(symbols.SYMBOLS, "alpha")

    result = _invoke("alpha")

    assert result.exit_code == 1
    assert isinstance(result.exception, UnknownSymbolError)


def test_main_writes_rendered_expression(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run_main(monkeypatch, "x_1") == 0
    assert capsys.readouterr().out == "x₁\n"


def test_main_reports_render_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delitem(symbols.SYMBOLS, "alpha")

    assert _run_main(monkeypatch, "alpha") == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert 'error: unmapped symbol "alpha"' in captured.err
    assert "Traceback" not in captured.err


def test_main_debug_prints_traceback(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delitem(symbols.SYMBOLS, "alpha")

    assert _run_main(monkeypatch, "--debug", "alpha") == 1

    err = capsys.readouterr().err
    assert "Traceback" in err
    assert "UnknownSymbolError" in err


def test_main_reports_write_failures(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def broken_pipe(self: RenderedUnicode, sink: object) -> None:
        try:
            raise BrokenPipeError(32, "Broken pipe")
        except BrokenPipeError as exc:
            raise OutputWriteError(f"Failed to write rendered output: {exc}") from exc

    monkeypatch.setattr(RenderedUnicode, "write_to", broken_pipe)

    assert _run_main(monkeypatch, "x") == 1

    err = capsys.readouterr().err
    assert "Could not write the rendered expression" in err
    assert "Broken pipe" in err
