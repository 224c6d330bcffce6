from typer.testing import CliRunner

import asciimath_unicode
from asciimath_unicode.ui.cli import app


def test_get_version_matches_public_api() -> None:
    assert asciimath_unicode.get_version() == asciimath_unicode.__version__
    assert isinstance(asciimath_unicode.__version__, str)


def test_cli_version_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0, result.stdout
    assert result.stdout.strip() == asciimath_unicode.get_version()
