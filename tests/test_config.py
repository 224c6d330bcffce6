from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
import pytest

from asciimath_unicode import ConfigurationError, InlineRenderer, RenderOptions, load_options
from asciimath_unicode.core.config import options_from_mapping
from asciimath_unicode.core.emoji import SkinTone


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "options.yml"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults() -> None:
    options = RenderOptions()

    assert options.strip_brackets is True
    assert options.vulgar_fracs is True
    assert options.script_fracs is True
    assert options.skin_tone is SkinTone.DEFAULT


def test_load_yaml(tmp_path: Path) -> None:
    path = _write(tmp_path, "strip_brackets: false\nskin_tone: dark\n")

    options = load_options(path)

    assert options.strip_brackets is False
    assert options.vulgar_fracs is True
    assert options.skin_tone is SkinTone.DARK


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    assert load_options(_write(tmp_path, "")) == RenderOptions()


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Invalid renderer options"):
        load_options(_write(tmp_path, "strip: false\n"))


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_options(_write(tmp_path, "strip_brackets: [\n"))


def test_non_mapping_payload(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="must be a mapping"):
        load_options(_write(tmp_path, "- strip_brackets\n"))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Failed to read"):
        load_options(tmp_path / "missing.yml")


def test_options_are_frozen() -> None:
    options = RenderOptions()

    with pytest.raises(ValidationError):
        options.strip_brackets = False  # type: ignore[misc]


def test_renderer_accepts_loaded_options() -> None:
    options = options_from_mapping({"vulgar_fracs": False})
    renderer = InlineRenderer(**options.model_dump())

    assert str(renderer.render("1/2")) == "¹⁄₂"
