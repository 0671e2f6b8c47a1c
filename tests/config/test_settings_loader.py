from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from errormatch.config import DEFAULT_SETTINGS, load_settings


def _write_yaml(path: Path, data: object) -> None:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def test_load_settings_from_dir(tmp_path: Path) -> None:
    _write_yaml(tmp_path / "errormatch.yaml", {"equality_fallback": "identity"})

    settings = load_settings(tmp_path)

    assert settings.equality_fallback == "identity"
    assert settings.omit_builtins_module is True


def test_load_settings_unwraps_section(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    _write_yaml(path, {"errormatch": {"max_description_length": 40}})

    assert load_settings(path).max_description_length == 40


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "errormatch.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "errormatch.yaml"
    path.write_text("equality_fallback: [unclosed", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_settings(path)


def test_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "errormatch.yaml"
    _write_yaml(path, ["a", "b"])

    with pytest.raises(ValueError, match="Expected a YAML mapping"):
        load_settings(path)


def test_unknown_keys_rejected(tmp_path: Path) -> None:
    path = tmp_path / "errormatch.yaml"
    _write_yaml(path, {"retries": 3})

    with pytest.raises(ValidationError):
        load_settings(path)


def test_settings_are_immutable() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_SETTINGS.omit_builtins_module = False  # type: ignore[misc]
