from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import MatcherSettings

SETTINGS_FILENAME = "errormatch.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_settings(path: Path) -> MatcherSettings:
    """Load matcher settings from a YAML file, or from ``errormatch.yaml`` in a directory."""
    settings_path = path
    if settings_path.is_dir():
        settings_path = settings_path / SETTINGS_FILENAME
    if not settings_path.is_file():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")
    data = _load_yaml(settings_path)
    section = data.get("errormatch", data)
    if not isinstance(section, dict):
        raise ValueError(f"Expected 'errormatch' to be a mapping in {settings_path}")
    return MatcherSettings.model_validate(section)
