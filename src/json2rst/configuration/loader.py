"""Render settings loader service."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import RenderSettings

_STRING_KEYS = ("tabular_columns", "table_header", "table_widths")
_KNOWN_KEYS = frozenset(_STRING_KEYS + ("dicom_defined_files",))


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_render_settings(
    config_path: Path | str | None = None, *, tabular_columns: str | None = None
) -> RenderSettings:
    """Build render settings from defaults, an optional YAML file and overrides.

    Args:
      config_path: Optional YAML settings file.
      tabular_columns: Column spec that takes precedence over the file value.

    Returns:
      The merged render settings.

    Raises:
      ConfigurationError: If the file is missing or holds invalid values.
    """
    settings = RenderSettings()
    if config_path is not None:
        settings = dataclasses.replace(settings, **_read_settings_file(Path(config_path)))
    if tabular_columns is not None:
        settings = dataclasses.replace(
            settings,
            tabular_columns=_require_non_empty_string(tabular_columns, "tabular_columns"),
        )
    return settings


def _read_settings_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    overrides: dict[str, Any] = {}
    for key in _STRING_KEYS:
        if key in parsed:
            overrides[key] = _require_non_empty_string(parsed[key], key)
    if "dicom_defined_files" in parsed:
        overrides["dicom_defined_files"] = _normalize_file_names(parsed["dicom_defined_files"])
    return overrides


def _normalize_file_names(value: Any) -> frozenset[str]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("dicom_defined_files must be a list of strings.")
    names = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError("dicom_defined_files entries must be strings.")
        stripped = item.strip()
        if stripped:
            names.append(stripped)
    return frozenset(names)


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
