"""Configuration loading with CLI > ENV > file > defaults precedence."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Mapping

from ose.exceptions import ConfigValidationError

Caster = Callable[[Any], Any]


def _load_file(config_path: Path | str | None) -> dict[str, Any]:
    if config_path is None:
        return {}
    path = Path(config_path)
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            content = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON config {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise ConfigValidationError("pyyaml is required to load YAML config files") from exc
        try:
            content = yaml.safe_load(path.read_text())
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"Invalid YAML config {path}: {exc}") from exc
    else:
        raise ConfigValidationError("Config file must be JSON or YAML")

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigValidationError("Config file must contain a mapping at the top level")
    return content


def _cast(key: str, value: Any, casters: Mapping[str, Caster]) -> Any:
    caster = casters.get(key)
    if caster is None or value is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {key}: {value!r}") from exc


def load_config_with_precedence(
    *,
    config_path: Path | str | None,
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Mapping[str, Caster] | None = None,
) -> dict[str, Any]:
    """Merge configuration sources for the keys named in ``defaults``.

    For each key the first non-None value wins: CLI, then the environment
    variable ``{env_prefix}{KEY}``, then the config file, then the default.
    """
    casters = casters or {}
    file_values = _load_file(config_path)
    merged: dict[str, Any] = {}
    for key, default in defaults.items():
        env_value = os.environ.get(f"{env_prefix}{key.upper()}")
        for candidate in (cli_values.get(key), env_value, file_values.get(key)):
            if candidate is not None:
                merged[key] = _cast(key, candidate, casters)
                break
        else:
            merged[key] = default
    return merged


__all__ = ["load_config_with_precedence"]
