"""Configuration for dotnet discovery.

Settings come from built-in defaults, an optional YAML file, and the
``DOTNET_LOCATOR_VERBOSE`` environment variable, in that order.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import yaml

VERBOSE_ENV_VAR = "DOTNET_LOCATOR_VERBOSE"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when a config file is unreadable or malformed."""


@dataclass
class LocatorConfig:
    """Knobs for executable discovery and SDK listing."""

    command: str = "dotnet"
    root_env_var: str = "DOTNET_ROOT"
    list_sdks_arg: str = "--list-sdks"
    ui_language_env_var: str = "DOTNET_CLI_UI_LANGUAGE"
    ui_language: str = "en-US"
    verbose: bool = False
    executable: Optional[str] = None

    def replace(self, **changes: Any) -> LocatorConfig:
        return dataclasses.replace(self, **changes)


def _field_names() -> set[str]:
    return {f.name for f in dataclasses.fields(LocatorConfig)}


def config_from_mapping(data: Mapping[str, Any], base: Optional[LocatorConfig] = None) -> LocatorConfig:
    """Overlay *data* on *base* (defaults if omitted).

    Raises:
        ConfigError: On unknown keys or wrongly typed values.
    """
    base = base or LocatorConfig()
    bad_keys = sorted(repr(k) for k in data if not isinstance(k, str))
    if bad_keys:
        raise ConfigError(f"Config keys must be strings: {', '.join(bad_keys)}")
    unknown = sorted(set(data) - _field_names())
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    changes: dict[str, Any] = {}
    for key, value in data.items():
        if key == "verbose":
            if not isinstance(value, bool):
                raise ConfigError(f"'verbose' must be a boolean, got {value!r}")
        elif key == "executable":
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"'executable' must be a string, got {value!r}")
        elif not isinstance(value, str) or not value:
            raise ConfigError(f"'{key}' must be a non-empty string, got {value!r}")
        changes[key] = value
    return base.replace(**changes)


def load_config_file(path: str, base: Optional[LocatorConfig] = None) -> LocatorConfig:
    """Read a YAML config file and overlay it on *base*."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return base or LocatorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file (expected mapping): {path}")
    return config_from_mapping(data, base)


def apply_env_overrides(config: LocatorConfig, environ: Optional[Mapping[str, str]] = None) -> LocatorConfig:
    environ = os.environ if environ is None else environ
    raw = (environ.get(VERBOSE_ENV_VAR) or "").strip().lower()
    if raw in _TRUTHY:
        return config.replace(verbose=True)
    return config


def load_config(
    path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LocatorConfig:
    """Build the effective config: defaults, then *path*, then environment.

    Only an explicitly given *path* is read.
    """
    config = LocatorConfig()
    if path is not None:
        config = load_config_file(path, config)
    return apply_env_overrides(config, environ)
