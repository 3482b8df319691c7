"""Settings loader.

Reads settings from a JSON file and applies environment overrides. All keys
are optional:

- ``lockfile``: default lockfile path (``pnpm-lock.yaml``)
- ``lang``: output language, ``en`` or ``zh``
- ``logLevel``: stdlib level name (``WARNING``)
- ``logFormat``: ``console`` or ``json``
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .messages import CATALOGUES

DEFAULT_CONFIG_PATH = Path("pnpm-package-check.json")
CONFIG_PATH_ENV_VAR = "PNPM_PACKAGE_CHECK_CONFIG"
LANG_ENV_VAR = "PNPM_PACKAGE_CHECK_LANG"
LOG_LEVEL_ENV_VAR = "PNPM_PACKAGE_CHECK_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "PNPM_PACKAGE_CHECK_LOG_FORMAT"

_LOG_FORMATS = {"console", "json"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    lockfile: str = "pnpm-lock.yaml"
    lang: str = "en"
    log_level: str = "WARNING"
    log_format: str = "console"

    def __post_init__(self) -> None:
        if not self.lockfile:
            raise ConfigError("'lockfile' must be a non-empty string")
        if self.lang not in CATALOGUES:
            known = ", ".join(sorted(CATALOGUES))
            raise ConfigError(f"Unknown language '{self.lang}'. Known languages: {known}")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log level '{self.log_level}'")
        if self.log_format not in _LOG_FORMATS:
            raise ConfigError(f"Invalid log format '{self.log_format}' (console or json)")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating field types."""
        values: dict[str, str] = {}
        for key, attr in (
            ("lockfile", "lockfile"),
            ("lang", "lang"),
            ("logLevel", "log_level"),
            ("logFormat", "log_format"),
        ):
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, str):
                raise ConfigError(f"Setting '{key}' must be a string")
            values[attr] = value
        if "log_level" in values:
            values["log_level"] = values["log_level"].upper()
        return cls(**values)


def _resolve_config_path(path: Path | str | None = None) -> tuple[Path, bool]:
    """Resolve the settings file path and whether it was explicitly requested.

    Priority:
    1. Explicit path argument
    2. PNPM_PACKAGE_CHECK_CONFIG environment variable
    3. pnpm-package-check.json in the working directory
    """
    if path is not None:
        return Path(path), True

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path), True

    return DEFAULT_CONFIG_PATH, False


def _read_settings_file(config_path: Path) -> dict[str, Any]:
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")
    return data


def _apply_env_overrides(settings: Settings) -> Settings:
    overrides: dict[str, str] = {}
    if lang := os.environ.get(LANG_ENV_VAR):
        overrides["lang"] = lang
    if level := os.environ.get(LOG_LEVEL_ENV_VAR):
        overrides["log_level"] = level.upper()
    if fmt := os.environ.get(LOG_FORMAT_ENV_VAR):
        overrides["log_format"] = fmt.lower()
    return replace(settings, **overrides) if overrides else settings


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from a JSON file, then apply environment overrides.

    The default settings file is optional; a file named explicitly (argument
    or environment variable) must exist.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path, explicit = _resolve_config_path(path)

    if config_path.exists():
        settings = Settings.from_dict(_read_settings_file(config_path))
    elif explicit:
        raise ConfigError(f"Configuration file not found: {config_path}")
    else:
        settings = Settings()

    return _apply_env_overrides(settings)
