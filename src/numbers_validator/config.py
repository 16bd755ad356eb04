"""Configuration loader for the numbers-validator CLI.

Reads settings from a JSON file (default: ``settings.json`` in the working
directory) and validates the structure. All fields are optional:
``output_format`` ("json" or "markdown"), ``fail_on_error`` (bool) and
``log_level`` (a standard logging level name).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any


DEFAULT_CONFIG_PATH = Path("settings.json")
CONFIG_PATH_ENV_VAR = "NUMBERS_VALIDATOR_CONFIG"

OUTPUT_FORMATS = ("json", "markdown")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    output_format: str = "json"
    fail_on_error: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating each field."""
        unknown = sorted(set(data) - {"output_format", "fail_on_error", "log_level"})
        if unknown:
            raise ConfigError(f"Unknown configuration field(s): {', '.join(unknown)}")

        output_format = data.get("output_format", "json")
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid 'output_format' {output_format!r} (must be one of: "
                f"{', '.join(OUTPUT_FORMATS)})"
            )

        fail_on_error = data.get("fail_on_error", True)
        if not isinstance(fail_on_error, bool):
            raise ConfigError("Invalid 'fail_on_error' field (must be boolean)")

        log_level = data.get("log_level", "WARNING")
        if not isinstance(log_level, str) or log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"Invalid 'log_level' {log_level!r}")

        return cls(
            output_format=output_format,
            fail_on_error=fail_on_error,
            log_level=log_level.upper(),
        )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _resolve_config_path(path: Path | str | None = None) -> tuple[Path, bool]:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. NUMBERS_VALIDATOR_CONFIG environment variable
    3. Default path (settings.json in the working directory)

    The flag is True when the path was requested explicitly and so must exist.
    """
    if path is not None:
        return Path(path), True

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path), True

    return DEFAULT_CONFIG_PATH, False


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Args:
        path: Optional path to the config file. If not provided, uses the
            NUMBERS_VALIDATOR_CONFIG env var or falls back to settings.json.

    Returns:
        A Settings object. Defaults are returned when no file was requested
        and the default file does not exist.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path, required = _resolve_config_path(path)

    if not config_path.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_path}")
        return Settings()

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

    return Settings.from_dict(data)
