"""Read-only settings loader.

Settings come from an optional YAML file; a missing file means defaults.
The dashboard never writes settings back.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ktwins.constants.defaults import CONFIG_ENV_VAR, CONFIG_PATH_DEFAULT
from ktwins.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]


class ConfigManager:
    """Locate and parse the settings file."""

    @staticmethod
    def config_path() -> Path:
        """Return the settings path, honouring the environment override."""
        raw_path = os.environ.get(CONFIG_ENV_VAR, "").strip() or CONFIG_PATH_DEFAULT
        return Path(raw_path).expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings from YAML.

        Args:
            path: Explicit settings file; defaults to ``config_path()``.

        Returns:
            Parsed settings, or defaults when the file does not exist.

        Raises:
            ConfigLoadError: If the file cannot be read, parsed or validated.
        """
        settings_path = path if path is not None else cls.config_path()
        if not settings_path.exists():
            logger.debug("No settings file at %s, using defaults", settings_path)
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read {settings_path}: {exc}") from exc

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(
                f"Settings file {settings_path} must contain a mapping"
            )

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc
