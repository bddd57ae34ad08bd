"""
Configuration Loader Module
Loads tool settings from YAML with environment variable substitution.

Supports:
- settings.yaml: logging and output settings (optional)
- ${VAR_NAME} and ${VAR_NAME:-default} substitution inside the YAML text
- TWAP_LOG_LEVEL environment variable to override the log level

Values are validated with a pydantic model, so a typo in the file is
reported instead of being ignored.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from twap_from_file.exceptions import TwapError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL_ENV_VAR = "TWAP_LOG_LEVEL"


class ConfigurationError(TwapError):
    """
    Raised when the configuration file is corrupted or contains invalid values.

    Raised explicitly instead of being silently swallowed, so users know
    exactly what went wrong with their config file.
    """
    pass


class TwapSettings(BaseModel):
    """Settings for a TWAP run."""
    log_level: str = "WARNING"
    log_to_file: bool = False
    log_dir: str = "logs"
    precision: int = Field(default=6, ge=1, le=17)  # significant digits in output

    model_config = {"extra": "forbid"}

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value


class ConfigLoader:
    """Load and validate settings from a config directory."""

    SETTINGS_FILE = "settings.yaml"

    def __init__(self, config_dir: Union[str, Path] = "config"):
        self.config_dir = Path(config_dir)
        self.raw: Optional[Dict[str, Any]] = None
        self._settings: Optional[TwapSettings] = None

    @property
    def settings_path(self) -> Path:
        return self.config_dir / self.SETTINGS_FILE

    def load(self) -> TwapSettings:
        """
        Load settings from settings.yaml, falling back to defaults.

        Raises:
            ConfigurationError: If the file is malformed or holds invalid values.
        """
        settings_path = self.settings_path

        if settings_path.exists():
            try:
                with open(settings_path, "r", encoding="utf-8") as f:
                    text = self._substitute_env_vars(f.read())
                self.raw = yaml.safe_load(text) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML syntax in {settings_path}: {e}\n"
                    f"Please fix the file or restore from settings.yaml.example"
                ) from e
            except PermissionError as e:
                raise ConfigurationError(
                    f"Permission denied reading {settings_path}: {e}\n"
                    f"Check file permissions."
                ) from e
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigurationError(
                    f"Can't read {settings_path}: {e}"
                ) from e
            if not isinstance(self.raw, dict):
                raise ConfigurationError(
                    f"Expected a mapping at the top of {settings_path}, "
                    f"got {type(self.raw).__name__}"
                )
        else:
            logger.info(f"No settings.yaml found at {settings_path}. Using defaults.")
            self.raw = {}

        values = dict(self.raw)
        env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if env_level:
            values["log_level"] = env_level

        try:
            self._settings = TwapSettings(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings in {settings_path}: {e}")

        return self._settings

    def _substitute_env_vars(self, text: str) -> str:
        """
        Substitute environment variables in format ${VAR_NAME} or ${VAR_NAME:-default}

        Examples:
            ${ENV} -> value of ENV
            ${ENV:-development} -> value of ENV, or 'development' if not set
        """
        pattern = r'\$\{([^}:]+)(?::[-]([^}]+))?\}'

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replacer, text)

    @property
    def settings(self) -> TwapSettings:
        if self._settings is None:
            self.load()
        return self._settings


def load_settings(config_dir: Union[str, Path] = "config", **overrides: Any) -> TwapSettings:
    """
    Load settings and apply overrides (e.g. from the command line).

    Overrides whose value is None are ignored.
    """
    settings = ConfigLoader(config_dir).load()
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return settings

    try:
        return TwapSettings(**{**settings.model_dump(), **overrides})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings override: {e}")
