"""
Configuration for twap_from_file.

Settings live in an optional YAML file (config/settings.yaml) and are
validated into a pydantic model:

    from twap_from_file.config import load_settings
    settings = load_settings("config", log_level="DEBUG")
    settings.precision  # 6

See settings.yaml.example for every key.
"""

from twap_from_file.config.loader import (
    ConfigLoader,
    ConfigurationError,
    LOG_LEVEL_ENV_VAR,
    LOG_LEVELS,
    TwapSettings,
    load_settings,
)

__all__ = [
    'ConfigLoader',
    'ConfigurationError',
    'LOG_LEVEL_ENV_VAR',
    'LOG_LEVELS',
    'TwapSettings',
    'load_settings',
]
