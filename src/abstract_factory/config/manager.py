"""Unified configuration management for the application."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from abstract_factory.config.schemas import AppConfig
from abstract_factory.config.utils import expand_env_vars
from abstract_factory.domain.base.exceptions import ConfigurationError

# Environment variables that override file and default values
ENV_OVERRIDES = {
    "AF_LOG_LEVEL": ("logging", "level"),
    "AF_LOG_DESTINATION": ("logging", "destination"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is resolved in order of increasing precedence:
    - schema defaults
    - optional JSON configuration file
    - environment variable overrides

    ``${VAR:default}`` placeholders in string values are expanded before
    the result is validated against AppConfig.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._app_config: Optional[AppConfig] = None

    def get_app_config(self) -> AppConfig:
        """Get the validated application configuration."""
        if self._app_config is None:
            self._app_config = self._load()
        return self._app_config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level configuration value by key."""
        return getattr(self.get_app_config(), key, default)

    def _load(self) -> AppConfig:
        raw = AppConfig().model_dump()
        if self._config_file:
            _deep_merge(raw, self._read_file(self._config_file))
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            # A non-object section is left as written for validation to reject
            if value and isinstance(raw.get(section), dict):
                raw[section][key] = value
        try:
            return AppConfig.model_validate(expand_env_vars(raw))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e

    @staticmethod
    def _read_file(config_file: str) -> Dict[str, Any]:
        path = Path(config_file)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"Configuration file {path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into base in place, descending into nested dictionaries."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given file."""
    return ConfigurationManager(config_file)
