"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from flight_patterns.config.schemas import AppConfig, DemoConfig, LoggingConfig, validate_config
from flight_patterns.domain.core.exceptions import ConfigurationError
from flight_patterns.infrastructure.logging.logger import get_logger
from flight_patterns.infrastructure.patterns.singleton_access import get_singleton

T = TypeVar("T")
logger = get_logger(__name__)

CONFIG_FILE_ENV = "FLIGHT_PATTERNS_CONFIG"

# Environment variable -> (section, key); section None means top level
ENVIRONMENT_OVERRIDES = {
    "FLIGHT_PATTERNS_LOG_LEVEL": ("logging", "level"),
    "FLIGHT_PATTERNS_LOG_DESTINATION": ("logging", "destination"),
    "FLIGHT_PATTERNS_ENVIRONMENT": (None, "environment"),
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is loaded lazily from a JSON file (explicit path or the
    ``FLIGHT_PATTERNS_CONFIG`` environment variable), then environment
    overrides are applied and the result is validated against ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file or os.environ.get(CONFIG_FILE_ENV)

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data = self._load_file(self.config_file) if self.config_file else {}
        config_data = self._apply_environment_overrides(config_data)
        self._raw_config = config_data

        app_config = validate_config(config_data)
        logger.debug(
            "Configuration loaded",
            config_file=self.config_file,
            environment=app_config.environment,
        )
        return app_config

    @staticmethod
    def _load_file(path: str) -> Dict[str, Any]:
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return data

    @staticmethod
    def _apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``config_data`` with environment overrides applied."""
        result = copy.deepcopy(config_data)
        for env_var, (section, key) in ENVIRONMENT_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            if section is None:
                result[key] = value
            else:
                target = result.setdefault(section, {})
                if not isinstance(target, dict):
                    raise ConfigurationError(f"Configuration section '{section}' must be an object")
                target[key] = value
        return result

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        type_mapping = {
            AppConfig: lambda: self.app_config,
            LoggingConfig: lambda: self.app_config.logging,
            DemoConfig: lambda: self.app_config.demo,
        }
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return type_mapping[config_type]()

    def get_raw_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary after overrides."""
        # Ensure the configuration has been loaded
        self.app_config
        return copy.deepcopy(self._raw_config or {})

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None
            self._raw_config = None


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the singleton configuration manager.

    ``config_file`` is only honoured when the manager is created.
    """
    return get_singleton(ConfigurationManager, config_file)
