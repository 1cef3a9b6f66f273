"""Configuration schemas package."""

from .app_schema import AppConfig, DemoConfig, validate_config
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Passenger command defaults
    "DemoConfig",
    # Logging configuration
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
]
