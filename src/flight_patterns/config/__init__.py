"""Configuration package.

The manager lives in ``flight_patterns.config.manager`` and is imported from
there directly, since it depends on infrastructure that itself uses these
schemas.
"""

from flight_patterns.config.schemas import (
    AppConfig,
    DemoConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    validate_config,
)

__all__ = [
    "AppConfig",
    "DemoConfig",
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
    "validate_config",
]
