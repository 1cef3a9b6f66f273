"""Logging infrastructure package."""

from flight_patterns.infrastructure.logging.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
