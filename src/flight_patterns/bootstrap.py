"""Application bootstrap: configuration, logging and services."""
from typing import Optional

from flight_patterns.application.friends.service import FriendsAPI
from flight_patterns.application.passenger.service import PassengerQuoteService
from flight_patterns.config.manager import ConfigurationManager, get_config_manager
from flight_patterns.config.schemas import AppConfig, LoggingConfig
from flight_patterns.infrastructure.logging.logger import get_logger, setup_logging


class Application:
    """Wires configuration into the application services."""

    def __init__(self, config_manager: ConfigurationManager):
        self._config_manager = config_manager
        self._quote_service: Optional[PassengerQuoteService] = None

    @property
    def config(self) -> AppConfig:
        return self._config_manager.app_config

    def get_quote_service(self) -> PassengerQuoteService:
        if self._quote_service is None:
            self._quote_service = PassengerQuoteService(self.config.demo)
        return self._quote_service

    def get_friends_api(self) -> FriendsAPI:
        return FriendsAPI.shared()


def create_application(config_file: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """
    Create the application and configure logging.

    Args:
        config_file: Optional path to a JSON configuration file
        log_level: Optional log level overriding the configured one

    Returns:
        Initialized application

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    config_manager = get_config_manager(config_file)
    logging_config = config_manager.get_typed(LoggingConfig)
    if log_level:
        logging_config = LoggingConfig(**{**logging_config.model_dump(), "level": log_level})
    setup_logging(logging_config)

    get_logger(__name__).debug("Application created", environment=config_manager.app_config.environment)
    return Application(config_manager)
