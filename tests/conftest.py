import logging

import pytest
import structlog

from flight_patterns.domain.passenger.profiles import (
    BusinessPassenger,
    EconomicPassenger,
    StandardPassenger,
)
from flight_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from configuration environment variables."""
    for name in (
        "FLIGHT_PATTERNS_CONFIG",
        "FLIGHT_PATTERNS_LOG_LEVEL",
        "FLIGHT_PATTERNS_LOG_DESTINATION",
        "FLIGHT_PATTERNS_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test fresh singletons."""
    SingletonRegistry.get_instance().clear()
    yield
    SingletonRegistry.get_instance().clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Remove handlers installed by setup_logging."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def standard():
    return StandardPassenger()


@pytest.fixture
def economic(standard):
    return EconomicPassenger(standard)


@pytest.fixture
def business(standard):
    return BusinessPassenger(standard)


@pytest.fixture
def business_over_economic(economic):
    return BusinessPassenger(economic)
