"""Standard singleton access functions."""

from typing import Any, Type, TypeVar

from flight_patterns.infrastructure.logging.logger import get_logger
from flight_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    This function provides a consistent way to access singleton instances
    throughout the application. It uses the SingletonRegistry to ensure
    that only one instance of each singleton class is created and reused.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    registry = SingletonRegistry.get_instance()
    if singleton_class not in registry.get_all():
        get_logger(__name__).debug(
            "Creating singleton instance", singleton=singleton_class.__name__
        )
    return registry.get(singleton_class, *args, **kwargs)
