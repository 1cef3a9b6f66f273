"""
Profile builder backed by a registry of decorator classes.

Decorators are registered under a wrap name and applied on top of the
standard profile in the order given:

    @register_wrap("premium")
    class PremiumPassenger(PassengerDecorator):
        ...

    build_profile(["economic", "premium"])
    # PremiumPassenger(EconomicPassenger(StandardPassenger()))
"""
from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Type, TypeVar

from flight_patterns.domain.core.exceptions import ValidationError
from flight_patterns.domain.passenger.profiles import (
    BusinessPassenger,
    EconomicPassenger,
    PassengerDecorator,
    PassengerProfile,
    StandardPassenger,
)

TDecorator = TypeVar("TDecorator", bound=PassengerDecorator)

_wrap_registry: Dict[str, Type[PassengerDecorator]] = {}


class UnknownWrapError(ValidationError):
    """Raised when a wrap name is not registered."""
    def __init__(self, wrap_name: str, available: List[str]):
        super().__init__(
            f"Unknown wrap '{wrap_name}'. Available wraps: {', '.join(available)}",
            {"wrap": wrap_name, "available": available},
        )
        self.wrap_name = wrap_name
        self.available = available


def register_wrap(name: str) -> Callable[[Type[TDecorator]], Type[TDecorator]]:
    """
    Class decorator registering a profile decorator under ``name``.

    Args:
        name: Case-insensitive wrap name

    Returns:
        Decorator returning the class unchanged
    """
    def decorator(wrap_class: Type[TDecorator]) -> Type[TDecorator]:
        if not (isinstance(wrap_class, type) and issubclass(wrap_class, PassengerDecorator)):
            raise ValidationError(f"{wrap_class!r} is not a PassengerDecorator subclass")
        _wrap_registry[name.strip().lower()] = wrap_class
        return wrap_class

    return decorator


def unregister_wrap(name: str) -> None:
    """Remove a wrap registration if present."""
    _wrap_registry.pop(name.strip().lower(), None)


def get_registered_wraps() -> List[str]:
    """Names of all registered wraps, sorted."""
    return sorted(_wrap_registry)


def get_wrap_class(name: str) -> Type[PassengerDecorator]:
    """Get the decorator class registered under ``name``."""
    key = name.strip().lower()
    if key not in _wrap_registry:
        raise UnknownWrapError(name, get_registered_wraps())
    return _wrap_registry[key]


def build_profile(wraps: Sequence[str] = ()) -> PassengerProfile:
    """Build a standard profile wrapped by ``wraps``, innermost first."""
    profile: PassengerProfile = StandardPassenger()
    for name in wraps:
        profile = get_wrap_class(name)(profile)
    return profile


register_wrap("economic")(EconomicPassenger)
register_wrap("business")(BusinessPassenger)
