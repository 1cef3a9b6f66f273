"""Passenger pricing profiles.

A profile reports the ticket cost, the free baggage allowance and the flight
category of a passenger. ``StandardPassenger`` is the concrete component;
``EconomicPassenger`` and ``BusinessPassenger`` are decorators that wrap any
other profile and derive their values from it. Wraps can be stacked, e.g.::

    BusinessPassenger(EconomicPassenger(StandardPassenger()))

Every layer recomputes from its immediate inner profile on each call and
overrides the category with its own.
"""
from abc import ABC, abstractmethod

from flight_patterns.domain.core.exceptions import ValidationError
from flight_patterns.domain.passenger.value_objects import FlightCategory, ProfileVariant

STANDARD_COST = 100.0  # Dollar
STANDARD_BAGGAGE_ALLOWANCE = 10.0  # KG

ECONOMIC_COST_DIVISOR = 2.0
ECONOMIC_BAGGAGE_FACTOR = 0.0

BUSINESS_COST_FACTOR = 4.0
BUSINESS_BAGGAGE_BONUS = 50.0


class PassengerProfile(ABC):
    """Pricing policy for a flight passenger."""

    def __init__(self, variant: ProfileVariant = ProfileVariant.CUSTOM):
        self._variant = ProfileVariant(variant)

    @property
    def variant(self) -> ProfileVariant:
        """Construction tag used for variant dispatch."""
        return self._variant

    @abstractmethod
    def cost(self) -> float:
        """Ticket cost in dollars."""

    @abstractmethod
    def baggage_allowance(self) -> float:
        """Free baggage allowance in kilograms."""

    @abstractmethod
    def category(self) -> FlightCategory:
        """Reported flight category."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class StandardPassenger(PassengerProfile):
    """Core component with fixed cost and allowance."""

    def __init__(self):
        super().__init__(ProfileVariant.STANDARD)

    def cost(self) -> float:
        return STANDARD_COST

    def baggage_allowance(self) -> float:
        return STANDARD_BAGGAGE_ALLOWANCE

    def category(self) -> FlightCategory:
        return FlightCategory.STANDARD


class PassengerDecorator(PassengerProfile):
    """Base for profiles that wrap another profile."""

    def __init__(self, inner: PassengerProfile, variant: ProfileVariant):
        if not isinstance(inner, PassengerProfile):
            raise ValidationError(
                f"{self.__class__.__name__} must wrap a PassengerProfile, "
                f"got {type(inner).__name__}"
            )
        super().__init__(variant)
        self._inner = inner

    @property
    def inner(self) -> PassengerProfile:
        """The wrapped profile."""
        return self._inner

    def depth(self) -> int:
        """Number of wrap layers including this one."""
        inner = self._inner
        return inner.depth() + 1 if isinstance(inner, PassengerDecorator) else 1

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._inner!r})"


class EconomicPassenger(PassengerDecorator):
    """Half price, no free baggage."""

    def __init__(self, inner: PassengerProfile):
        super().__init__(inner, ProfileVariant.ECONOMIC)

    def cost(self) -> float:
        return self._inner.cost() / ECONOMIC_COST_DIVISOR

    def baggage_allowance(self) -> float:
        # NaN and infinities propagate as NaN
        return self._inner.baggage_allowance() * ECONOMIC_BAGGAGE_FACTOR

    def category(self) -> FlightCategory:
        return FlightCategory.ECONOMIC


class BusinessPassenger(PassengerDecorator):
    """Four times the price, 50 kg on top of the inner allowance."""

    def __init__(self, inner: PassengerProfile):
        super().__init__(inner, ProfileVariant.BUSINESS)

    def cost(self) -> float:
        return self._inner.cost() * BUSINESS_COST_FACTOR

    def baggage_allowance(self) -> float:
        return self._inner.baggage_allowance() + BUSINESS_BAGGAGE_BONUS

    def category(self) -> FlightCategory:
        return FlightCategory.BUSINESS
