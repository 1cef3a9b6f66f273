"""Passenger pricing domain: profiles, decorators, eligibility and pricing."""

from .value_objects import FlightCategory, Passenger, ProfileVariant
from .profiles import (
    BusinessPassenger,
    EconomicPassenger,
    PassengerDecorator,
    PassengerProfile,
    StandardPassenger,
)
from .eligibility import PassengerAdapter, can_buy_extra_baggage
from .pricing import FlightFactory, extra_baggage_cost

__all__ = [
    # Value objects
    "FlightCategory",
    "ProfileVariant",
    "Passenger",
    # Profiles
    "PassengerProfile",
    "PassengerDecorator",
    "StandardPassenger",
    "EconomicPassenger",
    "BusinessPassenger",
    # Adapter
    "PassengerAdapter",
    "can_buy_extra_baggage",
    # Factory
    "FlightFactory",
    "extra_baggage_cost",
]
