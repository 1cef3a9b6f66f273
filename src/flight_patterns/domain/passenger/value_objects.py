# src/flight_patterns/domain/passenger/value_objects.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from flight_patterns.domain.core.exceptions import ValidationError

if TYPE_CHECKING:
    from flight_patterns.domain.passenger.profiles import PassengerProfile


class FlightCategory(str, Enum):
    """Passenger tier reported by a pricing profile."""
    ECONOMIC = "economic"
    STANDARD = "standard"
    BUSINESS = "business"

    @classmethod
    def validate(cls, value: str) -> None:
        if value not in [e.value for e in cls]:
            raise ValidationError(f"Invalid flight category: {value}")


class ProfileVariant(str, Enum):
    """Construction path of a profile, fixed when the profile is built."""
    STANDARD = "standard"
    ECONOMIC = "economic"
    BUSINESS = "business"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Passenger:
    """A named passenger travelling under a pricing profile."""
    name: str
    profile: PassengerProfile

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Passenger name must be a non-empty string")

    def __str__(self) -> str:
        return f"{self.name} ({self.profile.category().value})"
