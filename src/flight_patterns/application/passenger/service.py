"""Passenger quote application service."""
from typing import List, Optional, Sequence

from flight_patterns.application.dto.base import BaseDTO
from flight_patterns.application.passenger.builder import build_profile
from flight_patterns.config.schemas import DemoConfig
from flight_patterns.domain.passenger.eligibility import PassengerAdapter
from flight_patterns.domain.passenger.pricing import FlightFactory
from flight_patterns.domain.passenger.profiles import (
    BusinessPassenger,
    EconomicPassenger,
    PassengerProfile,
    StandardPassenger,
)
from flight_patterns.infrastructure.logging.logger import get_logger


class ProfileSummaryDTO(BaseDTO):
    """Category, cost and allowance of a single profile."""
    profile: str
    category: str
    variant: str
    cost: float
    baggage_allowance: float

    @classmethod
    def from_profile(cls, profile: PassengerProfile) -> "ProfileSummaryDTO":
        return cls(
            profile=repr(profile),
            category=cls.serialize_enum(profile.category()),
            variant=cls.serialize_enum(profile.variant),
            cost=profile.cost(),
            baggage_allowance=profile.baggage_allowance(),
        )


class PassengerQuoteDTO(ProfileSummaryDTO):
    """Full quote for a named passenger."""
    name: str
    wraps: List[str]
    extra_baggage_kg: float
    can_buy_extra_baggage: bool
    extra_baggage_cost: float


def demo_profiles() -> List[PassengerProfile]:
    """Standard, economic and business-over-economic profiles."""
    standard = StandardPassenger()
    economic = EconomicPassenger(standard)
    # Double decorators
    business = BusinessPassenger(economic)
    return [standard, economic, business]


class PassengerQuoteService:
    """Builds profiles and computes quotes for passengers."""

    def __init__(self, demo_config: Optional[DemoConfig] = None):
        self._demo_config = demo_config or DemoConfig()
        self._logger = get_logger(__name__)

    def list_demo_profiles(self) -> List[ProfileSummaryDTO]:
        return [ProfileSummaryDTO.from_profile(profile) for profile in demo_profiles()]

    def quote(
        self,
        name: Optional[str] = None,
        wraps: Optional[Sequence[str]] = None,
        extra_kg: Optional[float] = None,
    ) -> PassengerQuoteDTO:
        """
        Quote a passenger.

        Omitted arguments fall back to the demo configuration.

        Args:
            name: Passenger name
            wraps: Wrap names applied to the standard profile, innermost first
            extra_kg: Extra baggage weight in kilograms

        Returns:
            Quote DTO

        Raises:
            UnknownWrapError: If a wrap name is not registered
        """
        name = name if name is not None else self._demo_config.passenger_name
        wraps = list(wraps) if wraps is not None else list(self._demo_config.wraps)
        extra_kg = extra_kg if extra_kg is not None else self._demo_config.extra_baggage_kg

        profile = build_profile(wraps)
        adapter = PassengerAdapter(name, profile)
        summary = ProfileSummaryDTO.from_profile(profile)

        quote = PassengerQuoteDTO(
            **summary.to_dict(),
            name=adapter.name,
            wraps=[w.strip().lower() for w in wraps],
            extra_baggage_kg=extra_kg,
            can_buy_extra_baggage=adapter.can_buy_extra_baggage(),
            extra_baggage_cost=FlightFactory.calculate_extra_baggage_cost(profile, extra_kg),
        )
        self._logger.info(
            "Passenger quoted",
            passenger=quote.name,
            category=quote.category,
            cost=quote.cost,
            extra_baggage_cost=quote.extra_baggage_cost,
        )
        return quote
