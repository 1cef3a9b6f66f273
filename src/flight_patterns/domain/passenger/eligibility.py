"""Extra baggage eligibility adapter.

Eligibility dispatches on the variant tag a profile received at construction,
not on the category it reports. For nested wraps only the outermost layer's
variant counts.
"""
from typing import Dict, Optional

from flight_patterns.domain.passenger.profiles import PassengerProfile
from flight_patterns.domain.passenger.value_objects import ProfileVariant

# Inclusive allowance ceilings per variant; None means never eligible
BAGGAGE_ALLOWANCE_LIMITS: Dict[ProfileVariant, Optional[float]] = {
    ProfileVariant.STANDARD: 50.0,
    ProfileVariant.ECONOMIC: None,
    ProfileVariant.BUSINESS: 100.0,
}


def can_buy_extra_baggage(profile: PassengerProfile) -> bool:
    """Return whether the profile may purchase extra baggage."""
    variant = profile.variant
    if variant not in BAGGAGE_ALLOWANCE_LIMITS:
        return False

    limit = BAGGAGE_ALLOWANCE_LIMITS[variant]
    if limit is None:
        return False
    return profile.baggage_allowance() <= limit


class PassengerAdapter:
    """Adapts a named passenger to the extra baggage eligibility check."""

    def __init__(self, name: str, profile: PassengerProfile):
        self._name = name
        self._profile = profile

    @property
    def name(self) -> str:
        return self._name

    @property
    def profile(self) -> PassengerProfile:
        return self._profile

    def can_buy_extra_baggage(self) -> bool:
        return can_buy_extra_baggage(self._profile)
