"""Extra baggage pricing factory."""
from typing import Dict, NamedTuple

from flight_patterns.domain.core.exceptions import ValidationError
from flight_patterns.domain.passenger.profiles import PassengerProfile
from flight_patterns.domain.passenger.value_objects import FlightCategory


class ExtraBaggageRate(NamedTuple):
    """Weight multiplier applied to extra kilograms and the price per unit."""
    weight_factor: float
    unit_price: float


EXTRA_BAGGAGE_RATES: Dict[FlightCategory, ExtraBaggageRate] = {
    FlightCategory.STANDARD: ExtraBaggageRate(weight_factor=2.0, unit_price=10.0),
    FlightCategory.ECONOMIC: ExtraBaggageRate(weight_factor=1.0, unit_price=5.0),
    FlightCategory.BUSINESS: ExtraBaggageRate(weight_factor=3.0, unit_price=15.0),
}


class FlightFactory:
    """Stateless pricer for extra baggage, keyed on the reported category."""

    @staticmethod
    def calculate_extra_baggage_cost(profile: PassengerProfile, extra_baggage: float) -> float:
        """
        Calculate the cost of purchasing extra baggage.

        The formula is ``(allowance + extra_baggage * weight_factor) * unit_price``
        with the rate selected by ``profile.category()``. ``extra_baggage`` is
        not validated; negative weights produce negative costs.

        Args:
            profile: Pricing profile of the passenger
            extra_baggage: Extra weight in kilograms

        Returns:
            Extra baggage cost in dollars

        Raises:
            ValidationError: If the profile reports an unknown category
        """
        category = profile.category()
        try:
            rate = EXTRA_BAGGAGE_RATES[category]
        except (KeyError, TypeError) as e:
            raise ValidationError(f"Unsupported flight category: {category!r}") from e

        return (profile.baggage_allowance() + extra_baggage * rate.weight_factor) * rate.unit_price


def extra_baggage_cost(profile: PassengerProfile, extra_kg: float) -> float:
    """Cost of buying ``extra_kg`` of extra baggage for ``profile``."""
    return FlightFactory.calculate_extra_baggage_cost(profile, extra_kg)
