import math

import pytest

from flight_patterns.domain.core.exceptions import ValidationError
from flight_patterns.domain.passenger.profiles import (
    BusinessPassenger,
    EconomicPassenger,
    PassengerProfile,
    StandardPassenger,
)
from flight_patterns.domain.passenger.value_objects import FlightCategory, Passenger, ProfileVariant


class FixedProfile(PassengerProfile):
    """Profile with arbitrary values for edge cases."""

    def __init__(self, cost=100.0, allowance=10.0, category=FlightCategory.STANDARD):
        super().__init__()
        self._cost = cost
        self._allowance = allowance
        self._category = category

    def cost(self):
        return self._cost

    def baggage_allowance(self):
        return self._allowance

    def category(self):
        return self._category


@pytest.mark.unit
class TestStandardPassenger:

    def test_fixed_values(self, standard):
        assert standard.cost() == 100
        assert standard.baggage_allowance() == 10
        assert standard.category() == FlightCategory.STANDARD
        assert standard.variant == ProfileVariant.STANDARD

    def test_profile_cannot_be_instantiated_directly(self):
        with pytest.raises(TypeError):
            PassengerProfile()


@pytest.mark.unit
class TestDecorators:

    def test_economic_wrap(self, economic):
        assert economic.cost() == 50
        assert economic.baggage_allowance() == 0
        assert economic.category() == FlightCategory.ECONOMIC
        assert economic.variant == ProfileVariant.ECONOMIC

    def test_business_wrap(self, business):
        assert business.cost() == 400
        assert business.baggage_allowance() == 60
        assert business.category() == FlightCategory.BUSINESS
        assert business.variant == ProfileVariant.BUSINESS

    def test_business_over_economic(self, business_over_economic):
        assert business_over_economic.cost() == 200
        assert business_over_economic.baggage_allowance() == 50
        assert business_over_economic.category() == FlightCategory.BUSINESS

    def test_economic_over_business_overrides_category(self, business):
        profile = EconomicPassenger(business)
        assert profile.cost() == 200
        assert profile.baggage_allowance() == 0
        assert profile.category() == FlightCategory.ECONOMIC

    def test_category_ignores_inner_category(self):
        inner = FixedProfile(category=FlightCategory.ECONOMIC)
        assert BusinessPassenger(inner).category() == FlightCategory.BUSINESS

    def test_deep_nesting(self, standard):
        profile = standard
        for _ in range(3):
            profile = BusinessPassenger(profile)
        assert profile.cost() == 6400
        assert profile.baggage_allowance() == 160
        assert profile.depth() == 3

    def test_wrap_exposes_inner(self, standard, economic):
        assert economic.inner is standard

    def test_wrap_requires_profile(self):
        with pytest.raises(ValidationError):
            EconomicPassenger("not a profile")

    def test_economic_allowance_is_zero_for_negative_inner(self):
        profile = EconomicPassenger(FixedProfile(allowance=-25.0))
        assert profile.baggage_allowance() == 0

    def test_economic_allowance_propagates_nan_and_infinity(self):
        assert math.isnan(EconomicPassenger(FixedProfile(allowance=float("nan"))).baggage_allowance())
        assert math.isnan(EconomicPassenger(FixedProfile(allowance=float("inf"))).baggage_allowance())

    def test_queries_are_idempotent(self, business_over_economic):
        first = (
            business_over_economic.cost(),
            business_over_economic.baggage_allowance(),
            business_over_economic.category(),
        )
        for _ in range(5):
            assert (
                business_over_economic.cost(),
                business_over_economic.baggage_allowance(),
                business_over_economic.category(),
            ) == first

    def test_repr_shows_chain(self, business_over_economic):
        assert repr(business_over_economic) == (
            "BusinessPassenger(EconomicPassenger(StandardPassenger()))"
        )


@pytest.mark.unit
class TestPassenger:

    def test_passenger_str(self, business):
        passenger = Passenger(name="Okan Yücel", profile=business)
        assert str(passenger) == "Okan Yücel (business)"

    def test_passenger_requires_name(self, standard):
        with pytest.raises(ValidationError):
            Passenger(name="  ", profile=standard)

    def test_custom_profile_defaults_to_custom_variant(self):
        assert FixedProfile().variant == ProfileVariant.CUSTOM

    def test_flight_category_validate(self):
        FlightCategory.validate("business")
        with pytest.raises(ValidationError):
            FlightCategory.validate("first")
