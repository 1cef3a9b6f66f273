"""Passenger quoting use cases."""

from .builder import (
    UnknownWrapError,
    build_profile,
    get_registered_wraps,
    get_wrap_class,
    register_wrap,
    unregister_wrap,
)
from .service import PassengerQuoteDTO, PassengerQuoteService, ProfileSummaryDTO, demo_profiles

__all__ = [
    "UnknownWrapError",
    "build_profile",
    "get_registered_wraps",
    "get_wrap_class",
    "register_wrap",
    "unregister_wrap",
    "PassengerQuoteDTO",
    "PassengerQuoteService",
    "ProfileSummaryDTO",
    "demo_profiles",
]
