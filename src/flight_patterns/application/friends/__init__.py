"""Friends list use cases."""

from .service import FriendsAPI

__all__ = ["FriendsAPI"]
