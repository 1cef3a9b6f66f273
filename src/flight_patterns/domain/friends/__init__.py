"""Friends list domain."""

from .person import Person

__all__ = ["Person"]
