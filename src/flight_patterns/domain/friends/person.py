# src/flight_patterns/domain/friends/person.py
from dataclasses import dataclass
from typing import Any, Dict

from flight_patterns.domain.core.exceptions import ValidationError


@dataclass(frozen=True)
class Person:
    """A friend entry."""
    name: str
    surname: str
    genre: str
    age: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError("Name must be a non-empty string")
        if not isinstance(self.surname, str):
            raise ValidationError("Surname must be a string")
        if not isinstance(self.age, int) or isinstance(self.age, bool) or self.age < 0:
            raise ValidationError("Age must be a non-negative integer")

    def __str__(self) -> str:
        return (
            f"name: {self.name}"
            f" surname: {self.surname}"
            f" genre: {self.genre}"
            f" age: {self.age}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "surname": self.surname,
            "genre": self.genre,
            "age": self.age,
        }
