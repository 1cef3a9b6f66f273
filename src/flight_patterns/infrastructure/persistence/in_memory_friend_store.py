"""In-memory friend store seeded with demo data."""
from typing import List, Optional

from flight_patterns.domain.core.exceptions import ResourceNotFoundError
from flight_patterns.domain.friends.person import Person


def default_friends() -> List[Person]:
    """Dummy list of friends."""
    return [
        Person(name="Okan", surname="Yücel", genre="Male", age=24),
        Person(name="Uğur", surname="Özışık", genre="Male", age=24),
        Person(name="Ali", surname="Yüce", genre="Male", age=24),
    ]


class InMemoryFriendStore:
    """Ordered list of friends kept for the lifetime of the process."""

    def __init__(self, friends: Optional[List[Person]] = None):
        self._friends: List[Person] = list(friends) if friends is not None else default_friends()

    def get_friends(self) -> List[Person]:
        return list(self._friends)

    def add_friend(self, friend: Person) -> None:
        self._friends.append(friend)

    def delete_friend(self, index: int) -> Person:
        if not 0 <= index < len(self._friends):
            raise ResourceNotFoundError("Friend", str(index))
        return self._friends.pop(index)

    def __len__(self) -> int:
        return len(self._friends)
