"""Singleton facade over the friend store."""
from typing import List

from flight_patterns.domain.friends.person import Person
from flight_patterns.infrastructure.logging.logger import get_logger
from flight_patterns.infrastructure.patterns.singleton_access import get_singleton
from flight_patterns.infrastructure.persistence.in_memory_friend_store import InMemoryFriendStore

logger = get_logger(__name__)


class FriendsAPI:
    """
    Global access point to the friends list.

    Use ``FriendsAPI.shared()`` rather than constructing the class; the
    singleton registry guarantees a single instance per process.
    """

    def __init__(self) -> None:
        self._store = InMemoryFriendStore()

    @classmethod
    def shared(cls) -> "FriendsAPI":
        """Get the process-wide instance."""
        return get_singleton(cls)

    def get_friends(self) -> List[Person]:
        return self._store.get_friends()

    def add_friend(self, friend: Person) -> None:
        self._store.add_friend(friend)
        logger.info("Friend added", name=friend.name, surname=friend.surname, total=len(self._store))

    def delete_friend(self, index: int) -> Person:
        removed = self._store.delete_friend(index)
        logger.info("Friend deleted", index=index, name=removed.name, total=len(self._store))
        return removed
