"""In-memory storage. Nothing is written to disk."""

from .in_memory_friend_store import InMemoryFriendStore, default_friends

__all__ = ["InMemoryFriendStore", "default_friends"]
