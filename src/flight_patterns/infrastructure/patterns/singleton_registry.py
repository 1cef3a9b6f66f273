"""Thread-safe registry holding one instance per class."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry of process-wide singleton instances.

    The registry itself is a singleton obtained through ``get_instance``.
    Instances are created lazily on first ``get`` and reused afterwards.
    """

    _instance: Optional["SingletonRegistry"] = None
    _class_lock = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[Type[Any], Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the registry, creating it on first use."""
        if cls._instance is None:
            with cls._class_lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it if needed.

        Constructor arguments are only used when the instance does not exist yet.
        """
        if singleton_class not in self._instances:
            with self._lock:
                if singleton_class not in self._instances:
                    self._instances[singleton_class] = singleton_class(*args, **kwargs)
        return cast(T, self._instances[singleton_class])

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register an existing instance, replacing any previous one."""
        with self._lock:
            self._instances[singleton_class] = instance

    def get_all(self) -> Dict[Type[Any], Any]:
        """Get a copy of all registered instances."""
        with self._lock:
            return dict(self._instances)

    def clear(self) -> None:
        """Drop all instances. Mainly used to isolate tests."""
        with self._lock:
            self._instances.clear()
