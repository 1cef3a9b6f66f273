"""Tests for the singleton registry and access function."""

import threading

from flight_patterns.infrastructure.patterns import SingletonRegistry, get_singleton


class Counter:
    created = 0

    def __init__(self, start=0):
        Counter.created += 1
        self.value = start


class TestSingletonRegistry:
    """Test singleton registry functionality."""

    def setup_method(self):
        Counter.created = 0

    def test_registry_is_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_get_creates_once(self):
        registry = SingletonRegistry.get_instance()
        first = registry.get(Counter, 5)
        second = registry.get(Counter, 99)
        assert first is second
        assert first.value == 5
        assert Counter.created == 1

    def test_register_existing_instance(self):
        registry = SingletonRegistry.get_instance()
        instance = Counter(7)
        registry.register(Counter, instance)
        assert get_singleton(Counter) is instance
        assert Counter in registry.get_all()

    def test_clear(self):
        registry = SingletonRegistry.get_instance()
        first = get_singleton(Counter)
        registry.clear()
        assert registry.get_all() == {}
        assert get_singleton(Counter) is not first

    def test_concurrent_access_creates_single_instance(self):
        results = []

        def worker():
            results.append(get_singleton(Counter))

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert Counter.created == 1
        assert all(result is results[0] for result in results)
