"""A process-wide single instance holding a counter."""

from __future__ import annotations

import threading
from typing import Optional


class Singleton:
    """Only one instance exists; obtain it with Singleton.get_instance()."""

    _instance: Optional[Singleton] = None

    def __new__(cls) -> Singleton:
        if Singleton._instance is not None:
            raise TypeError("use Singleton.get_instance()")
        instance = super().__new__(cls)
        instance._counter = 0
        instance._lock = threading.Lock()
        return instance

    @staticmethod
    def get_instance() -> Singleton:
        """Return the one instance."""
        instance = Singleton._instance
        if instance is None:
            raise RuntimeError("singleton instance not initialised")
        return instance

    def increment_counter(self) -> None:
        """Add one to the shared counter."""
        with self._lock:
            self._counter += 1

    def counter_value(self) -> int:
        """Return the shared counter."""
        return Singleton.get_instance()._counter

    def __copy__(self) -> Singleton:
        """Copying yields the one instance itself."""
        return Singleton.get_instance()

    def __deepcopy__(self, memo: dict) -> Singleton:
        """Deep copying yields the one instance itself."""
        instance = Singleton.get_instance()
        memo[id(self)] = instance
        return instance


Singleton._instance = Singleton()