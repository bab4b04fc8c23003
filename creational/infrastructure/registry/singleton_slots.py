"""
Singleton Slots - Process-wide cached instances
===============================================
Holds at most one instance per slot key. Instances are created lazily on
first demand and live as long as the owning registry.

Creation uses double-checked locking so that concurrent first-time callers
build exactly one instance: first creation wins, every other caller
observes the same object.
"""

import threading
from typing import Any, Callable, Dict, Hashable, List, Optional, TypeVar

T = TypeVar('T')


class SingletonSlots:
    """Thread-safe store of lazily created singleton instances."""

    def __init__(self):
        self._instances: Dict[Hashable, Any] = {}
        self._slot_locks: Dict[Hashable, threading.Lock] = {}
        self._global_lock = threading.Lock()

    def get_or_create(self, key: Hashable, factory: Callable[[], T]) -> T:
        """
        Return the instance held in slot `key`, creating it with `factory`
        on first access.

        Args:
            key: Slot identifier
            factory: Zero-argument callable building the instance

        Returns:
            The single instance for `key`
        """
        # Fast path: already created
        if key in self._instances:
            return self._instances[key]

        # Slow path: one lock per slot, created under the global lock
        with self._global_lock:
            slot_lock = self._slot_locks.get(key)
            if slot_lock is None:
                slot_lock = threading.Lock()
                self._slot_locks[key] = slot_lock

        with slot_lock:
            # Double-check after acquiring lock
            if key in self._instances:
                return self._instances[key]

            instance = factory()
            self._instances[key] = instance
            return instance

    def get(self, key: Hashable) -> Optional[Any]:
        """Existing instance for `key` without creating it."""
        return self._instances.get(key)

    def has(self, key: Hashable) -> bool:
        return key in self._instances

    def keys(self) -> List[Hashable]:
        """Slots that currently hold an instance"""
        return list(self._instances.keys())
