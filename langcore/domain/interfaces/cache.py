"""Interface for bounded caches.

Defines the contract for a fixed-capacity key/value store with
least-recently-used eviction. Implementations must make every operation
mutually exclusive with every other operation on the same instance.
"""

import abc
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class BoundedCache(abc.ABC, Generic[K, V]):
    """Abstract Base Class for bounded cache operations."""

    @abc.abstractmethod
    def get(self, key: K) -> Optional[V]:
        """Retrieves an item and marks it as most recently used.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if the key is absent.
        """
        pass

    @abc.abstractmethod
    def put(self, key: K, value: V) -> Optional[V]:
        """Stores an item, evicting the least recently used entry if over capacity.

        Args:
            key: The cache key to store the value under.
            value: The value to store.

        Returns:
            The value previously stored for the key, or None.
        """
        pass

    @abc.abstractmethod
    def remove(self, key: K) -> Optional[V]:
        """Removes an item.

        Returns:
            The value previously stored for the key, or None.
        """
        pass

    @abc.abstractmethod
    def contains_key(self, key: K) -> bool:
        """Checks whether a key is present without changing recency order."""
        pass

    @abc.abstractmethod
    def clear(self) -> None:
        """Removes every entry. Capacity is unchanged."""
        pass

    @abc.abstractmethod
    def size(self) -> int:
        pass

    @abc.abstractmethod
    def capacity(self) -> int:
        pass

    @abc.abstractmethod
    def resize(self, new_capacity: int) -> None:
        """Changes the capacity.

        A cache currently holding more entries than the new capacity is
        trimmed lazily by the next put, not immediately.

        Raises:
            InvalidArgumentError: If new_capacity is not positive.
        """
        pass
