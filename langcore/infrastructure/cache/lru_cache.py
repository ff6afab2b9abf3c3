"""Thread-safe LRU cache.

Fixed-capacity key/value store that evicts the least recently used
entries when full. Every operation holds the instance lock, so at most
one operation runs at a time per cache; separate caches never contend.
"""

import logging
import threading
from collections import OrderedDict
from typing import Optional, TypeVar

from langcore.domain.exceptions import InvalidArgumentError
from langcore.domain.interfaces.cache import BoundedCache

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class LRUCache(BoundedCache[K, V]):
    """Bounded cache with least-recently-used eviction.

    Recency is refreshed by get() and put(). contains_key() is a pure
    existence check and leaves recency untouched.
    """

    def __init__(self, capacity: int, name: str = "lru"):
        """Initializes the cache.

        Args:
            capacity: Maximum number of entries (must be positive).
            name: Label used in log messages.

        Raises:
            InvalidArgumentError: If capacity is not positive.
        """
        if capacity <= 0:
            raise InvalidArgumentError(f"Capacity must be positive, got {capacity}")
        self.name = name
        self._capacity = capacity
        # Oldest access first, most recent access last
        self._entries: "OrderedDict[K, V]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            try:
                self._entries.move_to_end(key)
            except KeyError:
                return None
            return self._entries[key]

    def put(self, key: K, value: V) -> Optional[V]:
        with self._lock:
            previous = self._entries.get(key)
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self._capacity:
                evicted_key, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache '{self.name}' evicted key: {evicted_key!r}")
            return previous

    def remove(self, key: K) -> Optional[V]:
        with self._lock:
            return self._entries.pop(key, None)

    def contains_key(self, key: K) -> bool:
        with self._lock:
            return key in self._entries

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def capacity(self) -> int:
        with self._lock:
            return self._capacity

    def resize(self, new_capacity: int) -> None:
        if new_capacity <= 0:
            raise InvalidArgumentError(f"New capacity must be positive, got {new_capacity}")
        with self._lock:
            logger.debug(f"Cache '{self.name}' resized: {self._capacity} -> {new_capacity}")
            self._capacity = new_capacity

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"LRUCache(name={self.name!r}, size={self.size()}, capacity={self.capacity()})"
