"""Lock-guarded counters for cache hit/miss accounting."""

import threading
from typing import Tuple


class AtomicCounter:
    """Integer counter with atomic increments across threads."""

    def __init__(self, initial: int = 0):
        self._value = initial
        self._lock = threading.Lock()

    def increment(self, delta: int = 1) -> int:
        """Adds delta and returns the new value."""
        with self._lock:
            self._value += delta
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0


class HitMissCounters:
    """Hit and miss totals shared by every cached lookup of one language service.

    Each lookup records exactly one hit or one miss.
    """

    def __init__(self):
        self.hits = AtomicCounter()
        self.misses = AtomicCounter()

    def record_hit(self) -> None:
        self.hits.increment()

    def record_miss(self) -> None:
        self.misses.increment()

    def snapshot(self) -> Tuple[int, int]:
        """Returns (hits, misses) without modifying either counter."""
        return self.hits.value, self.misses.value

    def hit_ratio(self) -> float:
        hits, misses = self.snapshot()
        total = hits + misses
        return hits / total if total > 0 else 0.0

    def reset(self) -> None:
        self.hits.reset()
        self.misses.reset()
