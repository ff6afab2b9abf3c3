"""Caching for rendered locale text.

Provides the thread-safe LRU cache, cache-key construction, hit/miss
counters and the per-category cache registry.
Bounded Context: Cache Management
"""

from langcore.infrastructure.cache.cache_keys import build_cache_key
from langcore.infrastructure.cache.counters import AtomicCounter, HitMissCounters
from langcore.infrastructure.cache.lru_cache import LRUCache
from langcore.infrastructure.cache.registry import CacheRegistry

__all__ = ['AtomicCounter', 'CacheRegistry', 'HitMissCounters', 'LRUCache', 'build_cache_key']
