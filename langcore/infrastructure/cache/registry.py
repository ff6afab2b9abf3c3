"""Registry of the per-category LRU caches.

Owns one LRUCache per CacheCategory for the lifetime of a language
service and clears them together on reload.
"""

import logging
from typing import Dict, List, Mapping, Optional

from langcore.domain.exceptions import InvalidArgumentError
from langcore.domain.models.common import CacheCategory
from langcore.infrastructure.cache.lru_cache import LRUCache

logger = logging.getLogger(__name__)

# --- Cache Configuration ---
DEFAULT_STRING_CACHE_SIZE = 1000
DEFAULT_LORE_CACHE_SIZE = 250
DEFAULT_LORE_LIST_CACHE_SIZE = 250
DEFAULT_ENTITY_NAME_CACHE_SIZE = 250
DEFAULT_SMALL_CAPS_CACHE_SIZE = 500
DEFAULT_MATERIAL_NAME_CACHE_SIZE = 250

DEFAULT_CAPACITIES: Dict[CacheCategory, int] = {
    CacheCategory.RENDERED_STRING: DEFAULT_STRING_CACHE_SIZE,
    CacheCategory.PLAIN_STRING: DEFAULT_STRING_CACHE_SIZE,
    CacheCategory.ITEM_LORE: DEFAULT_LORE_CACHE_SIZE,
    CacheCategory.ITEM_LORE_LIST: DEFAULT_LORE_LIST_CACHE_SIZE,
    CacheCategory.GUI_NAME: DEFAULT_STRING_CACHE_SIZE,
    CacheCategory.GUI_LORE: DEFAULT_LORE_CACHE_SIZE,
    CacheCategory.GUI_LORE_LIST: DEFAULT_LORE_LIST_CACHE_SIZE,
    CacheCategory.ENTITY_NAME: DEFAULT_ENTITY_NAME_CACHE_SIZE,
    CacheCategory.SMALL_CAPS: DEFAULT_SMALL_CAPS_CACHE_SIZE,
    CacheCategory.MATERIAL_NAME: DEFAULT_MATERIAL_NAME_CACHE_SIZE,
}


class CacheRegistry:
    """Fixed mapping from category to its LRU cache.

    The set of categories is established at construction and never
    changes. Operations on different categories use independent locks.
    """

    def __init__(self, capacities: Optional[Mapping[CacheCategory, int]] = None):
        """Creates one cache per category.

        Args:
            capacities: Optional per-category overrides of DEFAULT_CAPACITIES.

        Raises:
            InvalidArgumentError: If any capacity is not positive.
        """
        merged = dict(DEFAULT_CAPACITIES)
        if capacities:
            merged.update(capacities)
        self._caches: Dict[CacheCategory, LRUCache] = {
            category: LRUCache(merged[category], name=category.value)
            for category in CacheCategory
        }
        logger.info(
            "CacheRegistry initialized: "
            + ", ".join(f"{c.value}={cap}" for c, cap in merged.items())
        )

    def get(self, category: CacheCategory) -> LRUCache:
        return self._caches[category]

    def categories(self) -> List[CacheCategory]:
        return list(self._caches)

    def clear_all(self) -> None:
        """Clears every category cache.

        Each cache is locked only while it is being cleared. A lookup that
        started before its cache was cleared may store its result right
        after; that entry lives until the next reload or eviction.
        """
        for cache in self._caches.values():
            cache.clear()
        logger.info(f"Cleared all {len(self._caches)} language caches.")

    def resize(self, category: CacheCategory, new_capacity: int) -> None:
        self._caches[category].resize(new_capacity)
        logger.info(f"Resized '{category.value}' cache to {new_capacity} entries.")

    def sizes(self) -> Dict[CacheCategory, int]:
        return {category: cache.size() for category, cache in self._caches.items()}

    def capacities(self) -> Dict[CacheCategory, int]:
        return {category: cache.capacity() for category, cache in self._caches.items()}


def parse_capacity_overrides(raw: Mapping[str, object]) -> Dict[CacheCategory, int]:
    """Converts a {category-name: capacity} mapping from configuration.

    Unknown category names are logged and skipped.

    Raises:
        InvalidArgumentError: If a capacity is not a positive integer.
    """
    overrides: Dict[CacheCategory, int] = {}
    for name, value in raw.items():
        try:
            category = CacheCategory(str(name).replace("_", "-"))
        except ValueError:
            logger.warning(f"Ignoring capacity for unknown cache category: '{name}'")
            continue
        try:
            capacity = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"Capacity for '{name}' must be an integer, got {value!r}")
        if capacity <= 0:
            raise InvalidArgumentError(f"Capacity for '{name}' must be positive, got {capacity}")
        overrides[category] = capacity
    return overrides
