"""Resolution facade over the locale store, renderer and category caches.

LanguageService is the one entry point callers use to turn locale keys
into display-ready text. It owns the hit/miss counters, routes every
lookup to the right category cache and exposes cache statistics and
reload.
"""

import logging
import threading
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

from langcore.domain.interfaces.locale_store import LocaleStore
from langcore.domain.models.common import (
    MISSING_MESSAGE_FORMAT,
    CacheCategory,
    CacheStatistics,
    LanguageFileType,
)
from langcore.infrastructure.cache.cache_keys import build_cache_key
from langcore.infrastructure.cache.counters import HitMissCounters
from langcore.infrastructure.cache.registry import CacheRegistry
from langcore.infrastructure.localization import color_codes, formatting
from langcore.infrastructure.localization.text_renderer import TextRenderer

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "&7[Server] &r"
UNKNOWN_ITEM = "Unknown Item"
UNKNOWN_ENTITY = "Unknown"
UNKNOWN_ENTITY_TYPE = "UNKNOWN"

PlaceholderMap = Optional[Mapping[str, Any]]

_LIST_CATEGORIES = frozenset({CacheCategory.ITEM_LORE_LIST, CacheCategory.GUI_LORE_LIST})


class ServiceState(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class LanguageService:
    """Resolves locale keys into rendered text through bounded caches.

    Every cache-backed lookup records exactly one hit or miss. Categories
    that memoize a whole resolution (gui names, lore, entity, material and
    small-caps) count at this level and render their parts uncached, so a
    single call never counts twice.
    """

    def __init__(
        self,
        locale_store: LocaleStore,
        registry: Optional[CacheRegistry] = None,
        renderer: Optional[TextRenderer] = None,
        counters: Optional[HitMissCounters] = None,
    ):
        """Initializes the LanguageService with its collaborators.

        Args:
            locale_store: Source of raw locale content.
            registry: Category caches. A default registry is created if omitted.
            renderer: Text renderer. Created around the counters if omitted.
            counters: Shared hit/miss counters. Taken from the renderer if omitted.
        """
        self.locale_store = locale_store
        self.registry = registry or CacheRegistry()
        if renderer is None:
            self.counters = counters or HitMissCounters()
            self.renderer = TextRenderer(self.counters)
        else:
            self.renderer = renderer
            self.counters = counters or renderer.counters
        self._state = ServiceState.UNINITIALIZED
        self._state_lock = threading.Lock()
        logger.info("LanguageService initialized.")

    # --- Lifecycle ---

    @property
    def state(self) -> ServiceState:
        return self._state

    def load(self) -> None:
        """Loads the locale content and marks the service ready."""
        with self._state_lock:
            self.locale_store.load()
            self._state = ServiceState.READY
        logger.info(f"LanguageService ready for locale '{self.locale_store.locale}'.")

    def _ensure_ready(self) -> None:
        if self._state is ServiceState.UNINITIALIZED:
            with self._state_lock:
                if self._state is ServiceState.UNINITIALIZED:
                    self.locale_store.load()
                    self._state = ServiceState.READY

    def reload(self) -> None:
        """Clears every category cache, then reloads the locale content.

        Lookups that interleave with a reload may see old or new content,
        but never a mix within one cached entry.
        """
        self.registry.clear_all()
        with self._state_lock:
            self.locale_store.reload()
            self._state = ServiceState.READY
        logger.info(f"Language files reloaded for locale '{self.locale_store.locale}'.")

    def clear_cache(self) -> None:
        """Clears every category cache without touching locale content."""
        self.registry.clear_all()

    def statistics(self) -> CacheStatistics:
        """Returns a snapshot of cache sizes, capacities and hit/miss counts."""
        sizes = self.registry.sizes()
        capacities = self.registry.capacities()
        hits, misses = self.counters.snapshot()
        total = hits + misses
        return {
            "categories": {
                category.value: {"size": sizes[category], "capacity": capacities[category]}
                for category in self.registry.categories()
            },
            "hits": hits,
            "misses": misses,
            "hit_ratio": hits / total if total > 0 else 0.0,
        }

    def is_section_active(self, section: LanguageFileType) -> bool:
        return section in self.locale_store.active_sections

    # --- Generic resolution ---

    def resolve(
        self,
        category: CacheCategory,
        key: str,
        placeholders: PlaceholderMap = None,
    ) -> Union[str, Sequence[str]]:
        """Resolves a locale key within a cache category.

        Args:
            category: The cache category, which also selects the section.
            key: Dotted key into the category's section. For small-caps,
                the text to convert.
            placeholders: Optional name -> value substitutions.

        Returns:
            The rendered string, or a sequence of lines for lore categories.
            A missing scalar key yields "Missing message: <key>" and a
            missing lore key an empty sequence.
        """
        self._ensure_ready()
        if category is CacheCategory.SMALL_CAPS:
            return self.get_small_caps(key)
        if category.is_sequence:
            lines = self._resolve_lines(category, key, placeholders)
            return list(lines) if category in _LIST_CATEGORIES else lines

        missing = MISSING_MESSAGE_FORMAT.format(key=key)
        if category in (CacheCategory.RENDERED_STRING, CacheCategory.PLAIN_STRING):
            raw = self.locale_store.get_string(LanguageFileType.MESSAGES, key)
            if raw is None:
                self.counters.record_miss()
                return missing
            if category is CacheCategory.PLAIN_STRING:
                return self.apply_only_placeholders(raw, placeholders)
            return self.apply_placeholders_and_colors(raw, placeholders)
        return self._resolve_scalar(category, key, placeholders, missing)

    def apply_placeholders_and_colors(self, text: Optional[str], placeholders: PlaceholderMap = None) -> Optional[str]:
        """Renders text through the rendered-string cache."""
        return self.renderer.render_with_placeholders_and_color(
            text, placeholders, self.registry.get(CacheCategory.RENDERED_STRING)
        )

    def apply_only_placeholders(self, text: Optional[str], placeholders: PlaceholderMap = None) -> Optional[str]:
        """Substitutes placeholders only, through the plain-string cache."""
        return self.renderer.render_placeholders_only(
            text, placeholders, self.registry.get(CacheCategory.PLAIN_STRING)
        )

    def _memoize(self, category: CacheCategory, cache_key: str, compute: Callable[[], Any]) -> Any:
        """Returns the cached value for cache_key or computes and stores it.

        Records one hit or miss. A computed None is returned but not cached.
        """
        cache = self.registry.get(category)
        cached = cache.get(cache_key)
        if cached is not None:
            self.counters.record_hit()
            return cached
        self.counters.record_miss()
        value = compute()
        if value is not None:
            cache.put(cache_key, value)
        return value

    def _resolve_scalar(
        self,
        category: CacheCategory,
        key: str,
        placeholders: PlaceholderMap,
        missing: Optional[str],
    ) -> Optional[str]:
        def compute() -> Optional[str]:
            raw = self.locale_store.get_string(category.section, key)
            return self.renderer.render_with_placeholders_and_color(raw, placeholders)

        value = self._memoize(category, build_cache_key(key, placeholders), compute)
        return missing if value is None else value

    def _resolve_lines(
        self,
        category: CacheCategory,
        key: str,
        placeholders: PlaceholderMap,
    ) -> Tuple[str, ...]:
        def compute() -> Tuple[str, ...]:
            lines = self.locale_store.get_string_list(category.section, key)
            return tuple(self.renderer.render_with_placeholders_and_color(line, placeholders) for line in lines)

        return self._memoize(category, build_cache_key(key, placeholders), compute)

    # --- Messages ---

    def get_prefix(self) -> str:
        self._ensure_ready()
        prefix = self.locale_store.get_string(LanguageFileType.MESSAGES, "prefix")
        return DEFAULT_PREFIX if prefix is None else prefix

    def is_message_enabled(self, key: str) -> bool:
        self._ensure_ready()
        return self.locale_store.get_boolean(LanguageFileType.MESSAGES, f"{key}.enabled", True)

    def key_exists(self, key: str) -> bool:
        self._ensure_ready()
        return self.locale_store.contains(LanguageFileType.MESSAGES, key)

    def get_message(self, key: str, placeholders: PlaceholderMap = None) -> Optional[str]:
        """Gets a chat message with the prefix, placeholders and colors applied.

        Returns:
            The rendered message, None if the message is disabled, or
            "Missing message: <key>" if it has no text.
        """
        if not self.is_message_enabled(key):
            return None
        message = self.locale_store.get_string(LanguageFileType.MESSAGES, f"{key}.message")
        if message is None:
            return MISSING_MESSAGE_FORMAT.format(key=key)
        return self.apply_placeholders_and_colors(self.get_prefix() + message, placeholders)

    def get_message_without_prefix(self, key: str, placeholders: PlaceholderMap = None) -> Optional[str]:
        if not self.is_message_enabled(key):
            return None
        message = self.locale_store.get_string(LanguageFileType.MESSAGES, f"{key}.message")
        if message is None:
            return MISSING_MESSAGE_FORMAT.format(key=key)
        return self.apply_placeholders_and_colors(message, placeholders)

    def get_message_for_console(self, key: str, placeholders: PlaceholderMap = None) -> Optional[str]:
        """Gets a message with placeholders applied but color codes left untranslated."""
        if not self.is_message_enabled(key):
            return None
        message = self.locale_store.get_string(LanguageFileType.MESSAGES, f"{key}.message")
        if message is None:
            return MISSING_MESSAGE_FORMAT.format(key=key)
        return self.apply_only_placeholders(message, placeholders)

    def get_raw_message(self, path: str, placeholders: PlaceholderMap = None) -> Optional[str]:
        """Renders the message at path, or returns None if there is none."""
        self._ensure_ready()
        message = self.locale_store.get_string(LanguageFileType.MESSAGES, path)
        return self.apply_placeholders_and_colors(message, placeholders)

    def get_title(self, key: str, placeholders: PlaceholderMap = None) -> Optional[str]:
        if not self.is_message_enabled(key):
            return None
        return self.get_raw_message(f"{key}.title", placeholders)

    def get_subtitle(self, key: str, placeholders: PlaceholderMap = None) -> Optional[str]:
        if not self.is_message_enabled(key):
            return None
        return self.get_raw_message(f"{key}.subtitle", placeholders)

    def get_action_bar(self, key: str, placeholders: PlaceholderMap = None) -> Optional[str]:
        if not self.is_message_enabled(key):
            return None
        return self.get_raw_message(f"{key}.action_bar", placeholders)

    def get_sound(self, key: str) -> Optional[str]:
        if not self.is_message_enabled(key):
            return None
        return self.locale_store.get_string(LanguageFileType.MESSAGES, f"{key}.sound")

    # --- GUI ---

    def get_gui_title(self, key: str, placeholders: PlaceholderMap = None) -> Optional[str]:
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.GUI):
            return None
        title = self.locale_store.get_string(LanguageFileType.GUI, key)
        if title is None:
            return f"Missing GUI title: {key}"
        return self.apply_placeholders_and_colors(title, placeholders)

    def get_gui_item_name(self, key: str, placeholders: PlaceholderMap = None) -> Optional[str]:
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.GUI):
            return None
        return self._resolve_scalar(CacheCategory.GUI_NAME, key, placeholders, f"Missing item name: {key}")

    def get_gui_item_lore(self, key: str, placeholders: PlaceholderMap = None) -> Tuple[str, ...]:
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.GUI):
            return ()
        return self._resolve_lines(CacheCategory.GUI_LORE, key, placeholders)

    def get_gui_item_lore_as_list(self, key: str, placeholders: PlaceholderMap = None) -> List[str]:
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.GUI):
            return []
        return list(self._resolve_lines(CacheCategory.GUI_LORE_LIST, key, placeholders))

    def get_gui_item_lore_multiline(self, key: str, placeholders: PlaceholderMap = None) -> List[str]:
        """Gets GUI lore, expanding placeholders whose values span several lines."""
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.GUI):
            return []
        lines = self.locale_store.get_string_list(LanguageFileType.GUI, key)
        return self.renderer.render_multiline(lines, placeholders, self.registry.get(CacheCategory.RENDERED_STRING))

    def get_color_code(self, path: str) -> str:
        """Gets a translated color code from the GUI section, defaulting to white."""
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.GUI):
            return color_codes.WHITE
        color = self.locale_store.get_string(LanguageFileType.GUI, path)
        if color is None:
            return color_codes.WHITE
        return self.apply_placeholders_and_colors(color)

    # --- Items ---

    def get_vanilla_item_name(self, material: Optional[str]) -> str:
        """Gets a display name for a material such as 'DIAMOND_SWORD'.

        Uses items 'item.<MATERIAL>.name' when present, otherwise the
        title-cased material name.
        """
        self._ensure_ready()
        if not material:
            return UNKNOWN_ITEM

        def compute() -> str:
            name = self.locale_store.get_string(LanguageFileType.ITEMS, f"item.{material}.name")
            if name is None:
                return formatting.format_enum_name(material)
            return self.renderer.render_with_placeholders_and_color(name)

        return self._memoize(CacheCategory.MATERIAL_NAME, f"material|{material}", compute)

    def get_vanilla_item_lore(self, material: Optional[str]) -> Tuple[str, ...]:
        if not material:
            return ()
        return self.get_item_lore(f"item.{material}.lore")

    def get_item_name(self, key: str, placeholders: PlaceholderMap = None) -> str:
        """Gets an item name; the key itself stands in when none is defined."""
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.ITEMS):
            return key
        name = self.locale_store.get_string(LanguageFileType.ITEMS, key)
        if name is None:
            return key
        return self.apply_placeholders_and_colors(name, placeholders)

    def get_item_lore(self, key: str, placeholders: PlaceholderMap = None) -> Tuple[str, ...]:
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.ITEMS):
            return ()
        return self._resolve_lines(CacheCategory.ITEM_LORE, key, placeholders)

    def get_item_lore_as_list(self, key: str, placeholders: PlaceholderMap = None) -> List[str]:
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.ITEMS):
            return []
        return list(self._resolve_lines(CacheCategory.ITEM_LORE_LIST, key, placeholders))

    def get_item_lore_multiline(self, key: str, placeholders: PlaceholderMap = None) -> List[str]:
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.ITEMS):
            return []
        lines = self.locale_store.get_string_list(LanguageFileType.ITEMS, key)
        return self.renderer.render_multiline(lines, placeholders, self.registry.get(CacheCategory.RENDERED_STRING))

    # --- Formatting ---

    def format_number(self, number: float) -> str:
        """Formats a number with K/M/B/T suffixes, using formats from the formatting section."""
        self._ensure_ready()
        if not self.is_section_active(LanguageFileType.FORMATTING):
            return formatting.format_number(number)

        def lookup_format(key: str, default: str) -> str:
            value = self.locale_store.get_string(LanguageFileType.FORMATTING, key)
            return default if value is None else value

        return formatting.format_number(number, lookup_format)

    def get_formatted_mob_name(self, entity_type: Optional[str]) -> str:
        """Gets a display name for an entity type such as 'CAVE_SPIDER'."""
        self._ensure_ready()
        if not entity_type or entity_type == UNKNOWN_ENTITY_TYPE:
            return UNKNOWN_ENTITY

        def compute() -> str:
            name = self.locale_store.get_string(LanguageFileType.FORMATTING, f"mob_names.{entity_type}")
            if name is None:
                return formatting.format_enum_name(entity_type)
            return self.renderer.render_with_placeholders_and_color(name)

        return self._memoize(CacheCategory.ENTITY_NAME, f"mob_name|{entity_type}", compute)

    def format_enum_name(self, enum_name: str) -> str:
        return formatting.format_enum_name(enum_name)

    def get_small_caps(self, text: Optional[str]) -> str:
        if not text:
            return ""
        return self._memoize(CacheCategory.SMALL_CAPS, f"smallcaps|{text}", lambda: formatting.to_small_caps(text))
