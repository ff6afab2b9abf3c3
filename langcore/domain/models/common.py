"""Defines common Value Objects used across different domain contexts.

These objects represent simple values such as locale codes, rendered
text and cache keys, ensuring consistency and type safety.
"""

from enum import Enum
from typing import Dict, NewType, Optional, TypedDict

# === Core Value Objects ===

# Using NewType for semantic clarity, although they are strings at runtime.
LocaleCode = NewType("LocaleCode", str)        # e.g. 'en_US'
RenderedText = NewType("RenderedText", str)    # Text after placeholders/colors

# === Caching Context ===
CacheKey = NewType("CacheKey", str)            # Derived key for a cache entry

# Shown in place of absent translations
MISSING_MESSAGE_FORMAT = "Missing message: {key}"
MISSING_MESSAGE_PREFIX = "Missing message:"


class LanguageFileType(Enum):
    """The four locale files, one per section of translatable content."""

    MESSAGES = "messages.yml"
    GUI = "gui.yml"
    FORMATTING = "formatting.yml"
    ITEMS = "items.yml"

    @property
    def file_name(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "LanguageFileType":
        """Looks up a file type by enum name or file name, case-insensitively."""
        normalized = name.strip().lower()
        for file_type in cls:
            if normalized in (file_type.name.lower(), file_type.value):
                return file_type
        raise ValueError(f"Unknown language file type: '{name}'")


class CacheCategory(Enum):
    """Fixed semantic buckets of cached content."""

    RENDERED_STRING = "rendered-string"
    PLAIN_STRING = "plain-string"
    ITEM_LORE = "item-lore"
    ITEM_LORE_LIST = "item-lore-list"
    GUI_NAME = "gui-name"
    GUI_LORE = "gui-lore"
    GUI_LORE_LIST = "gui-lore-list"
    ENTITY_NAME = "entity-name"
    SMALL_CAPS = "small-caps"
    MATERIAL_NAME = "material-name"

    @property
    def is_sequence(self) -> bool:
        """True for categories holding rendered line sequences instead of scalars."""
        return self in _SEQUENCE_CATEGORIES

    @property
    def section(self) -> Optional[LanguageFileType]:
        """The locale section a category resolves keys against, if any."""
        return _CATEGORY_SECTIONS.get(self)


_SEQUENCE_CATEGORIES = frozenset({
    CacheCategory.ITEM_LORE,
    CacheCategory.ITEM_LORE_LIST,
    CacheCategory.GUI_LORE,
    CacheCategory.GUI_LORE_LIST,
})

_CATEGORY_SECTIONS = {
    CacheCategory.RENDERED_STRING: LanguageFileType.MESSAGES,
    CacheCategory.PLAIN_STRING: LanguageFileType.MESSAGES,
    CacheCategory.ITEM_LORE: LanguageFileType.ITEMS,
    CacheCategory.ITEM_LORE_LIST: LanguageFileType.ITEMS,
    CacheCategory.GUI_NAME: LanguageFileType.GUI,
    CacheCategory.GUI_LORE: LanguageFileType.GUI,
    CacheCategory.GUI_LORE_LIST: LanguageFileType.GUI,
    CacheCategory.ENTITY_NAME: LanguageFileType.FORMATTING,
    CacheCategory.MATERIAL_NAME: LanguageFileType.ITEMS,
    # SMALL_CAPS transforms caller text and has no backing section
}

# --- Structured Data ---

class CategoryStats(TypedDict):
    """Size/capacity snapshot of a single category cache."""
    size: int
    capacity: int


class CacheStatistics(TypedDict):
    """Read-only snapshot returned by LanguageService.statistics()."""
    categories: Dict[str, CategoryStats]
    hits: int
    misses: int
    hit_ratio: float
