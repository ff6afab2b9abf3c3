"""Composition of the locale store, language service and message service.

LanguageSystem wires one locale store, one cache registry and the two
services together. Build it with LanguageSystem.builder().
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

from langcore.core.services.language_service import LanguageService
from langcore.core.services.message_service import MessageService
from langcore.domain.interfaces.locale_store import LocaleStore
from langcore.domain.models.common import CacheCategory, LanguageFileType
from langcore.infrastructure.cache.counters import HitMissCounters
from langcore.infrastructure.cache.registry import CacheRegistry
from langcore.infrastructure.localization.memory_store import DEFAULT_LOCALE
from langcore.infrastructure.localization.text_renderer import TextRenderer
from langcore.infrastructure.localization.yaml_locale_store import YamlLocaleStore

logger = logging.getLogger(__name__)


class LanguageSystem:
    """Owns the language service and message service for one locale."""

    def __init__(self, locale_store: LocaleStore, registry: CacheRegistry):
        counters = HitMissCounters()
        self.locale_store = locale_store
        self.language_service = LanguageService(
            locale_store,
            registry=registry,
            renderer=TextRenderer(counters),
            counters=counters,
        )
        self.message_service = MessageService(self.language_service)

    @staticmethod
    def builder() -> "LanguageSystemBuilder":
        return LanguageSystemBuilder()

    def load(self) -> None:
        self.language_service.load()

    def reload(self) -> None:
        """Reloads locale content, clearing caches and the key-exists memo."""
        self.language_service.reload()
        self.message_service.clear_key_exists_cache()


class LanguageSystemBuilder:
    """Fluent builder for LanguageSystem.

    Example:
        >>> system = (LanguageSystem.builder()
        ...           .language_dir("lang")
        ...           .locale("en_US")
        ...           .file_types(LanguageFileType.MESSAGES)
        ...           .build())
    """

    def __init__(self):
        self._language_dir: Path = Path("language")
        self._defaults_dir: Optional[Path] = None
        self._locale: str = DEFAULT_LOCALE
        self._file_types: List[LanguageFileType] = list(LanguageFileType)
        self._cache_capacities: dict = {}
        self._locale_store: Optional[LocaleStore] = None

    def language_dir(self, path: Union[str, Path]) -> "LanguageSystemBuilder":
        self._language_dir = Path(path)
        return self

    def defaults_dir(self, path: Optional[Union[str, Path]]) -> "LanguageSystemBuilder":
        self._defaults_dir = Path(path) if path is not None else None
        return self

    def locale(self, locale: str) -> "LanguageSystemBuilder":
        self._locale = locale
        return self

    def file_types(self, *file_types: LanguageFileType) -> "LanguageSystemBuilder":
        self._file_types = list(file_types)
        return self

    def cache_capacities(self, capacities: Mapping[CacheCategory, int]) -> "LanguageSystemBuilder":
        self._cache_capacities = dict(capacities)
        return self

    def locale_store(self, store: LocaleStore) -> "LanguageSystemBuilder":
        """Uses a ready-made store instead of reading YAML files."""
        self._locale_store = store
        return self

    def build(self) -> LanguageSystem:
        """Creates the LanguageSystem.

        Raises:
            ValueError: If no file types were given.
            InvalidArgumentError: If a cache capacity is not positive.
        """
        if not self._file_types:
            raise ValueError("At least one file type must be specified")
        store = self._locale_store or YamlLocaleStore(
            self._language_dir,
            locale=self._locale,
            file_types=self._file_types,
            defaults_dir=self._defaults_dir,
        )
        registry = CacheRegistry(self._cache_capacities)
        logger.info(
            f"Building LanguageSystem for locale '{store.locale}' "
            f"with {', '.join(ft.file_name for ft in self._file_types)}"
        )
        return LanguageSystem(store, registry)
