"""In-memory locale store.

Serves locale content from plain mappings. Also the base class for the
YAML-backed store, which only differs in where the mappings come from.
"""

import logging
import threading
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from langcore.domain.interfaces.locale_store import LocaleStore
from langcore.domain.models.common import LanguageFileType, LocaleCode
from langcore.domain.models.locale import LocaleData

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = LocaleCode("en_US")

_MISSING = object()


def lookup_path(mapping: Mapping[str, Any], key: str) -> Any:
    """Finds a dotted key in nested mappings.

    A literal top-level key (one that itself contains dots) takes
    precedence over walking the nested path.

    Returns:
        The value, or the module's _MISSING marker if absent.
    """
    if key in mapping:
        return mapping[key]
    node: Any = mapping
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return _MISSING
        node = node[part]
    return node


def stringify_keys(value: Any) -> Any:
    """Converts every mapping key to a string, recursing into nested values.

    YAML parses keys like `1` or `true` as int or bool; lookups walk
    dotted string paths, so such keys must match their string form.
    """
    if isinstance(value, Mapping):
        return {_key_to_string(key): stringify_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [stringify_keys(item) for item in value]
    return value


def _key_to_string(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def scalar_to_string(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class InMemoryLocaleStore(LocaleStore):
    """Locale store backed by in-memory section mappings.

    Content changes staged with set_section() become visible on the next
    load() or reload(), which swap in a new LocaleData in one step.
    """

    def __init__(
        self,
        sections: Optional[Mapping[LanguageFileType, Mapping[str, Any]]] = None,
        locale: str = DEFAULT_LOCALE,
        file_types: Optional[Iterable[LanguageFileType]] = None,
    ):
        self._locale = LocaleCode(locale)
        self._active: FrozenSet[LanguageFileType] = frozenset(
            file_types if file_types is not None else LanguageFileType
        )
        self._sources: Dict[LanguageFileType, Mapping[str, Any]] = dict(sections or {})
        self._data = LocaleData.empty()
        self._lock = threading.Lock()
        self._loaded = False

    @property
    def locale(self) -> LocaleCode:
        return self._locale

    @property
    def active_sections(self) -> FrozenSet[LanguageFileType]:
        return self._active

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def data(self) -> LocaleData:
        return self._data

    def set_section(self, section: LanguageFileType, content: Mapping[str, Any]) -> None:
        """Stages new content for a section; visible after the next reload."""
        self._sources[section] = dict(content)

    def load(self) -> None:
        data = LocaleData.empty()
        for file_type in sorted(self._active, key=lambda ft: ft.name):
            data = data.with_section(file_type, stringify_keys(self._read_section(file_type)))
        with self._lock:
            self._data = data
            self._loaded = True
        logger.info(f"Loaded locale '{self._locale}' ({', '.join(sorted(ft.file_name for ft in self._active))})")

    def reload(self) -> None:
        logger.info(f"Reloading locale '{self._locale}'")
        self.load()

    def switch_locale(self, locale: str) -> None:
        """Changes the served locale and reloads."""
        self._locale = LocaleCode(locale)
        self.reload()

    def _read_section(self, file_type: LanguageFileType) -> Mapping[str, Any]:
        return self._sources.get(file_type, {})

    # --- LocaleStore lookups ---

    def _find(self, section: LanguageFileType, key: str) -> Tuple[bool, Any]:
        if section not in self._active:
            return False, None
        value = lookup_path(self._data.section(section), key)
        if value is _MISSING:
            return False, None
        return True, value

    def get_string(self, section: LanguageFileType, key: str) -> Optional[str]:
        found, value = self._find(section, key)
        return scalar_to_string(value) if found else None

    def get_string_list(self, section: LanguageFileType, key: str) -> List[str]:
        found, value = self._find(section, key)
        if not found or not isinstance(value, (list, tuple)):
            return []
        return [text for text in (scalar_to_string(item) for item in value) if text is not None]

    def get_boolean(self, section: LanguageFileType, key: str, default: bool) -> bool:
        found, value = self._find(section, key)
        if not found:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        return default

    def contains(self, section: LanguageFileType, key: str) -> bool:
        found, _ = self._find(section, key)
        return found
