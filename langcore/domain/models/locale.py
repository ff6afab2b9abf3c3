"""Locale data record.

Holds the parsed content of the four locale files for one locale. The
record is immutable; a reload builds a new record by replacing exactly
one section at a time.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from langcore.domain.models.common import LanguageFileType

_EMPTY: Mapping[str, Any] = MappingProxyType({})

_SECTION_FIELDS = {
    LanguageFileType.MESSAGES: "messages",
    LanguageFileType.GUI: "gui",
    LanguageFileType.FORMATTING: "formatting",
    LanguageFileType.ITEMS: "items",
}


@dataclass(frozen=True)
class LocaleData:
    """Parsed sections of a locale: messages, gui, formatting and items."""

    messages: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    gui: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    formatting: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    items: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    @classmethod
    def empty(cls) -> "LocaleData":
        """Creates a record with every section empty."""
        return cls()

    def section(self, file_type: LanguageFileType) -> Mapping[str, Any]:
        return getattr(self, _SECTION_FIELDS[file_type])

    def with_section(self, file_type: LanguageFileType, content: Mapping[str, Any]) -> "LocaleData":
        """Returns a copy with one section replaced and the other three preserved."""
        return replace(self, **{_SECTION_FIELDS[file_type]: MappingProxyType(dict(content))})
