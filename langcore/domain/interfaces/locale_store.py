"""Interface for locale stores.

A locale store supplies raw strings by section and key for the active
locale. The language service only ever reads from it.
"""

import abc
from typing import FrozenSet, List, Optional

from langcore.domain.models.common import LanguageFileType, LocaleCode


class LocaleStore(abc.ABC):
    """Abstract Base Class for read-only access to locale content."""

    @property
    @abc.abstractmethod
    def locale(self) -> LocaleCode:
        """The locale whose content this store currently serves."""
        pass

    @property
    @abc.abstractmethod
    def active_sections(self) -> FrozenSet[LanguageFileType]:
        """The file types this store loads. Other sections are always empty."""
        pass

    @abc.abstractmethod
    def get_string(self, section: LanguageFileType, key: str) -> Optional[str]:
        """Gets a scalar value as a string.

        Args:
            section: The locale file to read from.
            key: Dotted path to the value (e.g., 'welcome.message').

        Returns:
            The value, or None if absent or not a scalar.
        """
        pass

    @abc.abstractmethod
    def get_string_list(self, section: LanguageFileType, key: str) -> List[str]:
        """Gets an ordered list of strings. Returns an empty list if absent."""
        pass

    @abc.abstractmethod
    def get_boolean(self, section: LanguageFileType, key: str, default: bool) -> bool:
        pass

    @abc.abstractmethod
    def contains(self, section: LanguageFileType, key: str) -> bool:
        pass

    @abc.abstractmethod
    def load(self) -> None:
        """Loads content from the store's source."""
        pass

    @abc.abstractmethod
    def reload(self) -> None:
        """Re-reads content so subsequent lookups reflect source changes."""
        pass
