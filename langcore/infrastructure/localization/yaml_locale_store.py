"""YAML-backed locale store.

Reads <language_dir>/<locale>/<file>.yml for each active file type.
When a defaults directory is configured, top-level keys missing from the
user's file are filled from <defaults_dir>/<locale>/<file>.yml. Files are
only ever read; nothing is written back.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import yaml

from langcore.domain.models.common import LanguageFileType
from langcore.infrastructure.localization.memory_store import DEFAULT_LOCALE, InMemoryLocaleStore

logger = logging.getLogger(__name__)


class YamlLocaleStore(InMemoryLocaleStore):
    """Locale store loading its sections from YAML files."""

    def __init__(
        self,
        language_dir: Union[str, Path],
        locale: str = DEFAULT_LOCALE,
        file_types: Optional[Iterable[LanguageFileType]] = None,
        defaults_dir: Optional[Union[str, Path]] = None,
    ):
        """Initializes the store. Call load() before looking anything up.

        Args:
            language_dir: Directory holding one subdirectory per locale.
            locale: Locale to serve (e.g., 'en_US').
            file_types: File types to load. Defaults to all four.
            defaults_dir: Optional directory with bundled default files.
        """
        super().__init__(locale=locale, file_types=file_types)
        self.language_dir = Path(language_dir)
        self.defaults_dir = Path(defaults_dir) if defaults_dir is not None else None

    def locale_file(self, file_type: LanguageFileType) -> Path:
        return self.language_dir / self.locale / file_type.file_name

    def _read_section(self, file_type: LanguageFileType) -> Dict[str, Any]:
        content: Dict[str, Any] = {}
        if self.defaults_dir is not None:
            content.update(read_yaml_mapping(self.defaults_dir / self.locale / file_type.file_name))
        user_file = self.locale_file(file_type)
        user_content = read_yaml_mapping(user_file)
        if content and user_content:
            missing = [key for key in content if key not in user_content]
            if missing:
                logger.info(f"Filled {len(missing)} missing keys in {user_file} from defaults")
        content.update(user_content)
        return content


def read_yaml_mapping(path: Path) -> Dict[str, Any]:
    """Reads a YAML file whose top level is a mapping.

    Missing, unreadable or malformed files log a message and yield an
    empty mapping, so a broken file degrades to missing translations.
    """
    if not path.is_file():
        logger.debug(f"Locale file not found: {path}")
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load or parse locale file {path}: {e}")
        return {}
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        logger.warning(f"Locale file {path} did not contain a mapping; ignoring it.")
        return {}
    return loaded
