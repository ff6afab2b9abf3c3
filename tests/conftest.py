import os
import pytest
from typer.testing import CliRunner
from pathlib import Path

import yaml

from langcore.core.services.language_service import LanguageService
from langcore.domain.models.common import LanguageFileType
from langcore.infrastructure.cache.counters import HitMissCounters
from langcore.infrastructure.cache.registry import CacheRegistry
from langcore.infrastructure.config import settings
from langcore.infrastructure.localization.memory_store import InMemoryLocaleStore
from langcore.infrastructure.localization.text_renderer import TextRenderer

SAMPLE_SECTIONS = {
    LanguageFileType.MESSAGES: {
        "prefix": "&8[&bTest&8] &r",
        "welcome": {
            "message": "&aWelcome, {player}!",
            "title": "&6Hello {player}",
            "subtitle": "&7Enjoy your stay",
            "action_bar": "&eYou have {coins} coins",
            "sound": "ENTITY_PLAYER_LEVELUP",
        },
        "muted": {
            "enabled": False,
            "message": "&cYou should not see this",
        },
        "title_only": {
            "title": "&bBig news",
        },
        "bad_sound": {
            "message": "&fBeep",
            "sound": "not a sound!",
        },
        "plain": "Hello {name}",
    },
    LanguageFileType.GUI: {
        "menu": {
            "title": "&1Main Menu",
            "close": "&cClose",
            "info_lore": ["&7Line one", "&7Owner: {owner}"],
            "desc_lore": ["&7Desc: {d}", "&8Footer"],
        },
        "colors": {"primary": "&b"},
    },
    LanguageFileType.FORMATTING: {
        "format_number": {"thousand": "{s}k", "million": "{s}mil"},
        "mob_names": {"CAVE_SPIDER": "&2Cave Spider"},
    },
    LanguageFileType.ITEMS: {
        "item": {
            "DIAMOND_SWORD": {"name": "&bShiny Sword", "lore": ["&7Sharp", "&7Very sharp"]},
        },
        "custom": {
            "wand": "&dMagic Wand {level}",
            "wand_lore": ["&5Power: {power}", "&5{effects}"],
        },
    },
}


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def sample_sections():
    return SAMPLE_SECTIONS


@pytest.fixture
def memory_store():
    """In-memory store loaded with every sample section."""
    store = InMemoryLocaleStore(SAMPLE_SECTIONS)
    store.load()
    return store


@pytest.fixture
def counters():
    return HitMissCounters()


@pytest.fixture
def language_service(memory_store, counters):
    """LanguageService over the sample sections with fresh caches."""
    return LanguageService(
        memory_store,
        registry=CacheRegistry(),
        renderer=TextRenderer(counters),
        counters=counters,
    )


def write_locale(base: Path, locale: str, sections: dict) -> Path:
    """Writes {LanguageFileType: mapping} as YAML files under base/locale."""
    locale_dir = base / locale
    locale_dir.mkdir(parents=True, exist_ok=True)
    for file_type, content in sections.items():
        (locale_dir / file_type.file_name).write_text(
            yaml.safe_dump(content, allow_unicode=True), encoding="utf-8"
        )
    return locale_dir


@pytest.fixture
def locale_writer():
    """Returns a helper writing locale YAML files: locale_writer(base, locale, sections)."""
    return write_locale


@pytest.fixture
def language_dir(tmp_path: Path):
    """Temporary language directory containing the sample sections for en_US."""
    base = tmp_path / "language"
    write_locale(base, "en_US", SAMPLE_SECTIONS)
    return base


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    """Keeps tests away from the user's config file and LANGCORE_ variables."""
    for name in list(os.environ):
        if name.startswith(settings.ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings, "DEFAULT_CONFIG_FILE", tmp_path / "no-config.yaml")
    monkeypatch.chdir(tmp_path)
    settings.reset_configuration()
    settings.clear_test_config()
    yield
    settings.reset_configuration()
    settings.clear_test_config()
