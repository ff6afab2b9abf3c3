import pytest

from langcore.core.language_system import LanguageSystem
from langcore.domain.exceptions import InvalidArgumentError
from langcore.domain.models.common import CacheCategory, LanguageFileType
from langcore.infrastructure.localization.memory_store import InMemoryLocaleStore
from langcore.infrastructure.localization.yaml_locale_store import YamlLocaleStore


def test_builder_creates_yaml_backed_system(language_dir):
    system = (
        LanguageSystem.builder()
        .language_dir(language_dir)
        .locale("en_US")
        .file_types(LanguageFileType.MESSAGES, LanguageFileType.GUI)
        .cache_capacities({CacheCategory.GUI_NAME: 5})
        .build()
    )
    system.load()

    assert isinstance(system.locale_store, YamlLocaleStore)
    assert system.locale_store.active_sections == frozenset({LanguageFileType.MESSAGES, LanguageFileType.GUI})
    assert system.language_service.get_gui_item_name("menu.close") == "§cClose"
    assert system.language_service.statistics()["categories"]["gui-name"]["capacity"] == 5


def test_builder_requires_file_types(language_dir):
    with pytest.raises(ValueError, match="At least one file type"):
        LanguageSystem.builder().language_dir(language_dir).file_types().build()


def test_builder_rejects_bad_capacity():
    with pytest.raises(InvalidArgumentError):
        LanguageSystem.builder().cache_capacities({CacheCategory.GUI_NAME: 0}).build()


def test_services_share_counters(sample_sections):
    system = LanguageSystem.builder().locale_store(InMemoryLocaleStore(sample_sections)).build()
    service = system.language_service
    assert service.renderer.counters is service.counters
    assert system.message_service.language_service is service


def test_reload_clears_caches_and_key_memo(sample_sections, mocker):
    store = InMemoryLocaleStore(sample_sections)
    system = LanguageSystem.builder().locale_store(store).build()
    system.load()
    system.language_service.get_small_caps("shop")
    clear_memo = mocker.spy(system.message_service, "clear_key_exists_cache")
    reload_store = mocker.spy(store, "reload")

    system.reload()

    clear_memo.assert_called_once()
    reload_store.assert_called_once()
    assert system.language_service.statistics()["categories"]["small-caps"]["size"] == 0
