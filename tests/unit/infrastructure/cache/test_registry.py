import pytest

from langcore.domain.exceptions import InvalidArgumentError
from langcore.domain.models.common import CacheCategory
from langcore.infrastructure.cache.counters import AtomicCounter, HitMissCounters
from langcore.infrastructure.cache.registry import (
    DEFAULT_CAPACITIES,
    CacheRegistry,
    parse_capacity_overrides,
)


def test_registry_creates_every_category_with_default_capacity():
    registry = CacheRegistry()
    assert set(registry.categories()) == set(CacheCategory)
    assert registry.capacities() == DEFAULT_CAPACITIES
    assert registry.capacities()[CacheCategory.RENDERED_STRING] == 1000
    assert registry.capacities()[CacheCategory.SMALL_CAPS] == 500
    assert registry.capacities()[CacheCategory.ENTITY_NAME] == 250


def test_registry_applies_overrides():
    registry = CacheRegistry({CacheCategory.GUI_NAME: 7})
    assert registry.get(CacheCategory.GUI_NAME).capacity() == 7
    assert registry.get(CacheCategory.GUI_LORE).capacity() == 250


def test_registry_rejects_bad_capacity():
    with pytest.raises(InvalidArgumentError):
        CacheRegistry({CacheCategory.GUI_NAME: 0})


def test_clear_all_empties_every_category():
    registry = CacheRegistry()
    for category in registry.categories():
        registry.get(category).put("key", "value")
    capacities_before = registry.capacities()

    registry.clear_all()

    assert all(size == 0 for size in registry.sizes().values())
    assert registry.capacities() == capacities_before


def test_resize_category():
    registry = CacheRegistry()
    registry.resize(CacheCategory.MATERIAL_NAME, 3)
    assert registry.capacities()[CacheCategory.MATERIAL_NAME] == 3


def test_parse_capacity_overrides():
    overrides = parse_capacity_overrides({"gui_name": "12", "small-caps": 9, "bogus": 4})
    assert overrides == {CacheCategory.GUI_NAME: 12, CacheCategory.SMALL_CAPS: 9}


@pytest.mark.parametrize("value", ["many", 0, -1])
def test_parse_capacity_overrides_rejects_bad_values(value):
    with pytest.raises(InvalidArgumentError):
        parse_capacity_overrides({"gui-name": value})


def test_atomic_counter():
    counter = AtomicCounter()
    assert counter.increment() == 1
    assert counter.increment(4) == 5
    counter.reset()
    assert counter.value == 0


def test_hit_miss_counters_ratio():
    counters = HitMissCounters()
    assert counters.hit_ratio() == 0.0
    counters.record_hit()
    counters.record_miss()
    counters.record_miss()
    counters.record_hit()
    assert counters.snapshot() == (2, 2)
    assert counters.hit_ratio() == 0.5
    counters.reset()
    assert counters.snapshot() == (0, 0)
