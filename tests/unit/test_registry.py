"""Unit tests for the control registry."""

from unittest.mock import Mock

import pytest

from search_select.controls import ControlRegistry
from search_select.core.control import SearchSelectControl


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(clock):
    return ControlRegistry(idle_seconds=60, clock=clock)


def make_factory():
    return Mock(side_effect=lambda: Mock(spec=SearchSelectControl))


def test_reuses_control_for_same_key(registry):
    factory = make_factory()
    first = registry.get_or_create(("tab-1", "shop"), factory)
    assert registry.get_or_create(("tab-1", "shop"), factory) is first
    assert factory.call_count == 1
    assert len(registry) == 1


def test_keys_are_independent(registry):
    factory = make_factory()
    shop = registry.get_or_create(("tab-1", "shop"), factory)
    category = registry.get_or_create(("tab-1", "category"), factory)
    assert shop is not category
    assert len(registry) == 2


def test_pop_removes_without_unmounting(registry):
    control = registry.get_or_create(("tab-1", "shop"), make_factory())
    assert registry.pop(("tab-1", "shop")) is control
    assert registry.pop(("tab-1", "shop")) is None
    control.unmount.assert_not_called()


def test_abandoned_controls_are_unmounted_on_next_lookup(registry, clock):
    factory = make_factory()
    abandoned = registry.get_or_create(("closed-tab", "shop"), factory)
    clock.now = 30
    active = registry.get_or_create(("tab-2", "shop"), factory)

    clock.now = 75
    registry.get_or_create(("tab-2", "shop"), factory)

    abandoned.unmount.assert_called_once()
    active.unmount.assert_not_called()
    assert ("closed-tab", "shop") not in registry
    assert ("tab-2", "shop") in registry


def test_use_refreshes_idle_time(registry, clock):
    factory = make_factory()
    control = registry.get_or_create(("tab-1", "shop"), factory)
    for now in (50, 100, 150):
        clock.now = now
        assert registry.get_or_create(("tab-1", "shop"), factory) is control
    assert registry.evict_idle() == 0
    clock.now = 211
    assert registry.evict_idle() == 1
    control.unmount.assert_called_once()
