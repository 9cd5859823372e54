"""Tests for the component catalog."""

from circuitsim.models.component import COMPONENT_CLASSES, ComponentType
from circuitsim.models.component_catalog import COMPONENT_LIBRARY, get_catalog_entry


def test_catalog_covers_every_kind_once():
    types = [entry.type for entry in COMPONENT_LIBRARY]
    assert sorted(types, key=lambda t: t.value) == list(ComponentType)
    assert len(set(types)) == len(types)


def test_catalog_defaults():
    assert get_catalog_entry(ComponentType.BATTERY).defaults == {"voltage": 9.0}
    assert get_catalog_entry(ComponentType.RESISTOR).defaults == {"resistance": 100.0}
    assert get_catalog_entry(ComponentType.LED).defaults == {"resistance": 10.0}
    assert get_catalog_entry(ComponentType.SWITCH).defaults == {"is_closed": True}


def test_defaults_match_component_fields():
    for entry in COMPONENT_LIBRARY:
        field_names = {spec.name for spec in COMPONENT_CLASSES[entry.type].attributes}
        assert set(entry.defaults) == field_names


def test_shortcuts_are_unique():
    shortcuts = [entry.shortcut for entry in COMPONENT_LIBRARY]
    assert all(shortcuts)
    assert len(set(shortcuts)) == len(shortcuts)


def test_colors_are_hex():
    for entry in COMPONENT_LIBRARY:
        assert entry.color.startswith("#")
        assert len(entry.color) == 7
