"""Catalog of component archetypes exposed in the library panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from circuitsim.models.component import ComponentType


@dataclass(frozen=True)
class CatalogEntry:
    """Static description of a placeable component kind."""

    type: ComponentType
    label: str
    color: str
    shortcut: str = ""
    defaults: dict[str, Any] = field(default_factory=dict)


COMPONENT_LIBRARY: tuple[CatalogEntry, ...] = (
    CatalogEntry(ComponentType.BATTERY, "Battery", "#10b981", "B", {"voltage": 9.0}),
    CatalogEntry(ComponentType.RESISTOR, "Resistor", "#f59e0b", "R", {"resistance": 100.0}),
    CatalogEntry(ComponentType.LED, "LED", "#ef4444", "L", {"resistance": 10.0}),
    CatalogEntry(ComponentType.SWITCH, "Switch", "#8b5cf6", "S", {"is_closed": True}),
)

_BY_TYPE = {entry.type: entry for entry in COMPONENT_LIBRARY}


def get_catalog_entry(comp_type: ComponentType) -> CatalogEntry:
    """Look up the catalog entry for a component type."""
    return _BY_TYPE[comp_type]
