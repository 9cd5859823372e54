"""Data models for CircuitSim."""

from circuitsim.models.component import (
    COMPONENT_SIZE,
    AttributeSpec,
    Battery,
    Component,
    ComponentType,
    Led,
    Resistor,
    Switch,
    create_component,
)
from circuitsim.models.component_catalog import (
    COMPONENT_LIBRARY,
    CatalogEntry,
    get_catalog_entry,
)
from circuitsim.models.circuit import Circuit

__all__ = [
    "COMPONENT_SIZE",
    "AttributeSpec",
    "Battery",
    "Component",
    "ComponentType",
    "Led",
    "Resistor",
    "Switch",
    "create_component",
    "COMPONENT_LIBRARY",
    "CatalogEntry",
    "get_catalog_entry",
    "Circuit",
]
