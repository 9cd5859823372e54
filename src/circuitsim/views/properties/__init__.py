"""Properties panel views."""

from circuitsim.views.properties.properties_panel import PropertiesPanel, SIValueWidget

__all__ = [
    "PropertiesPanel",
    "SIValueWidget",
]
