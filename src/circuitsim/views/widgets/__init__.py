"""Reusable UI widgets."""

from circuitsim.views.widgets.measurement_panel import (
    MeasurementCard,
    MeasurementPanel,
)
from circuitsim.views.widgets.status_widgets import (
    IconLabel,
    CoordinateWidget,
    PowerStatusWidget,
)

__all__ = [
    "MeasurementCard",
    "MeasurementPanel",
    "IconLabel",
    "CoordinateWidget",
    "PowerStatusWidget",
]
