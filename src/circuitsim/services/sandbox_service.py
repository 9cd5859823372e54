"""Interaction controller owning the sandbox state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from PySide6.QtCore import QObject, QTimer, Signal

from circuitsim.models.circuit import Circuit
from circuitsim.models.component import Component, ComponentType, Switch
from circuitsim.services.circuit_evaluator import Measurements, evaluate
from circuitsim.services.settings_service import DEFAULT_REFRESH_INTERVAL_MS
from circuitsim.utils.hit_test import hit_test
from circuitsim.utils.parsing import ParseResult

logger = logging.getLogger(__name__)


@dataclass
class SandboxState:
    """Everything the views need to present the sandbox."""

    circuit: Circuit = field(default_factory=Circuit)
    selected_id: UUID | None = None
    powered: bool = False
    measurements: Measurements = field(default_factory=Measurements.zero)


class SandboxService(QObject):
    """
    Maps user gestures onto the circuit model and keeps measurements current.

    Every command runs synchronously and re-evaluates the circuit before
    returning. While powered, a timer re-evaluates periodically and emits
    ``tick`` so the canvas can animate current flow.

    Signals:
        components_changed: Emitted after components are added, removed or edited
        selection_changed: Emitted with the selected Component or None
        measurements_changed: Emitted with new Measurements when they differ
        power_changed: Emitted with the new power state
        tick: Emitted on every refresh timer timeout while powered
        attribute_rejected: Emitted with (attribute name, reason) for refused edits
    """

    components_changed = Signal()
    selection_changed = Signal(object)
    measurements_changed = Signal(object)
    power_changed = Signal(bool)
    tick = Signal()
    attribute_rejected = Signal(str, str)

    def __init__(
        self,
        refresh_interval_ms: int = DEFAULT_REFRESH_INTERVAL_MS,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._state = SandboxState()
        self._refresh_timer = QTimer(self)
        self._refresh_timer.setInterval(refresh_interval_ms)
        self._refresh_timer.timeout.connect(self._on_refresh)

    # Queries

    @property
    def state(self) -> SandboxState:
        """The live sandbox state (shared, not a copy)."""
        return self._state

    @property
    def circuit(self) -> Circuit:
        return self._state.circuit

    @property
    def is_refreshing(self) -> bool:
        """True while the powered refresh timer is running."""
        return self._refresh_timer.isActive()

    @property
    def refresh_interval(self) -> int:
        return self._refresh_timer.interval()

    def set_refresh_interval(self, interval_ms: int) -> None:
        """Change the powered refresh period; applies immediately if running."""
        self._refresh_timer.setInterval(interval_ms)

    def components(self) -> list[Component]:
        """Components in wiring order."""
        return list(self._state.circuit.components)

    def selected(self) -> Component | None:
        """Resolve the selected id against the circuit."""
        return self._state.circuit.get_component(self._state.selected_id)

    def measurements(self) -> Measurements:
        return self._state.measurements

    def is_powered(self) -> bool:
        return self._state.powered

    # Commands

    def add_component(self, kind: ComponentType | str) -> Component:
        """Append a new component with catalog defaults."""
        component = self._state.circuit.add(kind)
        logger.debug("Added %s at (%.0f, %.0f)", component.name, component.x, component.y)
        self._components_updated()
        return component

    def remove_component(self, component_id: UUID) -> Component | None:
        """Remove a component; unknown ids are ignored."""
        removed = self._state.circuit.remove(component_id)
        if removed is None:
            return None

        logger.debug("Removed %s", removed.name)
        if self._state.selected_id == component_id:
            self._set_selection(None)
        self._components_updated()
        return removed

    def delete_selected(self) -> Component | None:
        """Remove the currently selected component, if any."""
        if self._state.selected_id is None:
            return None
        return self.remove_component(self._state.selected_id)

    def set_attribute(self, component_id: UUID, name: str, value: Any) -> ParseResult:
        """Edit an electrical attribute; rejected values leave the model unchanged."""
        result = self._state.circuit.set_attribute(component_id, name, value)
        if not result.ok:
            self.attribute_rejected.emit(name, result.error)
            return result

        self._components_updated()
        if self._state.selected_id == component_id:
            self.selection_changed.emit(self.selected())
        return result

    def toggle_switch(self, component_id: UUID) -> bool:
        """Flip a switch between open and closed; other kinds are ignored."""
        component = self._state.circuit.get_component(component_id)
        if not isinstance(component, Switch):
            return False
        return self.set_attribute(component_id, "is_closed", not component.is_closed).ok

    def move_component(self, component_id: UUID, x: float, y: float) -> bool:
        """Reposition a component on the canvas."""
        if not self._state.circuit.move_component(component_id, x, y):
            return False
        self.components_changed.emit()
        return True

    def set_powered(self, powered: bool) -> None:
        """Turn the supply on or off, starting or stopping the refresh timer."""
        powered = bool(powered)
        if powered == self._state.powered:
            return

        self._state.powered = powered
        if powered:
            self._refresh_timer.start()
            logger.debug("Power on, refreshing every %d ms", self._refresh_timer.interval())
        else:
            self._refresh_timer.stop()
            logger.debug("Power off")

        self.power_changed.emit(powered)
        self._reevaluate()

    def toggle_power(self) -> bool:
        """Flip the power state and return the new value."""
        self.set_powered(not self._state.powered)
        return self._state.powered

    def select(self, component_id: UUID | None) -> Component | None:
        """Select a component by id; unknown ids clear the selection."""
        component = self._state.circuit.get_component(component_id)
        self._set_selection(component.id if component else None)
        return component

    def select_at(self, x: float, y: float) -> Component | None:
        """Select the component under a canvas point, or clear the selection."""
        component = hit_test(x, y, self._state.circuit.iter_components())
        self._set_selection(component.id if component else None)
        return component

    def reset(self) -> None:
        """Clear components, selection, power and measurements."""
        self._refresh_timer.stop()
        was_powered = self._state.powered
        self._state.circuit.clear()
        self._state.selected_id = None
        self._state.powered = False
        self._state.measurements = Measurements.zero()
        logger.info("Sandbox reset")

        self.components_changed.emit()
        self.selection_changed.emit(None)
        if was_powered:
            self.power_changed.emit(False)
        self.measurements_changed.emit(self._state.measurements)

    def shutdown(self) -> None:
        """Stop the refresh timer; call before the owning window closes."""
        self._refresh_timer.stop()

    # Internals

    def _set_selection(self, component_id: UUID | None) -> None:
        if component_id == self._state.selected_id:
            return
        self._state.selected_id = component_id
        self.selection_changed.emit(self.selected())

    def _components_updated(self) -> None:
        self.components_changed.emit()
        self._reevaluate()

    def _reevaluate(self) -> None:
        measurements = evaluate(self._state.circuit.iter_components(), self._state.powered)
        if measurements != self._state.measurements:
            self._state.measurements = measurements
            logger.debug(
                "Measurements: %s, %s, %s",
                measurements.format_voltage(),
                measurements.format_current(),
                measurements.format_power(),
            )
            self.measurements_changed.emit(measurements)

    def _on_refresh(self) -> None:
        self._reevaluate()
        self.tick.emit()
