"""Properties panel for editing the selected component."""

from uuid import UUID

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from circuitsim.models.component import AttributeSpec, Component
from circuitsim.models.component_catalog import get_catalog_entry
from circuitsim.resources.icons import IconService
from circuitsim.utils.parsing import parse_number
from circuitsim.utils.si_prefix import format_si_value


class SIValueWidget(QWidget):
    """Line edit for a numeric value with a fixed unit label.

    The raw text is submitted as typed; the owner decides whether to
    accept it and calls ``set_value`` with the canonical value either way.
    """

    text_submitted = Signal(str)

    def __init__(self, unit: str = "", hint: str = "", parent=None):
        super().__init__(parent)
        self._value = 0.0
        self._unit = unit
        self._hint = hint

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self._edit = QLineEdit()
        self._edit.setMinimumWidth(80)
        if hint:
            self._edit.setPlaceholderText(hint)
        self._edit.editingFinished.connect(self._on_editing_finished)
        self._edit.textChanged.connect(self._validate)
        layout.addWidget(self._edit)

        if unit:
            unit_label = QLabel(unit)
            unit_label.setMinimumWidth(20)
            layout.addWidget(unit_label)

    @property
    def line_edit(self) -> QLineEdit:
        return self._edit

    @property
    def value(self) -> float:
        return self._value

    def set_value(self, val: float) -> None:
        """Show the canonical value and clear any error marking."""
        self._value = val
        self._edit.setText(f"{val:g}")
        tooltip = format_si_value(val, self._unit)
        if self._hint:
            tooltip += f" (suggested range: {self._hint})"
        self._edit.setToolTip(tooltip)
        self.set_invalid(False)

    def set_invalid(self, invalid: bool) -> None:
        """Flag the field for the stylesheet's invalid border."""
        self._edit.setProperty("invalid", invalid)
        self._edit.style().unpolish(self._edit)
        self._edit.style().polish(self._edit)

    def is_invalid(self) -> bool:
        return bool(self._edit.property("invalid"))

    def _validate(self) -> None:
        """Mark unparseable text while typing."""
        text = self._edit.text().strip()
        self.set_invalid(bool(text) and not parse_number(text).ok)

    def _on_editing_finished(self) -> None:
        text = self._edit.text().strip()
        if not text or text == f"{self._value:g}":
            return
        self.text_submitted.emit(text)


class PropertiesPanel(QWidget):
    """
    Panel for editing the selected component's electrical attributes.

    Signals:
        attribute_edited: (component id, attribute name, raw text)
        switch_toggled: component id of a switch to flip
        delete_requested: the selected component should be removed
    """

    attribute_edited = Signal(object, str, str)
    switch_toggled = Signal(object)
    delete_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        self._component: Component | None = None
        self._widgets: dict[str, QWidget] = {}

        self._setup_ui()
        self._update_display()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self._title_label = QLabel()
        self._title_label.setStyleSheet("font-weight: 600; font-size: 14px;")
        layout.addWidget(self._title_label)

        self._empty_label = QLabel("Click a component on the canvas to edit it.")
        self._empty_label.setWordWrap(True)
        layout.addWidget(self._empty_label)

        self._form_container = QWidget()
        self._form_layout = QFormLayout(self._form_container)
        self._form_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._form_container)

        self._delete_button = QPushButton("Delete Component")
        self._delete_button.setIcon(IconService.get_icon("trash", "#ffffff"))
        self._delete_button.setStyleSheet(
            "QPushButton { background-color: #ef4444; color: white;"
            " font-weight: 600; border-radius: 4px; padding: 6px; }"
            "QPushButton:hover { background-color: #dc2626; }"
        )
        self._delete_button.clicked.connect(self.delete_requested)
        layout.addWidget(self._delete_button)

        layout.addStretch()

    @property
    def component(self) -> Component | None:
        return self._component

    def widget_for(self, name: str) -> QWidget | None:
        """Editor widget for an attribute of the shown component."""
        return self._widgets.get(name)

    def set_component(self, component: Component | None) -> None:
        """Show a component, or the empty hint for None."""
        same = (
            component is not None
            and self._component is not None
            and component.id == self._component.id
        )
        self._component = component
        if same:
            self._refresh_values()
        else:
            self._update_display()

    def mark_rejected(self, name: str) -> None:
        """Restore the canonical value and flag the field after a refused edit."""
        widget = self._widgets.get(name)
        if isinstance(widget, SIValueWidget) and self._component is not None:
            widget.set_value(self._component.get_attribute(name))
            widget.set_invalid(True)

    def _update_display(self) -> None:
        self._clear_params()
        component = self._component

        has_component = component is not None
        self._empty_label.setVisible(not has_component)
        self._form_container.setVisible(has_component)
        self._delete_button.setVisible(has_component)

        if component is None:
            self._title_label.setText("Properties")
            return

        entry = get_catalog_entry(component.type)
        self._title_label.setText(f"Selected: {entry.label} ({component.name})")
        for spec in component.attributes:
            widget = self._create_widget_for_attribute(component.id, spec)
            self._widgets[spec.name] = widget
            label = spec.label if spec.kind == "bool" else f"{spec.label} ({spec.unit})"
            self._form_layout.addRow(label, widget)
        self._refresh_values()

    def _refresh_values(self) -> None:
        component = self._component
        if component is None:
            return
        values = component.electrical_values()
        for name, widget in self._widgets.items():
            value = values[name]
            if isinstance(widget, SIValueWidget):
                widget.set_value(value)
            elif isinstance(widget, QPushButton):
                self._style_switch_button(widget, bool(value))

    def _clear_params(self) -> None:
        while self._form_layout.rowCount():
            self._form_layout.removeRow(0)
        self._widgets.clear()

    def _create_widget_for_attribute(self, component_id: UUID, spec: AttributeSpec) -> QWidget:
        if spec.kind == "bool":
            button = QPushButton()
            button.setMinimumHeight(32)
            button.clicked.connect(lambda: self.switch_toggled.emit(component_id))
            return button

        widget = SIValueWidget(spec.unit, spec.hint)
        widget.text_submitted.connect(
            lambda text, name=spec.name: self.attribute_edited.emit(component_id, name, text)
        )
        return widget

    @staticmethod
    def _style_switch_button(button: QPushButton, is_closed: bool) -> None:
        button.setText("CLOSED" if is_closed else "OPEN")
        background = "#22c55e" if is_closed else "#d1d5db"
        foreground = "white" if is_closed else "#374151"
        button.setStyleSheet(
            f"QPushButton {{ background-color: {background}; color: {foreground};"
            " font-weight: 600; border-radius: 4px; }}"
        )

