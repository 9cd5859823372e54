"""Measurement readouts with Ohm's law reference and usage notes."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from circuitsim.resources.icons import IconService
from circuitsim.services.circuit_evaluator import Measurements
from circuitsim.services.theme_service import LIGHT_THEME, Theme

OHMS_LAW_FORMULAS = (
    ("V = I × R", "Voltage = Current × Resistance"),
    ("P = V × I", "Power = Voltage × Current"),
    ("I = V / R", "Current = Voltage / Resistance"),
)

INSTRUCTIONS = (
    "Click a component in the library to add it to the loop.",
    "Components are wired in series in the order they are added.",
    "Click a component on the canvas to select and edit it.",
    "Drag a selected component to move it.",
    "Turn the power on to see current flow.",
    "Open a switch to break the circuit.",
)


class MeasurementCard(QFrame):
    """Single labelled readout, tinted with its measurement color."""

    def __init__(self, title: str, icon_name: str, color: str, parent=None):
        super().__init__(parent)
        self._color = color
        self.setObjectName("MeasurementCard")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 8, 10, 8)
        layout.setSpacing(2)

        header = QHBoxLayout()
        header.setSpacing(4)
        self._icon_label = QLabel()
        self._icon_label.setFixedSize(14, 14)
        header.addWidget(self._icon_label)
        self._title_label = QLabel(title)
        self._title_label.setStyleSheet("font-size: 12px;")
        header.addWidget(self._title_label)
        header.addStretch()
        layout.addLayout(header)

        self._value_label = QLabel()
        self._value_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        layout.addWidget(self._value_label)

        self._icon_name = icon_name
        self.set_color(color)

    def text(self) -> str:
        return self._value_label.text()

    def set_text(self, text: str) -> None:
        self._value_label.setText(text)

    def set_color(self, color: str) -> None:
        self._color = color
        self._value_label.setStyleSheet(
            f"font-size: 22px; font-weight: 700; color: {color};"
        )
        self.setStyleSheet(
            f"QFrame#MeasurementCard {{ border: 1px solid {color}; border-radius: 8px; }}"
        )
        icon = IconService.get_icon(self._icon_name, color)
        if not icon.isNull():
            self._icon_label.setPixmap(icon.pixmap(14, 14))


class MeasurementPanel(QWidget):
    """Voltage, current and power cards above the formula and help boxes."""

    def __init__(self, theme: Theme = LIGHT_THEME, parent=None):
        super().__init__(parent)
        self._theme = theme
        self._setup_ui()
        self.set_measurements(Measurements.zero())

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        title = QLabel("Measurements")
        title.setStyleSheet("font-weight: 600; font-size: 15px;")
        layout.addWidget(title)

        colors = self._theme.colors
        self._voltage_card = MeasurementCard("Voltage", "zap", colors.voltage)
        self._current_card = MeasurementCard("Current", "gauge", colors.current)
        self._power_card = MeasurementCard("Power", "power", colors.power)
        for card in (self._voltage_card, self._current_card, self._power_card):
            layout.addWidget(card)

        formulas_title = QLabel("Ohm's Law")
        formulas_title.setStyleSheet("font-weight: 600; margin-top: 8px;")
        layout.addWidget(formulas_title)
        for formula, description in OHMS_LAW_FORMULAS:
            label = QLabel(f"<b>{formula}</b><br><small>{description}</small>")
            label.setTextFormat(Qt.TextFormat.RichText)
            layout.addWidget(label)

        help_title = QLabel("How to use")
        help_title.setStyleSheet("font-weight: 600; margin-top: 8px;")
        layout.addWidget(help_title)
        self._help_label = QLabel("\n".join(f"• {line}" for line in INSTRUCTIONS))
        self._help_label.setWordWrap(True)
        layout.addWidget(self._help_label)

        layout.addStretch()

    @property
    def voltage_text(self) -> str:
        return self._voltage_card.text()

    @property
    def current_text(self) -> str:
        return self._current_card.text()

    @property
    def power_text(self) -> str:
        return self._power_card.text()

    def set_measurements(self, measurements: Measurements) -> None:
        """Show measurements rounded to two decimals."""
        self._voltage_card.set_text(measurements.format_voltage())
        self._current_card.set_text(measurements.format_current())
        self._power_card.set_text(measurements.format_power())

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        colors = theme.colors
        self._voltage_card.set_color(colors.voltage)
        self._current_card.set_color(colors.current)
        self._power_card.set_color(colors.power)
