"""Status bar widgets with icons."""

from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget

from circuitsim.resources.icons import IconService


class IconLabel(QWidget):
    """A label with an icon prefix."""

    def __init__(
        self,
        icon_name: str,
        text: str = "",
        icon_color: str = "#666666",
        parent=None,
    ):
        super().__init__(parent)
        self._icon_name = icon_name
        self._icon_color = icon_color

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 0, 4, 0)
        layout.setSpacing(4)

        self._icon_label = QLabel()
        self._icon_label.setFixedSize(14, 14)
        self._update_icon()
        layout.addWidget(self._icon_label)

        self._text_label = QLabel(text)
        layout.addWidget(self._text_label)

    def _update_icon(self) -> None:
        icon = IconService.get_icon(self._icon_name, self._icon_color)
        if not icon.isNull():
            self._icon_label.setPixmap(icon.pixmap(14, 14))

    def setText(self, text: str) -> None:
        self._text_label.setText(text)

    def text(self) -> str:
        return self._text_label.text()

    def setIconColor(self, color: str) -> None:
        self._icon_color = color
        self._update_icon()


class PowerStatusWidget(IconLabel):
    """Power state indicator: green when on, gray when off."""

    ON_COLOR = "#22c55e"
    OFF_COLOR = "#9ca3af"

    def __init__(self, parent=None):
        super().__init__("power", "Power off", self.OFF_COLOR, parent)
        self.setToolTip("Circuit power")

    def setPowered(self, powered: bool) -> None:
        self.setIconColor(self.ON_COLOR if powered else self.OFF_COLOR)
        self.setText("Power on" if powered else "Power off")


class CoordinateWidget(IconLabel):
    """Cursor position on the canvas."""

    def __init__(self, parent=None):
        super().__init__("grid", "X: 0, Y: 0", "#0078D4", parent)
        self.setToolTip("Cursor position")
        self.setMinimumWidth(110)

    def setCoordinates(self, x: float, y: float) -> None:
        self.setText(f"X: {x:.0f}, Y: {y:.0f}")
