"""Component library panel: one button per catalog entry."""

from PySide6.QtCore import QSize, Signal
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from circuitsim.models.component import ComponentType
from circuitsim.models.component_catalog import COMPONENT_LIBRARY, CatalogEntry
from circuitsim.views.canvas.symbols import create_symbol_pixmap


class LibraryPanel(QWidget):
    """
    Palette of placeable components.

    Signals:
        component_requested: Emitted with the ComponentType of a clicked entry
    """

    component_requested = Signal(object)

    def __init__(self, theme_service=None, parent=None):
        super().__init__(parent)
        self._theme_service = theme_service
        self._buttons: dict[ComponentType, QPushButton] = {}

        self._setup_ui()

        if theme_service is not None:
            theme_service.theme_changed.connect(self._on_theme_changed)
            self._on_theme_changed(theme_service.current_theme)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        title = QLabel("Components")
        title.setStyleSheet("font-weight: 600; font-size: 15px;")
        layout.addWidget(title)

        for entry in COMPONENT_LIBRARY:
            button = self._create_button(entry)
            self._buttons[entry.type] = button
            layout.addWidget(button)

        layout.addStretch()

    def _create_button(self, entry: CatalogEntry) -> QPushButton:
        text = entry.label
        if entry.shortcut:
            text = f"{entry.label}  ({entry.shortcut})"
        button = QPushButton(text)
        button.setIcon(QIcon(create_symbol_pixmap(entry.type)))
        button.setIconSize(QSize(32, 32))
        button.setMinimumHeight(48)
        button.setToolTip(f"Add a {entry.label.lower()} to the end of the loop")
        button.setStyleSheet(
            f"QPushButton {{ text-align: left; padding: 6px 10px;"
            f" border: 2px solid {entry.color}; border-radius: 8px; }}"
        )
        button.clicked.connect(lambda _checked=False, t=entry.type: self.component_requested.emit(t))
        return button

    def button_for(self, comp_type: ComponentType) -> QPushButton:
        """Return the palette button for a component type."""
        return self._buttons[comp_type]

    def _on_theme_changed(self, theme) -> None:
        """Redraw symbols in the theme foreground color."""
        for comp_type, button in self._buttons.items():
            button.setIcon(QIcon(create_symbol_pixmap(comp_type, color=theme.colors.foreground)))
