"""Theme management service with light and dark color schemes."""

from dataclasses import dataclass, field

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QColor


@dataclass
class ThemeColors:
    """Color definitions for a theme."""

    # Base colors
    background: str = "#eef2ff"
    foreground: str = "#1f2937"
    foreground_muted: str = "#4b5563"
    panel_background: str = "#ffffff"
    border: str = "#d1d5db"

    # Accents
    primary: str = "#2563eb"
    success: str = "#22c55e"
    error: str = "#ef4444"
    warning: str = "#ca8a04"
    power_off: str = "#d1d5db"

    # Measurement cards
    voltage: str = "#16a34a"
    current: str = "#2563eb"
    power: str = "#9333ea"

    # Canvas
    canvas_background: str = "#ffffff"
    canvas_grid: str = "#e5e7eb"
    wire_idle: str = "#9ca3af"
    wire_live: str = "#3b82f6"
    flow_marker: str = "#fbbf24"
    led_glow: str = "#fbbf24"
    component_border: str = "#1f2937"
    component_selected: str = "#2563eb"
    component_glyph: str = "#ffffff"
    component_label: str = "#1f2937"


@dataclass
class Theme:
    """Complete theme definition."""

    name: str
    display_name: str
    is_dark: bool
    colors: ThemeColors = field(default_factory=ThemeColors)

    def get_color(self, name: str) -> QColor:
        """Get a QColor for a named color."""
        color_str = getattr(self.colors, name, "#ff00ff")  # Magenta for missing
        return QColor(color_str)


LIGHT_THEME = Theme(
    name="light",
    display_name="Light",
    is_dark=False,
    colors=ThemeColors(),
)

DARK_THEME = Theme(
    name="dark",
    display_name="Dark",
    is_dark=True,
    colors=ThemeColors(
        background="#111827",
        foreground="#e5e7eb",
        foreground_muted="#9ca3af",
        panel_background="#1f2937",
        border="#374151",
        primary="#60a5fa",
        success="#22c55e",
        error="#f87171",
        warning="#facc15",
        power_off="#4b5563",
        voltage="#4ade80",
        current="#60a5fa",
        power="#c084fc",
        canvas_background="#0f172a",
        canvas_grid="#1e293b",
        wire_idle="#64748b",
        wire_live="#60a5fa",
        flow_marker="#fbbf24",
        led_glow="#fbbf24",
        component_border="#e5e7eb",
        component_selected="#93c5fd",
        component_glyph="#ffffff",
        component_label="#e5e7eb",
    ),
)

BUILTIN_THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}


class ThemeService(QObject):
    """Service for managing application themes."""

    theme_changed = Signal(Theme)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._current_theme: Theme = LIGHT_THEME

    @property
    def current_theme(self) -> Theme:
        """Get the current theme."""
        return self._current_theme

    @property
    def is_dark(self) -> bool:
        """Check if current theme is dark."""
        return self._current_theme.is_dark

    def get_theme(self, name: str) -> Theme | None:
        """Get a theme by name."""
        return BUILTIN_THEMES.get(name)

    def set_theme(self, name: str) -> bool:
        """Set the current theme by name."""
        theme = self.get_theme(name)
        if theme is None:
            return False

        self._current_theme = theme
        self.theme_changed.emit(theme)
        return True

    def generate_stylesheet(self) -> str:
        """Generate Qt stylesheet for current theme."""
        c = self._current_theme.colors

        return f"""
QMainWindow, QDialog {{
    background-color: {c.background};
    color: {c.foreground};
}}

QWidget {{
    color: {c.foreground};
}}

QDockWidget > QWidget, QGroupBox {{
    background-color: {c.panel_background};
}}

QGroupBox {{
    border: 1px solid {c.border};
    border-radius: 8px;
    margin-top: 14px;
    padding: 8px;
    font-weight: 600;
}}

QGroupBox::title {{
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 4px;
}}

QToolBar {{
    background-color: {c.panel_background};
    border: none;
    border-bottom: 1px solid {c.border};
    padding: 4px;
    spacing: 6px;
}}

QLineEdit {{
    background-color: {c.panel_background};
    border: 1px solid {c.border};
    border-radius: 4px;
    padding: 4px 6px;
}}

QLineEdit[invalid="true"] {{
    border: 1px solid {c.error};
}}

QStatusBar {{
    background-color: {c.panel_background};
    color: {c.foreground_muted};
}}
"""
