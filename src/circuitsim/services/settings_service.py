"""Application settings service using QSettings."""

from PySide6.QtCore import QSettings

DEFAULT_REFRESH_INTERVAL_MS = 100
REFRESH_INTERVAL_LIMITS = (16, 1000)


class SettingsService:
    """Service for managing application settings."""

    def __init__(self, settings: QSettings | None = None):
        self._settings = settings or QSettings("CircuitSim", "CircuitSim")

    # Theme
    def get_theme(self) -> str:
        """Get current theme name."""
        return self._settings.value("theme", "light")

    def set_theme(self, theme: str) -> None:
        """Set the theme."""
        self._settings.setValue("theme", theme)

    # Window geometry
    def get_window_geometry(self) -> bytes | None:
        """Get saved window geometry."""
        return self._settings.value("window_geometry")

    def set_window_geometry(self, geometry: bytes) -> None:
        """Save window geometry."""
        self._settings.setValue("window_geometry", geometry)

    def get_window_state(self) -> bytes | None:
        """Get saved window state (dock positions, etc.)."""
        return self._settings.value("window_state")

    def set_window_state(self, state: bytes) -> None:
        """Save window state."""
        self._settings.setValue("window_state", state)

    # Canvas
    def get_show_grid(self) -> bool:
        """Get show grid setting."""
        return self._settings.value("show_grid", True, type=bool)

    def set_show_grid(self, enabled: bool) -> None:
        """Set show grid setting."""
        self._settings.setValue("show_grid", enabled)

    def get_refresh_interval(self) -> int:
        """Get the powered refresh interval in milliseconds."""
        try:
            value = int(self._settings.value("refresh_interval_ms", DEFAULT_REFRESH_INTERVAL_MS))
        except (TypeError, ValueError):
            return DEFAULT_REFRESH_INTERVAL_MS
        low, high = REFRESH_INTERVAL_LIMITS
        return max(low, min(value, high))

    def set_refresh_interval(self, interval_ms: int) -> None:
        """Set the powered refresh interval."""
        self._settings.setValue("refresh_interval_ms", int(interval_ms))
