"""Icon management for CircuitSim using QtAwesome."""

import qtawesome as qta
from PySide6.QtGui import QIcon

# Map our icon names to QtAwesome Phosphor icons (ph prefix)
ICON_MAP = {
    # Toolbar
    "power": "ph.power",
    "reset": "ph.arrow-counter-clockwise",
    "trash": "ph.trash",
    "theme": "ph.circle-half",
    "grid": "ph.grid-four",

    # Measurement cards
    "zap": "ph.lightning",
    "gauge": "ph.gauge",
}

FALLBACK_ICON = "ph.circle"


class IconService:
    """Service for creating and caching application icons using QtAwesome."""

    _cache: dict[tuple[str, str], QIcon] = {}

    @classmethod
    def get_icon(cls, name: str, color: str = "#666666") -> QIcon:
        """Get a QIcon for the given icon name.

        Args:
            name: Icon name (e.g., "power", "reset")
            color: Hex color for the icon

        Returns:
            QIcon instance
        """
        cache_key = (name, color)
        if cache_key in cls._cache:
            return cls._cache[cache_key]

        qta_name = ICON_MAP.get(name, f"ph.{name}")

        try:
            icon = qta.icon(qta_name, color=color)
        except Exception:
            # Unknown glyph names raise; fall back to a neutral marker
            icon = qta.icon(FALLBACK_ICON, color=color)

        cls._cache[cache_key] = icon
        return icon

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the icon cache (useful when theme changes)."""
        cls._cache.clear()


__all__ = ["IconService", "ICON_MAP"]
