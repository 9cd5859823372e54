"""Component library views."""

from circuitsim.views.library.library_panel import LibraryPanel

__all__ = ["LibraryPanel"]
