"""Circuit canvas: rendering and pointer interaction."""

from circuitsim.views.canvas.circuit_canvas import CANVAS_HEIGHT, CANVAS_WIDTH, CircuitCanvas
from circuitsim.views.canvas.renderer import (
    CircuitRenderer,
    RenderSnapshot,
    WireSegment,
    flow_marker_position,
    flow_progress,
    wire_segments,
)
from circuitsim.views.canvas.symbols import create_symbol_pixmap, draw_symbol

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "CircuitCanvas",
    "CircuitRenderer",
    "RenderSnapshot",
    "WireSegment",
    "flow_marker_position",
    "flow_progress",
    "wire_segments",
    "create_symbol_pixmap",
    "draw_symbol",
]
