"""Painting of the circuit canvas from a state snapshot.

Drawing order, back to front: background grid, wiring, current flow
markers, component boxes with glyphs and labels, LED glow.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Sequence
from uuid import UUID

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen, QRadialGradient

from circuitsim.models.component import COMPONENT_SIZE, Component, ComponentType
from circuitsim.models.component_catalog import get_catalog_entry
from circuitsim.services.circuit_evaluator import Measurements, glow_brightness
from circuitsim.services.theme_service import LIGHT_THEME, Theme
from circuitsim.views.canvas.symbols import draw_component_glyph

GRID_SPACING = 20
WIRE_WIDTH = 3.0
FLOW_MARKER_RADIUS = 4.0
FLOW_PERIOD_S = 1.0
GLOW_RADIUS = 25.0
LABEL_OFFSET_Y = 75.0
BORDER_WIDTH = 2.0
SELECTED_BORDER_WIDTH = 3.0
# Loops with fewer components are drawn open
MIN_COMPONENTS_TO_CLOSE_LOOP = 3


@dataclass(frozen=True)
class WireSegment:
    """Straight wire between the centers of two components."""

    x1: float
    y1: float
    x2: float
    y2: float
    closing: bool = False


@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only view of everything the canvas paints in one frame."""

    components: Sequence[Component] = ()
    selected_id: UUID | None = None
    powered: bool = False
    measurements: Measurements = field(default_factory=Measurements.zero)
    theme: Theme = field(default_factory=lambda: LIGHT_THEME)
    show_grid: bool = True
    timestamp: float | None = None

    @property
    def is_live(self) -> bool:
        """True when current should be shown flowing."""
        return self.powered and self.measurements.is_flowing


def wire_segments(components: Sequence[Component]) -> list[WireSegment]:
    """Segments joining consecutive components in wiring order.

    A closing segment from the last component back to the first is added
    only once the loop has at least three components.
    """
    segments = []
    for current, following in zip(components, components[1:]):
        (x1, y1), (x2, y2) = current.center, following.center
        segments.append(WireSegment(x1, y1, x2, y2))

    if len(components) >= MIN_COMPONENTS_TO_CLOSE_LOOP:
        (x1, y1), (x2, y2) = components[-1].center, components[0].center
        segments.append(WireSegment(x1, y1, x2, y2, closing=True))
    return segments


def flow_progress(timestamp: float) -> float:
    """Fraction of a segment traversed by the flow marker at a wall-clock time."""
    return (timestamp % FLOW_PERIOD_S) / FLOW_PERIOD_S


def flow_marker_position(segment: WireSegment, progress: float) -> tuple[float, float]:
    """Point at ``progress`` (0..1) along a segment."""
    return (
        segment.x1 + (segment.x2 - segment.x1) * progress,
        segment.y1 + (segment.y2 - segment.y1) * progress,
    )


class CircuitRenderer:
    """Paints a RenderSnapshot onto any QPainter surface."""

    def __init__(self):
        self._label_font = QFont("Arial")
        self._label_font.setPixelSize(12)

    def render(self, painter: QPainter, snapshot: RenderSnapshot, width: int, height: int) -> None:
        """Paint a full frame."""
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        colors = snapshot.theme.colors
        painter.fillRect(QRectF(0, 0, width, height), QColor(colors.canvas_background))
        if snapshot.show_grid:
            self._draw_grid(painter, snapshot.theme, width, height)

        segments = wire_segments(snapshot.components)
        self._draw_wires(painter, snapshot, segments)
        if snapshot.is_live:
            now = snapshot.timestamp if snapshot.timestamp is not None else time.time()
            self._draw_flow_markers(painter, snapshot.theme, segments, flow_progress(now))

        for component in snapshot.components:
            self._draw_component(painter, snapshot, component)

        painter.restore()

    def _draw_grid(self, painter: QPainter, theme: Theme, width: int, height: int) -> None:
        painter.setPen(QPen(theme.get_color("canvas_grid"), 1.0))
        for x in range(0, width, GRID_SPACING):
            painter.drawLine(QPointF(x, 0), QPointF(x, height))
        for y in range(0, height, GRID_SPACING):
            painter.drawLine(QPointF(0, y), QPointF(width, y))

    def _draw_wires(
        self, painter: QPainter, snapshot: RenderSnapshot, segments: list[WireSegment]
    ) -> None:
        color_name = "wire_live" if snapshot.is_live else "wire_idle"
        painter.setPen(QPen(snapshot.theme.get_color(color_name), WIRE_WIDTH))
        for segment in segments:
            painter.drawLine(QPointF(segment.x1, segment.y1), QPointF(segment.x2, segment.y2))

    def _draw_flow_markers(
        self,
        painter: QPainter,
        theme: Theme,
        segments: list[WireSegment],
        progress: float,
    ) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(theme.get_color("flow_marker")))
        for segment in segments:
            # The closing wire carries no marker
            if segment.closing:
                continue
            x, y = flow_marker_position(segment, progress)
            painter.drawEllipse(QPointF(x, y), FLOW_MARKER_RADIUS, FLOW_MARKER_RADIUS)

    def _draw_component(
        self, painter: QPainter, snapshot: RenderSnapshot, component: Component
    ) -> None:
        theme = snapshot.theme
        entry = get_catalog_entry(component.type)
        box = QRectF(component.x, component.y, COMPONENT_SIZE, COMPONENT_SIZE)

        painter.fillRect(box, QColor(entry.color))

        selected = component.id == snapshot.selected_id
        border = theme.get_color("component_selected" if selected else "component_border")
        painter.setPen(QPen(border, SELECTED_BORDER_WIDTH if selected else BORDER_WIDTH))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(box)

        draw_component_glyph(painter, component, theme.get_color("component_glyph"))

        painter.setFont(self._label_font)
        painter.setPen(theme.get_color("component_label"))
        cx, _ = component.center
        label_rect = QRectF(cx - 50, component.y + LABEL_OFFSET_Y - 8, 100, 16)
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, entry.label)

        if component.type == ComponentType.LED and snapshot.is_live:
            self._draw_glow(painter, theme, component, glow_brightness(snapshot.measurements))

    def _draw_glow(
        self, painter: QPainter, theme: Theme, component: Component, brightness: float
    ) -> None:
        cx, cy = component.center
        center = QPointF(cx, cy)

        inner = theme.get_color("led_glow")
        inner.setAlphaF(brightness)
        outer = theme.get_color("led_glow")
        outer.setAlphaF(0.0)

        gradient = QRadialGradient(center, GLOW_RADIUS)
        gradient.setColorAt(0.0, inner)
        gradient.setColorAt(0.7, inner)
        gradient.setColorAt(1.0, outer)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(gradient))
        painter.drawEllipse(center, GLOW_RADIUS, GLOW_RADIUS)
