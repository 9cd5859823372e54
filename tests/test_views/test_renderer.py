"""Tests for canvas painting."""

import pytest
from PySide6.QtGui import QColor, QImage, QPainter

from circuitsim.models.component import Battery, Led, Resistor, Switch
from circuitsim.models.component_catalog import get_catalog_entry
from circuitsim.services.circuit_evaluator import Measurements, evaluate
from circuitsim.services.theme_service import DARK_THEME, LIGHT_THEME
from circuitsim.views.canvas import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CircuitRenderer,
    RenderSnapshot,
    WireSegment,
    flow_marker_position,
    flow_progress,
    wire_segments,
)


def _render(snapshot: RenderSnapshot) -> QImage:
    image = QImage(CANVAS_WIDTH, CANVAS_HEIGHT, QImage.Format.Format_ARGB32)
    image.fill(QColor("#000000"))
    painter = QPainter(image)
    try:
        CircuitRenderer().render(painter, snapshot, CANVAS_WIDTH, CANVAS_HEIGHT)
    finally:
        painter.end()
    return image


def _pixel(image: QImage, x: int, y: int) -> str:
    return image.pixelColor(x, y).name()


class TestWireSegments:
    @pytest.mark.parametrize("count, expected", [(0, 0), (1, 0), (2, 1), (3, 3), (5, 5)])
    def test_segment_count(self, count, expected):
        components = [Resistor(x=i * 80, y=0) for i in range(count)]
        assert len(wire_segments(components)) == expected

    def test_segments_join_centers_in_order(self):
        a, b = Battery(x=0, y=0), Resistor(x=100, y=40)
        assert wire_segments([a, b]) == [WireSegment(30, 30, 130, 70)]

    def test_closing_segment_only_with_three(self):
        a, b, c = Battery(x=0, y=0), Resistor(x=100, y=0), Led(x=200, y=0)
        segments = wire_segments([a, b, c])
        assert [s.closing for s in segments] == [False, False, True]
        assert segments[-1] == WireSegment(230, 30, 30, 30, closing=True)


class TestFlowMarker:
    def test_progress_wraps_every_second(self):
        assert flow_progress(12.25) == pytest.approx(0.25)
        assert flow_progress(13.25) == pytest.approx(0.25)
        assert flow_progress(7.0) == pytest.approx(0.0)

    def test_position_along_segment(self):
        segment = WireSegment(0, 0, 100, 50)
        assert flow_marker_position(segment, 0.0) == (0, 0)
        assert flow_marker_position(segment, 0.5) == (50, 25)
        assert flow_marker_position(segment, 1.0) == (100, 50)


class TestSnapshot:
    def test_live_requires_power_and_current(self):
        flowing = Measurements(9.0, 90.0, 0.81)
        assert RenderSnapshot(powered=True, measurements=flowing).is_live
        assert not RenderSnapshot(powered=False, measurements=flowing).is_live
        assert not RenderSnapshot(powered=True).is_live


class TestRender:
    def test_background_and_grid(self, qapp):
        image = _render(RenderSnapshot(theme=LIGHT_THEME, show_grid=True))
        assert _pixel(image, 10, 10) == LIGHT_THEME.colors.canvas_background
        # Antialiased grid lines blend over the background
        assert _pixel(image, 20, 10) != LIGHT_THEME.colors.canvas_background

    def test_grid_hidden(self, qapp):
        image = _render(RenderSnapshot(theme=LIGHT_THEME, show_grid=False))
        assert _pixel(image, 20, 10) == LIGHT_THEME.colors.canvas_background

    def test_dark_theme_background(self, qapp):
        image = _render(RenderSnapshot(theme=DARK_THEME, show_grid=False))
        assert _pixel(image, 10, 10) == DARK_THEME.colors.canvas_background

    def test_component_box_filled_with_catalog_color(self, qapp):
        components = (Battery(x=100, y=100), Switch(x=300, y=100))
        image = _render(RenderSnapshot(components=components, show_grid=False))

        assert _pixel(image, 106, 106) == get_catalog_entry(Battery.type).color
        assert _pixel(image, 306, 106) == get_catalog_entry(Switch.type).color

    def test_selected_border_color(self, qapp):
        battery = Battery(x=100, y=100)
        image = _render(
            RenderSnapshot(components=(battery,), selected_id=battery.id, show_grid=False)
        )
        assert _pixel(image, 100, 130) == LIGHT_THEME.colors.component_selected

    def test_wire_color_follows_power(self, qapp):
        components = (Battery(x=100, y=100), Resistor(x=300, y=100))
        idle = _render(RenderSnapshot(components=components, show_grid=False))
        assert _pixel(idle, 200, 130) == LIGHT_THEME.colors.wire_idle

        live = _render(
            RenderSnapshot(
                components=components,
                powered=True,
                measurements=evaluate(components, True),
                show_grid=False,
                # Park the flow marker at the start of each segment
                timestamp=0.0,
            )
        )
        assert _pixel(live, 200, 130) == LIGHT_THEME.colors.wire_live

    def test_led_glows_only_when_live(self, qapp):
        components = (Battery(x=100, y=100), Led(x=300, y=100))
        probe = (330, 112)

        dark = _render(
            RenderSnapshot(components=components, powered=False, show_grid=False)
        )
        lit = _render(
            RenderSnapshot(
                components=components,
                powered=True,
                measurements=evaluate(components, True),
                show_grid=False,
                timestamp=0.0,
            )
        )

        assert _pixel(dark, *probe) == get_catalog_entry(Led.type).color
        assert _pixel(lit, *probe) != _pixel(dark, *probe)
