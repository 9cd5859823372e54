"""Schematic glyphs drawn inside component boxes and on library buttons."""

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QPainter, QPen, QPixmap

from circuitsim.models.component import Component, ComponentType, Switch

# Glyphs are drawn around the origin within roughly -25..25 on both axes
SYMBOL_EXTENT = 60.0


def draw_symbol(painter: QPainter, comp_type: ComponentType, is_closed: bool = True) -> None:
    """Draw a component symbol centered on the painter origin.

    The caller sets pen, brush and transform.
    """
    if comp_type == ComponentType.BATTERY:
        _draw_battery(painter)
    elif comp_type == ComponentType.RESISTOR:
        _draw_resistor(painter)
    elif comp_type == ComponentType.LED:
        _draw_led(painter)
    elif comp_type == ComponentType.SWITCH:
        _draw_switch(painter, is_closed)


def draw_component_glyph(painter: QPainter, component: Component, color: QColor) -> None:
    """Draw the glyph for a placed component, centered in its box."""
    cx, cy = component.center
    is_closed = component.is_closed if isinstance(component, Switch) else True

    painter.save()
    painter.translate(cx, cy)
    painter.scale(0.8, 0.8)
    painter.setPen(QPen(color, 2.5, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    draw_symbol(painter, component.type, is_closed)
    painter.restore()


def create_symbol_pixmap(comp_type: ComponentType, size: int = 32, color: str = "#1f2937") -> QPixmap:
    """Create a pixmap with the component symbol for library buttons."""
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    symbol_scale = size / SYMBOL_EXTENT
    painter.setPen(QPen(QColor(color), 2.0))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.translate(size / 2, size / 2)
    painter.scale(symbol_scale, symbol_scale)

    draw_symbol(painter, comp_type)

    painter.end()
    return pixmap


def _draw_battery(painter: QPainter) -> None:
    """Draw battery cell: long positive plate, short negative plate."""
    painter.drawLine(QPointF(-25, 0), QPointF(-4, 0))
    painter.drawLine(QPointF(4, 0), QPointF(25, 0))
    painter.drawLine(QPointF(-4, -14), QPointF(-4, 14))
    painter.drawLine(QPointF(4, -7), QPointF(4, 7))
    # Plus sign over the positive plate
    painter.drawLine(QPointF(-14, -14), QPointF(-8, -14))
    painter.drawLine(QPointF(-11, -17), QPointF(-11, -11))


def _draw_resistor(painter: QPainter) -> None:
    """Draw resistor zigzag symbol."""
    points = [
        (-25, 0), (-18, 0), (-15, -8), (-9, 8), (-3, -8),
        (3, 8), (9, -8), (15, 8), (18, 0), (25, 0)
    ]
    for i in range(len(points) - 1):
        painter.drawLine(
            QPointF(points[i][0], points[i][1]),
            QPointF(points[i + 1][0], points[i + 1][1])
        )


def _draw_led(painter: QPainter) -> None:
    """Draw diode symbol with two emission arrows."""
    painter.drawLine(QPointF(-25, 0), QPointF(-8, 0))
    painter.drawLine(QPointF(8, 0), QPointF(25, 0))
    triangle = [QPointF(-8, -10), QPointF(-8, 10), QPointF(8, 0)]
    painter.drawPolygon(triangle)
    painter.drawLine(QPointF(8, -10), QPointF(8, 10))
    # Emission arrows
    for offset in (0, 7):
        start = QPointF(2 + offset, -12)
        end = QPointF(8 + offset, -20)
        painter.drawLine(start, end)
        painter.drawLine(end, QPointF(4 + offset, -19))
        painter.drawLine(end, QPointF(8 + offset, -16))


def _draw_switch(painter: QPainter, is_closed: bool) -> None:
    """Draw switch symbol in its current position."""
    painter.drawLine(QPointF(-25, 0), QPointF(-10, 0))
    painter.drawLine(QPointF(10, 0), QPointF(25, 0))
    painter.drawEllipse(QPointF(-10, 0), 2, 2)
    painter.drawEllipse(QPointF(10, 0), 2, 2)
    if is_closed:
        painter.drawLine(QPointF(-8, 0), QPointF(8, 0))
    else:
        painter.drawLine(QPointF(-8, 0), QPointF(8, -12))
