"""Canvas widget hosting the circuit drawing."""

from uuid import UUID

from PySide6.QtCore import QPointF, QSize, Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from circuitsim.models.component import COMPONENT_SIZE
from circuitsim.services.sandbox_service import SandboxService
from circuitsim.services.theme_service import LIGHT_THEME, Theme
from circuitsim.views.canvas.renderer import CircuitRenderer, RenderSnapshot

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 500


class CircuitCanvas(QWidget):
    """
    Fixed-size drawing surface for the series loop.

    Repaints whenever the sandbox reports a change and on every refresh
    tick while powered. Clicking selects the component under the cursor;
    dragging a selected component moves it.

    Signals:
        mouse_moved: Emitted with canvas coordinates while the pointer moves
    """

    mouse_moved = Signal(float, float)

    def __init__(self, sandbox: SandboxService, parent: QWidget | None = None):
        super().__init__(parent)
        self._sandbox = sandbox
        self._renderer = CircuitRenderer()
        self._theme: Theme = LIGHT_THEME
        self._show_grid = True

        # Drag state: component id and offset from its top-left corner
        self._drag_id: UUID | None = None
        self._drag_offset = QPointF()

        self.setFixedSize(CANVAS_WIDTH, CANVAS_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setMouseTracking(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        sandbox.components_changed.connect(self.update)
        sandbox.selection_changed.connect(self.update)
        sandbox.measurements_changed.connect(self.update)
        sandbox.power_changed.connect(self.update)
        sandbox.tick.connect(self.update)

    def sizeHint(self) -> QSize:
        return QSize(CANVAS_WIDTH, CANVAS_HEIGHT)

    @property
    def show_grid(self) -> bool:
        """Get grid visibility."""
        return self._show_grid

    @show_grid.setter
    def show_grid(self, show: bool) -> None:
        """Set grid visibility."""
        self._show_grid = show
        self.update()

    def set_theme(self, theme: Theme) -> None:
        """Apply theme colors to the drawing."""
        self._theme = theme
        self.update()

    def snapshot(self) -> RenderSnapshot:
        """Capture the sandbox state for one frame."""
        state = self._sandbox.state
        return RenderSnapshot(
            components=tuple(state.circuit.components),
            selected_id=state.selected_id,
            powered=state.powered,
            measurements=state.measurements,
            theme=self._theme,
            show_grid=self._show_grid,
        )

    def paintEvent(self, event) -> None:
        """Paint the current circuit."""
        painter = QPainter(self)
        try:
            self._renderer.render(painter, self.snapshot(), self.width(), self.height())
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Select the component under the cursor."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        component = self._sandbox.select_at(pos.x(), pos.y())
        if component is not None:
            self._drag_id = component.id
            self._drag_offset = QPointF(pos.x() - component.x, pos.y() - component.y)
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Drag the grabbed component, clamped to the canvas."""
        pos = event.position()
        self.mouse_moved.emit(pos.x(), pos.y())

        if self._drag_id is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            super().mouseMoveEvent(event)
            return

        x = min(max(pos.x() - self._drag_offset.x(), 0.0), CANVAS_WIDTH - COMPONENT_SIZE)
        y = min(max(pos.y() - self._drag_offset.y(), 0.0), CANVAS_HEIGHT - COMPONENT_SIZE)
        self._sandbox.move_component(self._drag_id, x, y)
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Finish a drag."""
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_id = None
        super().mouseReleaseEvent(event)
