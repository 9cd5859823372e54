"""Main application window."""

import logging
from uuid import UUID

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QAction, QActionGroup, QKeySequence
from PySide6.QtWidgets import (
    QDockWidget,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QStatusBar,
    QToolBar,
    QWidget,
)

from circuitsim import __version__
from circuitsim.models.component import ComponentType
from circuitsim.models.component_catalog import COMPONENT_LIBRARY, get_catalog_entry
from circuitsim.resources.icons import IconService
from circuitsim.services.circuit_evaluator import Measurements
from circuitsim.services.error_service import ErrorService
from circuitsim.services.sandbox_service import SandboxService
from circuitsim.services.settings_service import SettingsService
from circuitsim.services.theme_service import Theme, ThemeService
from circuitsim.views.canvas import CircuitCanvas
from circuitsim.views.library import LibraryPanel
from circuitsim.views.properties import PropertiesPanel
from circuitsim.views.widgets import CoordinateWidget, MeasurementPanel, PowerStatusWidget

logger = logging.getLogger(__name__)

# Animation refresh choices offered under View > Refresh Rate
REFRESH_RATES: tuple[tuple[str, int], ...] = (
    ("&Fast (50 ms)", 50),
    ("&Normal (100 ms)", 100),
    ("&Slow (250 ms)", 250),
)


class MainWindow(QMainWindow):
    """Main application window: canvas in the center, panels docked around it."""

    def __init__(
        self,
        settings: SettingsService | None = None,
        theme_name: str | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)

        self._settings = settings if settings is not None else SettingsService()
        self._theme_service = ThemeService(parent=self)
        self._error_service = ErrorService(parent=self)
        self._sandbox = SandboxService(
            refresh_interval_ms=self._settings.get_refresh_interval(), parent=self
        )

        self._setup_window()
        self._create_actions()
        self._create_menus()
        self._create_toolbar()
        self._create_status_bar()
        self._create_dock_widgets()
        self._connect_signals()
        self._restore_state()
        self._apply_theme(theme_name)
        self._update_power_actions(False)
        self._on_selection_changed(None)

    @property
    def sandbox(self) -> SandboxService:
        return self._sandbox

    @property
    def canvas(self) -> CircuitCanvas:
        return self._canvas

    @property
    def properties_panel(self) -> PropertiesPanel:
        return self._properties_panel

    @property
    def measurement_panel(self) -> MeasurementPanel:
        return self._measurement_panel

    @property
    def theme_service(self) -> ThemeService:
        return self._theme_service

    def _setup_window(self) -> None:
        """Configure main window properties."""
        self.setWindowTitle("CircuitSim - Interactive Circuit Sandbox")
        self.setMinimumSize(1000, 640)
        self.resize(1280, 760)

        # Force menu bar inside window (not in macOS system bar)
        self.menuBar().setNativeMenuBar(False)

        # Central widget: fixed-size canvas centered in a scroll area
        self._canvas = CircuitCanvas(self._sandbox)
        self._canvas.show_grid = self._settings.get_show_grid()

        holder = QWidget()
        layout = QHBoxLayout(holder)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.addWidget(self._canvas, 0, Qt.AlignmentFlag.AlignCenter)

        scroll = QScrollArea()
        scroll.setWidget(holder)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        self.setCentralWidget(scroll)

    def _create_actions(self) -> None:
        """Create all actions."""
        self.action_power = QAction("Power OFF", self)
        self.action_power.setCheckable(True)
        self.action_power.setShortcut(QKeySequence("F5"))
        self.action_power.setToolTip("Turn the circuit power on or off (F5)")
        self.action_power.triggered.connect(self._on_power_triggered)

        self.action_reset = QAction("&Reset", self)
        self.action_reset.setShortcut(QKeySequence("Ctrl+R"))
        self.action_reset.setToolTip("Remove all components and turn power off (Ctrl+R)")
        self.action_reset.triggered.connect(self._on_reset)

        self.action_delete = QAction("&Delete", self)
        self.action_delete.setShortcut(QKeySequence.StandardKey.Delete)
        self.action_delete.setToolTip("Delete the selected component (Del)")
        self.action_delete.triggered.connect(self._sandbox.delete_selected)

        self.action_exit = QAction("E&xit", self)
        self.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        self.action_exit.triggered.connect(self.close)

        self.action_toggle_grid = QAction("Show &Grid", self)
        self.action_toggle_grid.setCheckable(True)
        self.action_toggle_grid.setChecked(self._canvas.show_grid)
        self.action_toggle_grid.setShortcut(QKeySequence("G"))
        self.action_toggle_grid.toggled.connect(self._on_grid_toggled)

        self.action_toggle_theme = QAction("&Dark Theme", self)
        self.action_toggle_theme.setCheckable(True)
        self.action_toggle_theme.setShortcut(QKeySequence("Ctrl+T"))
        self.action_toggle_theme.triggered.connect(self._on_theme_toggled)

        # One action per placeable component, keyed by catalog shortcut
        self.component_actions: dict[ComponentType, QAction] = {}
        for entry in COMPONENT_LIBRARY:
            action = QAction(f"Add {entry.label}", self)
            if entry.shortcut:
                action.setShortcut(QKeySequence(entry.shortcut))
            action.triggered.connect(
                lambda _checked=False, t=entry.type: self._on_component_requested(t)
            )
            self.component_actions[entry.type] = action

        # Exclusive refresh-rate choices, persisted in settings
        current_interval = self._sandbox.refresh_interval
        self.refresh_rate_group = QActionGroup(self)
        self.refresh_rate_actions: dict[int, QAction] = {}
        for label, interval_ms in REFRESH_RATES:
            action = QAction(label, self)
            action.setCheckable(True)
            action.setChecked(interval_ms == current_interval)
            action.triggered.connect(
                lambda _checked=False, ms=interval_ms: self._on_refresh_rate_selected(ms)
            )
            self.refresh_rate_group.addAction(action)
            self.refresh_rate_actions[interval_ms] = action

        self.action_about = QAction("&About CircuitSim", self)
        self.action_about.triggered.connect(self._on_about)

    def _create_menus(self) -> None:
        """Create the menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        file_menu.addAction(self.action_exit)

        edit_menu = menubar.addMenu("&Edit")
        edit_menu.addAction(self.action_delete)
        edit_menu.addAction(self.action_reset)

        view_menu = menubar.addMenu("&View")
        view_menu.addAction(self.action_toggle_grid)
        view_menu.addAction(self.action_toggle_theme)
        refresh_menu = view_menu.addMenu("&Refresh Rate")
        for action in self.refresh_rate_actions.values():
            refresh_menu.addAction(action)
        view_menu.addSeparator()
        self.panels_menu = view_menu.addMenu("&Panels")

        circuit_menu = menubar.addMenu("&Circuit")
        circuit_menu.addAction(self.action_power)
        circuit_menu.addSeparator()
        for action in self.component_actions.values():
            circuit_menu.addAction(action)

        help_menu = menubar.addMenu("&Help")
        help_menu.addAction(self.action_about)

    def _create_toolbar(self) -> None:
        """Create the main toolbar."""
        self._toolbar = QToolBar("Main Toolbar")
        self._toolbar.setObjectName("MainToolbar")
        self._toolbar.setIconSize(QSize(20, 20))
        self._toolbar.setMovable(False)
        self._toolbar.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.addToolBar(self._toolbar)

        self._toolbar.addAction(self.action_power)
        self._toolbar.addAction(self.action_reset)
        self._toolbar.addAction(self.action_delete)
        self._toolbar.addSeparator()
        self._toolbar.addAction(self.action_toggle_grid)
        self._toolbar.addAction(self.action_toggle_theme)

    def _create_status_bar(self) -> None:
        """Create the status bar with icons."""
        status_bar = QStatusBar()
        self.setStatusBar(status_bar)

        self._coord_widget = CoordinateWidget()
        status_bar.addWidget(self._coord_widget)

        self._power_widget = PowerStatusWidget()
        status_bar.addPermanentWidget(self._power_widget)

    def _create_dock_widgets(self) -> None:
        """Create dockable panels."""
        # Component Library (left)
        self.library_dock = QDockWidget("Component Library", self)
        self.library_dock.setObjectName("LibraryDock")
        self.library_dock.setAllowedAreas(
            Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea
        )
        self._library_panel = LibraryPanel(theme_service=self._theme_service)
        self._library_panel.component_requested.connect(self._on_component_requested)
        self.library_dock.setWidget(self._library_panel)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.library_dock)

        # Properties Panel (left, below the library)
        self.properties_dock = QDockWidget("Properties", self)
        self.properties_dock.setObjectName("PropertiesDock")
        self.properties_dock.setAllowedAreas(
            Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea
        )
        self._properties_panel = PropertiesPanel()
        self._properties_panel.attribute_edited.connect(self._on_attribute_edited)
        self._properties_panel.switch_toggled.connect(self._sandbox.toggle_switch)
        self._properties_panel.delete_requested.connect(self._sandbox.delete_selected)
        self.properties_dock.setWidget(self._properties_panel)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.properties_dock)

        # Measurements (right)
        self.measurements_dock = QDockWidget("Measurements", self)
        self.measurements_dock.setObjectName("MeasurementsDock")
        self.measurements_dock.setAllowedAreas(
            Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea
        )
        self._measurement_panel = MeasurementPanel()
        self.measurements_dock.setWidget(self._measurement_panel)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.measurements_dock)

        self.panels_menu.addAction(self.library_dock.toggleViewAction())
        self.panels_menu.addAction(self.properties_dock.toggleViewAction())
        self.panels_menu.addAction(self.measurements_dock.toggleViewAction())

    def _connect_signals(self) -> None:
        """Wire sandbox signals to the panels."""
        self._sandbox.selection_changed.connect(self._on_selection_changed)
        self._sandbox.components_changed.connect(self._on_components_changed)
        self._sandbox.measurements_changed.connect(self._on_measurements_changed)
        self._sandbox.power_changed.connect(self._update_power_actions)
        self._sandbox.attribute_rejected.connect(self._on_attribute_rejected)
        self._canvas.mouse_moved.connect(self._coord_widget.setCoordinates)
        self._theme_service.theme_changed.connect(self._on_theme_changed)

    def _restore_state(self) -> None:
        """Restore window geometry and state."""
        geometry = self._settings.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)

        state = self._settings.get_window_state()
        if state:
            self.restoreState(state)

    def _apply_theme(self, theme_name: str | None = None) -> None:
        """Apply a theme by name, falling back to the saved preference."""
        name = theme_name or self._settings.get_theme()
        if not self._theme_service.set_theme(name):
            logger.warning("Unknown theme %r, using light", name)
            self._theme_service.set_theme("light")

    def _apply_current_theme(self) -> None:
        """Apply the current theme stylesheet and update components."""
        theme = self._theme_service.current_theme
        self.setStyleSheet(self._theme_service.generate_stylesheet())
        self._canvas.set_theme(theme)
        self._measurement_panel.set_theme(theme)
        self.action_toggle_theme.setChecked(theme.is_dark)

        IconService.clear_cache()
        self._update_toolbar_icons()

    def _update_toolbar_icons(self) -> None:
        """Update toolbar icons with theme-appropriate colors."""
        theme = self._theme_service.current_theme
        icon_color = theme.colors.foreground

        power_color = theme.colors.success if self._sandbox.is_powered() else icon_color
        self.action_power.setIcon(IconService.get_icon("power", power_color))
        self.action_reset.setIcon(IconService.get_icon("reset", icon_color))
        self.action_delete.setIcon(IconService.get_icon("trash", theme.colors.error))
        self.action_toggle_grid.setIcon(IconService.get_icon("grid", icon_color))
        self.action_toggle_theme.setIcon(IconService.get_icon("theme", icon_color))

    def _on_theme_changed(self, theme: Theme) -> None:
        """Handle theme change from service."""
        self._apply_current_theme()

    # Gesture handlers

    def _on_component_requested(self, kind: ComponentType) -> None:
        component = self._sandbox.add_component(kind)
        label = get_catalog_entry(component.type).label
        self.statusBar().showMessage(f"Added {label} {component.name}", 2000)

    def _on_attribute_edited(self, component_id: UUID, name: str, text: str) -> None:
        try:
            self._sandbox.set_attribute(component_id, name, text)
        except Exception as exc:  # pragma: no cover - UI feedback only
            self._error_service.show_exception(exc, f"setting {name}")

    def _on_attribute_rejected(self, name: str, reason: str) -> None:
        self._properties_panel.mark_rejected(name)
        info = self._error_service.notify("component_invalid_value", reason)
        self.statusBar().showMessage(f"{info.message} {info.suggestion}", 5000)

    def _on_power_triggered(self, checked: bool) -> None:
        self._sandbox.set_powered(checked)

    def _on_reset(self) -> None:
        self._sandbox.reset()
        self.statusBar().showMessage("Circuit reset", 2000)

    def _on_grid_toggled(self, checked: bool) -> None:
        self._canvas.show_grid = checked
        self._settings.set_show_grid(checked)

    def _on_theme_toggled(self, checked: bool) -> None:
        name = "dark" if checked else "light"
        self._settings.set_theme(name)
        self._theme_service.set_theme(name)

    def _on_refresh_rate_selected(self, interval_ms: int) -> None:
        self._settings.set_refresh_interval(interval_ms)
        self._sandbox.set_refresh_interval(self._settings.get_refresh_interval())
        logger.debug("Refresh interval set to %d ms", self._sandbox.refresh_interval)

    # Sandbox signal handlers

    def _on_selection_changed(self, component) -> None:
        self._properties_panel.set_component(component)
        self.action_delete.setEnabled(component is not None)

    def _on_components_changed(self) -> None:
        self._properties_panel.set_component(self._sandbox.selected())

    def _on_measurements_changed(self, measurements: Measurements) -> None:
        self._measurement_panel.set_measurements(measurements)

    def _update_power_actions(self, powered: bool) -> None:
        self.action_power.setChecked(powered)
        self.action_power.setText("Power ON" if powered else "Power OFF")
        self._power_widget.setPowered(powered)
        self._update_toolbar_icons()

    def _on_about(self) -> None:
        """Show about dialog."""
        QMessageBox.about(
            self,
            "About CircuitSim",
            "<h3>CircuitSim</h3>"
            "<p>Interactive series circuit sandbox for learning Ohm's law.</p>"
            f"<p>Version {__version__}</p>",
        )

    def closeEvent(self, event) -> None:
        """Stop the refresh timer and save window state."""
        self._sandbox.shutdown()

        self._settings.set_window_geometry(self.saveGeometry())
        self._settings.set_window_state(self.saveState())

        event.accept()
