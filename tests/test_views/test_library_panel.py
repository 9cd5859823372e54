"""Tests for the component library panel."""

from circuitsim.models.component import ComponentType
from circuitsim.models.component_catalog import COMPONENT_LIBRARY
from circuitsim.services.theme_service import ThemeService
from circuitsim.views.canvas import create_symbol_pixmap
from circuitsim.views.library import LibraryPanel


def test_one_button_per_catalog_entry(qapp):
    panel = LibraryPanel()
    for entry in COMPONENT_LIBRARY:
        button = panel.button_for(entry.type)
        assert entry.label in button.text()
        assert f"({entry.shortcut})" in button.text()
        assert not button.icon().isNull()


def test_click_requests_component(qapp):
    panel = LibraryPanel()
    requested = []
    panel.component_requested.connect(requested.append)

    panel.button_for(ComponentType.LED).click()
    panel.button_for(ComponentType.BATTERY).click()

    assert requested == [ComponentType.LED, ComponentType.BATTERY]


def test_follows_theme_changes(qapp):
    themes = ThemeService()
    panel = LibraryPanel(theme_service=themes)
    themes.set_theme("dark")
    assert not panel.button_for(ComponentType.SWITCH).icon().isNull()


def test_symbol_pixmap_is_drawn(qapp):
    pixmap = create_symbol_pixmap(ComponentType.RESISTOR, size=32, color="#ff0000")
    image = pixmap.toImage()
    opaque = [
        (x, y)
        for x in range(image.width())
        for y in range(image.height())
        if image.pixelColor(x, y).alpha() > 0
    ]
    assert pixmap.width() == 32
    assert opaque
