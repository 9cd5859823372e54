"""Tests for persisted UI settings."""

from circuitsim.services.settings_service import DEFAULT_REFRESH_INTERVAL_MS


def test_defaults(settings_service):
    assert settings_service.get_theme() == "light"
    assert settings_service.get_show_grid() is True
    assert settings_service.get_refresh_interval() == DEFAULT_REFRESH_INTERVAL_MS
    assert settings_service.get_window_geometry() is None


def test_theme_round_trip(settings_service):
    settings_service.set_theme("dark")
    assert settings_service.get_theme() == "dark"


def test_show_grid_round_trip(settings_service):
    settings_service.set_show_grid(False)
    assert settings_service.get_show_grid() is False


def test_refresh_interval_is_clamped(settings_service):
    settings_service.set_refresh_interval(5)
    assert settings_service.get_refresh_interval() == 16

    settings_service.set_refresh_interval(5000)
    assert settings_service.get_refresh_interval() == 1000

    settings_service.set_refresh_interval(250)
    assert settings_service.get_refresh_interval() == 250


def test_corrupt_refresh_interval_uses_default(settings_service):
    settings_service._settings.setValue("refresh_interval_ms", "fast")
    assert settings_service.get_refresh_interval() == DEFAULT_REFRESH_INTERVAL_MS
