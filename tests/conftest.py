"""Pytest configuration and fixtures."""

import os

# Views are exercised without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication instance for the entire test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def circuit():
    """Create an empty test circuit."""
    from circuitsim.models.circuit import Circuit

    return Circuit(name="test_circuit")


@pytest.fixture
def sandbox(qapp):
    """Create a sandbox service and stop its timer afterwards."""
    from circuitsim.services.sandbox_service import SandboxService

    service = SandboxService()
    yield service
    service.shutdown()


@pytest.fixture
def settings_service(tmp_path):
    """Settings backed by a throwaway INI file."""
    from circuitsim.services.settings_service import SettingsService

    qsettings = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return SettingsService(qsettings)
