"""Application services for CircuitSim."""

from circuitsim.services.circuit_evaluator import Measurements, evaluate, glow_brightness
from circuitsim.services.sandbox_service import SandboxService, SandboxState
from circuitsim.services.settings_service import SettingsService
from circuitsim.services.theme_service import (
    ThemeService,
    Theme,
    ThemeColors,
    LIGHT_THEME,
    DARK_THEME,
    BUILTIN_THEMES,
)
from circuitsim.services.error_service import ErrorService, ErrorSeverity, ErrorInfo

__all__ = [
    "Measurements",
    "evaluate",
    "glow_brightness",
    "SandboxService",
    "SandboxState",
    "SettingsService",
    "ThemeService",
    "Theme",
    "ThemeColors",
    "LIGHT_THEME",
    "DARK_THEME",
    "BUILTIN_THEMES",
    "ErrorService",
    "ErrorSeverity",
    "ErrorInfo",
]
