"""Error handling service for user-friendly error messages."""

import logging
from dataclasses import dataclass, replace
from enum import Enum, auto

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QMessageBox, QWidget

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Error severity levels."""

    INFO = auto()
    WARNING = auto()
    ERROR = auto()
    CRITICAL = auto()


@dataclass
class ErrorInfo:
    """Information about an error."""

    title: str
    message: str
    details: str = ""
    severity: ErrorSeverity = ErrorSeverity.ERROR
    suggestion: str = ""


# User-friendly error message mappings
ERROR_MESSAGES = {
    "component_invalid_value": ErrorInfo(
        title="Invalid Value",
        message="The component value was not accepted.",
        suggestion="Enter a number with optional SI prefix (e.g., 9, 220, 1k, 4.7k).",
        severity=ErrorSeverity.WARNING,
    ),
    "unexpected": ErrorInfo(
        title="Error",
        message="An unexpected error occurred.",
        suggestion="Please try again. If the problem persists, check the log output.",
        severity=ErrorSeverity.CRITICAL,
    ),
}

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class ErrorService(QObject):
    """Service for reporting and displaying errors."""

    error_occurred = Signal(str, str, str)  # title, message, details

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._parent_widget = parent

    def get_error_info(
        self,
        error_key: str,
        details: str = "",
        exception: Exception | None = None,
    ) -> ErrorInfo:
        """Build the ErrorInfo for a predefined error key."""
        if not details and exception is not None:
            details = str(exception)

        info = ERROR_MESSAGES.get(error_key)
        if info is None:
            # Fallback for unknown error keys
            return ErrorInfo(
                title="Error",
                message=f"An error occurred: {error_key}",
                details=details,
            )
        return replace(info, details=details)

    def notify(self, error_key: str, details: str = "") -> ErrorInfo:
        """Report an error without a dialog; listeners decide how to show it."""
        info = self.get_error_info(error_key, details)
        self._emit(info)
        return info

    def show_exception(
        self,
        exception: Exception,
        context: str = "",
    ) -> None:
        """Show an error dialog for an exception with context."""
        error_type = type(exception).__name__
        logger.error(
            "Unhandled error%s", f" while {context}" if context else "", exc_info=exception
        )

        if isinstance(exception, ValueError):
            info = ErrorInfo(
                title="Invalid Value",
                message=f"An invalid value was provided{f' for {context}' if context else ''}.",
                details=str(exception),
                suggestion="Check the input values and try again.",
            )
        else:
            info = replace(
                ERROR_MESSAGES["unexpected"],
                message=f"An unexpected error occurred{f' while {context}' if context else ''}.",
                details=f"{error_type}: {exception}",
            )
        self._display_error(info)

    @staticmethod
    def format_message(info: ErrorInfo, include_details: bool = True) -> str:
        """Join message, suggestion and details into one string."""
        full_message = info.message
        if info.suggestion:
            full_message += f"\n\n{info.suggestion}"
        if include_details and info.details:
            full_message += f"\n\nDetails: {info.details}"
        return full_message

    def _emit(self, info: ErrorInfo) -> None:
        logger.log(_LOG_LEVELS[info.severity], "%s: %s %s", info.title, info.message, info.details)
        self.error_occurred.emit(info.title, info.message, info.details)

    def _display_error(self, info: ErrorInfo) -> None:
        """Display the error dialog."""
        self._emit(info)
        full_message = self.format_message(info)

        if info.severity == ErrorSeverity.INFO:
            QMessageBox.information(self._parent_widget, info.title, full_message)
        elif info.severity == ErrorSeverity.WARNING:
            QMessageBox.warning(self._parent_widget, info.title, full_message)
        else:
            QMessageBox.critical(self._parent_widget, info.title, full_message)
