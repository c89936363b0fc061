"""
Error handling utilities.

Layers translate errors on the way up:

- Low level (mido, subprocess) raises standard Python exceptions
- Services and transport convert them to LaunchGridError or degrade to defaults
- The CLI formats `user_message` and `recovery_hint` for display
"""

import logging
from typing import Optional

from .base import LaunchGridError

logger = logging.getLogger(__name__)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format any exception for display to users.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint)
    """
    if isinstance(error, LaunchGridError):
        return error.user_message, error.recovery_hint

    error_str = str(error)

    if isinstance(error, KeyboardInterrupt):
        return "Interrupted by user", None

    if isinstance(error, PermissionError):
        return f"Permission denied: {error_str}", "Check that your user can access MIDI devices."

    return f"Unexpected error: {error_str}", "Run with --debug for details."


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("connect to device"):
            transport = MidiTransport.connect(...)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
        """
        self.operation = operation
        self.logger = logger_instance or logger

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            False, so the exception always propagates
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        if isinstance(exc_val, LaunchGridError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Unexpected error during {self.operation}: {exc_val}", exc_info=True)

        return False
