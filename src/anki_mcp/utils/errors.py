"""
Unified error handling for Anki MCP.
"""

import logging

logger = logging.getLogger(__name__)


class AnkiMCPError(Exception):
    """Base exception for Anki MCP errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}. {self.suggestion}"
        return self.message


class AnkiConnectionError(AnkiMCPError):
    """Error reaching AnkiConnect (refused connection, timeout, bad HTTP status)."""
    pass


class AnkiConnectError(AnkiMCPError):
    """AnkiConnect answered with an error for the requested action."""

    def __init__(self, action: str, message: str):
        super().__init__(message)
        self.action = action


class ValidationError(AnkiMCPError):
    """Input validation error."""
    pass


class PatternError(ValidationError):
    """A tag pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f'Invalid regex pattern "{pattern}": {reason}')
        self.pattern = pattern


class SnapshotError(AnkiMCPError):
    """Pre-change state could not be captured, so no rollback point exists."""
    pass


class ConfigurationError(AnkiMCPError):
    """Configuration error."""
    pass


def handle_error(error: Exception, operation: str = "operation") -> str:
    """
    Handle errors consistently across all tools.

    Args:
        error: The exception that occurred
        operation: Name of the operation that failed

    Returns:
        User-friendly error message with suggestions
    """
    logger.error(f"Error in {operation}: {str(error)}")

    if isinstance(error, AnkiMCPError):
        return f"Failed to {operation}: {error}"

    error_str = str(error).lower()
    if "connection" in error_str or "timeout" in error_str or "timed out" in error_str:
        return (
            f"Failed to {operation}: Could not connect to Anki. "
            "Please ensure Anki is running with the AnkiConnect add-on installed."
        )

    return f"Failed to {operation}: {str(error) or type(error).__name__}"
