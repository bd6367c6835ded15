"""
Utility functions and helpers for Anki MCP.
"""

from .errors import (
    AnkiConnectError,
    AnkiConnectionError,
    AnkiMCPError,
    ConfigurationError,
    PatternError,
    SnapshotError,
    ValidationError,
    handle_error,
)
from .helpers import format_id_list, parse_id_list, parse_name_list, to_json
from .logging_config import (
    PerformanceMonitor,
    get_log_level,
    initialize_logging,
    log_operation,
)

__all__ = [
    # Errors
    "AnkiMCPError",
    "AnkiConnectionError",
    "AnkiConnectError",
    "ValidationError",
    "PatternError",
    "SnapshotError",
    "ConfigurationError",
    "handle_error",
    # Helpers
    "parse_id_list",
    "parse_name_list",
    "format_id_list",
    "to_json",
    # Logging
    "initialize_logging",
    "get_log_level",
    "log_operation",
    "PerformanceMonitor",
]
