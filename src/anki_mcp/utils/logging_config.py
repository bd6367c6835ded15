"""
Logging configuration and management for Anki MCP.

Provides centralized logging configuration with:
- Log levels driven by LOG_LEVEL / DEBUG
- Console handler on stderr (stdout carries the MCP stdio stream)
- Optional rotating file handler
- Per-operation and timing helpers used by the bulk engine
"""

from datetime import datetime
import logging
import logging.handlers
import os
from pathlib import Path
import sys
from typing import Any

# -------------------- Configuration --------------------


LOG_DIR = Path.home() / ".cache" / "anki-mcp" / "logs"

CONSOLE_FORMAT = "%(name)s %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# -------------------- Utility Functions --------------------


def get_log_level() -> int:
    """
    Get the current log level from environment configuration.

    Checks LOG_LEVEL environment variable first, then DEBUG flag.

    Returns:
        Logging level constant (logging.DEBUG, logging.INFO, etc.)
    """
    level_str = os.getenv("LOG_LEVEL", "").upper()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    if level_str in level_map:
        return level_map[level_str]

    if os.getenv("DEBUG", "").lower() in ("true", "1", "yes"):
        return logging.DEBUG

    return logging.INFO


def get_log_file_path() -> Path:
    """Get today's log file path, creating the log directory if needed."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    today = datetime.now().strftime("%Y-%m-%d")
    return LOG_DIR / f"anki-mcp-{today}.log"


def log_operation(
    logger: logging.Logger,
    operation: str,
    item_id: Any,
    status: str,
    **details: Any,
) -> None:
    """
    Log individual operation with consistent format.

    Args:
        logger: Logger instance
        operation: Operation type (e.g., "add_tags", "change_deck")
        item_id: Note or card ID
        status: Operation status (success, error, skipped)
        **details: Additional operation details
    """
    msg = f"[{operation.upper()}] {item_id} - {status}"

    if details:
        detail_str = ", ".join(f"{k}={v}" for k, v in details.items())
        msg = f"{msg} ({detail_str})"

    if status == "error":
        logger.warning(msg)
    else:
        logger.debug(msg)


# -------------------- Performance Monitoring --------------------


class PerformanceMonitor:
    """
    Context manager for monitoring operation performance.

    Example:
        >>> with PerformanceMonitor(logger, "bulk_add_tags", items=120):
        ...     await service.add_tags(...)
    """

    def __init__(
        self,
        logger: logging.Logger,
        operation_name: str,
        log_level: int = logging.INFO,
        **metadata: Any,
    ) -> None:
        self.logger = logger
        self.operation_name = operation_name
        self.log_level = log_level
        self.metadata = metadata
        self.start_time: datetime | None = None

    def __enter__(self) -> "PerformanceMonitor":
        self.start_time = datetime.now()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is None:
            return

        elapsed = (datetime.now() - self.start_time).total_seconds()
        status = "failed" if exc_type is not None else "completed"
        msg = f"{self.operation_name} {status} in {elapsed:.2f}s"

        if self.metadata:
            metadata_str = ", ".join(f"{k}={v}" for k, v in self.metadata.items())
            msg = f"{msg} ({metadata_str})"

        self.logger.log(self.log_level, msg)


# -------------------- Initialization --------------------


def initialize_logging(log_to_file: bool | None = None) -> None:
    """
    Initialize logging system for the application.

    Should be called once at application startup. File logging is enabled
    when ``log_to_file`` is True or the ANKI_MCP_LOG_FILE variable is set.
    """
    level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_to_file is None:
        log_to_file = os.getenv("ANKI_MCP_LOG_FILE", "").lower() in ("true", "1", "yes")

    if log_to_file:
        file_handler = logging.handlers.RotatingFileHandler(
            get_log_file_path(),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)

    logging.getLogger(__name__).info(
        f"Logging initialized. Level: {logging.getLevelName(level)}"
    )
