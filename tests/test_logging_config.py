"""Tests for logging configuration module."""

import logging
import logging.handlers
import os
import sys
from unittest.mock import patch

import pytest

from anki_mcp.utils.logging_config import (
    PerformanceMonitor,
    get_log_level,
    initialize_logging,
    log_operation,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way it was."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_get_log_level():
    """Test log level detection from environment."""
    with patch.dict(os.environ, {}, clear=True):
        assert get_log_level() == logging.INFO

    with patch.dict(os.environ, {"DEBUG": "true"}, clear=True):
        assert get_log_level() == logging.DEBUG

    with patch.dict(os.environ, {"LOG_LEVEL": "error", "DEBUG": "1"}, clear=True):
        assert get_log_level() == logging.ERROR


def test_initialize_logging_uses_stderr():
    with patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}, clear=True):
        initialize_logging(log_to_file=False)

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr


def test_initialize_logging_adds_file_handler(tmp_path):
    with patch("anki_mcp.utils.logging_config.LOG_DIR", tmp_path):
        initialize_logging(log_to_file=True)

    root = logging.getLogger()
    file_handlers = [
        h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename.startswith(str(tmp_path))
    file_handlers[0].close()


def test_log_operation(caplog):
    logger = logging.getLogger("test_log_operation")

    with caplog.at_level(logging.DEBUG, logger="test_log_operation"):
        log_operation(logger, "add_tags", 42, "error", error="locked")
        log_operation(logger, "add_tags", 43, "success")

    assert caplog.records[0].levelno == logging.WARNING
    assert caplog.records[0].getMessage() == "[ADD_TAGS] 42 - error (error=locked)"
    assert caplog.records[1].levelno == logging.DEBUG


def test_performance_monitor(caplog):
    logger = logging.getLogger("test_performance")

    with caplog.at_level(logging.INFO, logger="test_performance"):
        with PerformanceMonitor(logger, "bulk_add_tags", notes=3):
            pass

    message = caplog.records[0].getMessage()
    assert message.startswith("bulk_add_tags completed in ")
    assert message.endswith("(notes=3)")


def test_performance_monitor_reports_failure(caplog):
    logger = logging.getLogger("test_performance_failure")

    with caplog.at_level(logging.INFO, logger="test_performance_failure"):
        with pytest.raises(RuntimeError):
            with PerformanceMonitor(logger, "smart_tag_cleanup"):
                raise RuntimeError("boom")

    assert "smart_tag_cleanup failed in" in caplog.records[0].getMessage()
