"""Tests for logging setup."""

import logging
from logging.handlers import QueueHandler

import pytest

from utils.logging_config import get_logger, setup_logging, shutdown_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_to_file(tmp_path):
    """Test the synchronous console and file handlers."""
    log_file = tmp_path / "logs" / "turnover.log"

    listener = setup_logging(log_file=str(log_file), log_level="DEBUG")
    get_logger("tests.logging").debug("debug line")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert listener is None
    assert logging.getLogger().level == logging.DEBUG
    content = log_file.read_text(encoding="utf-8")
    assert "Logging initialized" in content
    assert "debug line" in content


def test_async_sink_flushes_on_shutdown(tmp_path):
    """Test that queued records reach the file once the listener stops."""
    log_file = tmp_path / "turnover.log"

    listener = setup_logging(log_file=str(log_file), log_level="INFO", async_sink=True)
    assert any(isinstance(h, QueueHandler) for h in logging.getLogger().handlers)

    for i in range(50):
        get_logger("tests.logging").info(f"queued record {i}")
    shutdown_logging(listener)

    content = log_file.read_text(encoding="utf-8")
    assert "queued record 0" in content
    assert "queued record 49" in content
    assert not any(isinstance(h, QueueHandler) for h in logging.getLogger().handlers)


def test_shutdown_without_listener():
    """Test that shutting down a synchronous setup is a no-op."""
    shutdown_logging(None)
