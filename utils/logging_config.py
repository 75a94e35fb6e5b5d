"""Logging configuration for document turnover analysis."""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from typing import Optional

from config import Config

LOG_QUEUE_SIZE = 1000


def setup_logging(
    log_file: str | None = None,
    log_level: str | None = None,
    async_sink: bool = False,
) -> Optional[QueueListener]:
    """
    Configure application logging with console and file handlers.

    Args:
        log_file: Path to log file (defaults to Config.LOG_FILE)
        log_level: Logging level (defaults to Config.LOG_LEVEL)
        async_sink: Write records from a background listener thread fed by a
            bounded queue instead of on the calling thread

    Returns:
        The started QueueListener when async_sink is set, otherwise None.
        Pass it to shutdown_logging() before exiting.
    """
    log_file = log_file or Config.LOG_FILE
    log_level = log_level or Config.LOG_LEVEL

    # Create logger
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    logger.handlers.clear()

    # Console handler with formatting
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_format = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler with detailed formatting
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_format = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
    )
    file_handler.setFormatter(file_format)

    listener = None
    if async_sink:
        log_queue: queue.Queue = queue.Queue(maxsize=LOG_QUEUE_SIZE)
        logger.addHandler(QueueHandler(log_queue))
        listener = QueueListener(
            log_queue, console_handler, file_handler, respect_handler_level=True
        )
        listener.start()
    else:
        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    logger.info("Logging initialized")
    return listener


def shutdown_logging(listener: Optional[QueueListener]) -> None:
    """
    Stop a queue listener started by setup_logging().

    Records already queued are written before this returns.

    Args:
        listener: Listener returned by setup_logging(), or None
    """
    if listener is None:
        return

    listener.stop()
    for handler in listener.handlers:
        handler.flush()
        if isinstance(handler, logging.FileHandler):
            handler.close()

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, QueueHandler):
            root.removeHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
