"""Utility modules for logging."""

from utils.logging_config import get_logger, setup_logging, shutdown_logging

__all__ = ["setup_logging", "shutdown_logging", "get_logger"]
