"""Logging infrastructure for browser utilities.

This module provides structured logging for errors, debugging, and analytics.
All logging functions use the standard library logging module for flexibility.
"""

import logging
import sys
from typing import Any

# Error ID constants for tracking and Sentry integration
class ErrorIds:
    """Constants for error IDs used in logging and error tracking."""

    # Precondition errors
    NIL_TARGET = "ERR_NIL_TARGET"

    # Lookup and wait errors
    ELEMENT_NOT_FOUND = "ERR_ELEMENT_NOT_FOUND"
    ELEMENT_NOT_VISIBLE = "ERR_ELEMENT_NOT_VISIBLE"
    ELEMENT_NOT_STABLE = "ERR_ELEMENT_NOT_STABLE"
    PAGE_NOT_LOADED = "ERR_PAGE_NOT_LOADED"

    # Action execution errors
    CLICK_FAILED = "ERR_CLICK"
    TYPE_FAILED = "ERR_TYPE"
    ATTRIBUTE_READ_FAILED = "ERR_ATTRIBUTE"
    NAVIGATION_FAILED = "ERR_NAVIGATE"
    SCROLL_FAILED = "ERR_SCROLL"

    # Orchestration errors
    OPERATION_TIMEOUT = "ERR_OPERATION_TIMEOUT"
    OPERATION_FAILED = "ERR_OPERATION_FAILED"
    RETRY_EXHAUSTED = "ERR_RETRY_EXHAUSTED"

    # Screenshot I/O errors
    SCREENSHOT_DIRECTORY_FAILED = "ERR_SCREENSHOT_DIR"
    SCREENSHOT_CAPTURE_FAILED = "ERR_SCREENSHOT"
    SCREENSHOT_SAVE_FAILED = "ERR_SCREENSHOT_SAVE"

    # General errors
    CONFIG_INVALID = "ERR_CONFIG"
    UNEXPECTED_ERROR = "ERR_UNEXPECTED"
    KEYBOARD_INTERRUPT = "KEYBOARD_INTERRUPT"


_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger: logging.Logger | None = None


def _get_logger() -> logging.Logger:
    """Get or create the logger instance."""
    global _logger
    if _logger is None:
        _logger = logging.getLogger("browser_utils")
        _logger.setLevel(logging.DEBUG)

        # Console handler for user-facing logs
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        _logger.addHandler(console_handler)

    return _logger


def _format_extra(message: str, extra: dict[str, Any] | None) -> str:
    if extra:
        message += " | " + ", ".join(f"{k}={v}" for k, v in extra.items())
    return message


def logError(
    error_id: str,
    message: str,
    exc_info: bool = False,
    extra: dict[str, Any] | None = None,
) -> None:
    """Log an error for error tracking.

    Args:
        error_id: The error ID constant from ErrorIds.
        message: Human-readable error message.
        exc_info: If True, include exception info in the log.
        extra: Optional additional context as key-value pairs.
    """
    logger = _get_logger()
    logger.error(_format_extra(f"[{error_id}] {message}", extra), exc_info=exc_info)


def logForDebugging(
    message: str,
    level: str = "debug",
    extra: dict[str, Any] | None = None,
) -> None:
    """Log a user-facing debug message.

    Args:
        message: The message to log.
        level: Log level - "debug", "info", "warning", or "error".
        extra: Optional additional context as key-value pairs.
    """
    logger = _get_logger()
    log_level = getattr(logging, level.upper(), logging.DEBUG)
    logger.log(log_level, _format_extra(message, extra))


def logEvent(
    event_name: str,
    properties: dict[str, Any] | None = None,
) -> None:
    """Log an analytics event.

    Args:
        event_name: The name of the event (e.g., "retry_succeeded", "screenshot_saved").
        properties: Optional event properties as key-value pairs.
    """
    logger = _get_logger()
    logger.info(_format_extra(f"[EVENT] {event_name}", properties))


def set_log_level(level: str | int) -> None:
    """Set the logging level for browser utilities.

    Args:
        level: Log level as string ("debug", "info", "warning", "error")
               or int (logging.DEBUG, logging.INFO, etc.).
    """
    logger = _get_logger()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)
    logger.handlers[0].setLevel(level)


def enable_file_logging(filepath: str) -> None:
    """Enable file logging to a specific file.

    Args:
        filepath: Path to the log file.
    """
    logger = _get_logger()
    file_handler = logging.FileHandler(filepath)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(file_handler)
