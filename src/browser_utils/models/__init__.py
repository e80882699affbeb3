"""Browser utilities data models."""

from browser_utils.models.outcome import Completed, Failed, Outcome, TimedOut
from browser_utils.models.policy import (
    DEFAULT_RETRY_COUNT,
    DEFAULT_RETRY_DELAY,
    DEFAULT_SCREENSHOT_PATH,
    DEFAULT_STABLE_DURATION,
    DEFAULT_TIMEOUT,
    OperationOptions,
    Policy,
)

__all__ = [
    "Completed",
    "Failed",
    "Outcome",
    "TimedOut",
    "OperationOptions",
    "Policy",
    "DEFAULT_RETRY_COUNT",
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_SCREENSHOT_PATH",
    "DEFAULT_STABLE_DURATION",
    "DEFAULT_TIMEOUT",
]
