"""browser-utils: retrying, deadline-bounded helpers over Playwright."""

from browser_utils.core import (
    BrowserUtilsError,
    run_bounded,
    run_operation,
    safe_click,
    safe_element,
    time_limit,
)
from browser_utils.models import OperationOptions, Policy

__version__ = "0.1.0"

__all__ = [
    "BrowserUtilsError",
    "OperationOptions",
    "Policy",
    "run_bounded",
    "run_operation",
    "safe_click",
    "safe_element",
    "time_limit",
]
