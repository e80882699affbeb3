"""Browser utilities core components."""

from browser_utils.core.browser import first_page, launch_persistent_context
from browser_utils.core.config import Settings, load_settings
from browser_utils.core.errors import (
    ActionError,
    BrowserUtilsError,
    ConfigError,
    ElementNotFoundError,
    ElementNotStableError,
    ElementNotVisibleError,
    NavigationError,
    NilTargetError,
    OperationFailedError,
    OperationTimeoutError,
    PageNotLoadedError,
    RetryExhaustedError,
    ScreenshotCaptureError,
    ScreenshotDirectoryError,
    ScreenshotError,
    ScreenshotSaveError,
)
from browser_utils.core.retry import safe_click, safe_element
from browser_utils.core.runner import run_bounded, run_operation, time_limit

__all__ = [
    "first_page",
    "launch_persistent_context",
    "Settings",
    "load_settings",
    "safe_click",
    "safe_element",
    "run_bounded",
    "run_operation",
    "time_limit",
    "ActionError",
    "BrowserUtilsError",
    "ConfigError",
    "ElementNotFoundError",
    "ElementNotStableError",
    "ElementNotVisibleError",
    "NavigationError",
    "NilTargetError",
    "OperationFailedError",
    "OperationTimeoutError",
    "PageNotLoadedError",
    "RetryExhaustedError",
    "ScreenshotCaptureError",
    "ScreenshotDirectoryError",
    "ScreenshotError",
    "ScreenshotSaveError",
]
