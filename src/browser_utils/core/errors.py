"""Exception taxonomy for browser utilities.

Every failure raised by this package derives from BrowserUtilsError.
Driver exceptions from Playwright are caught at the helper boundary and
re-raised as one of these types with the original as __cause__.
"""

from pathlib import Path


class BrowserUtilsError(Exception):
    """Base class for all browser utility errors."""


class NilTargetError(BrowserUtilsError):
    """Raised when a page or element handle is None."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{kind} is None")


class ElementNotFoundError(BrowserUtilsError):
    """Raised when no element matches a selector."""

    def __init__(self, selector: str, reason: str | None = None) -> None:
        self.selector = selector
        message = f"element not found: {selector}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ElementNotVisibleError(BrowserUtilsError):
    """Raised when an element does not become visible in time."""

    def __init__(self, selector: str, reason: str | None = None) -> None:
        self.selector = selector
        message = f"element not visible: {selector}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ElementNotStableError(BrowserUtilsError):
    """Raised when an element keeps moving or resizing past its deadline."""

    def __init__(self, selector: str, reason: str | None = None) -> None:
        self.selector = selector
        message = f"element not stable: {selector}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class PageNotLoadedError(BrowserUtilsError):
    """Raised when a page does not reach its load state in time."""


class ActionError(BrowserUtilsError):
    """Raised when the driver fails to perform an action on a target."""

    def __init__(self, action: str, target: str, reason: str | None = None) -> None:
        self.action = action
        self.target = target
        message = f"{action} failed: {target}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NavigationError(ActionError):
    """Raised when navigation fails or returns an error status."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        super().__init__("navigate", url, reason)
        self.url = url


class OperationTimeoutError(BrowserUtilsError):
    """Raised when a bounded operation exceeds its deadline."""

    def __init__(self, timeout: float, screenshot_path: Path | None = None) -> None:
        self.timeout = timeout
        self.screenshot_path = screenshot_path
        message = f"operation timed out after {timeout}s"
        if screenshot_path is not None:
            message += f" (screenshot: {screenshot_path})"
        super().__init__(message)


class OperationFailedError(BrowserUtilsError):
    """Raised by the operation wrapper when the wrapped operation fails.

    The operation's own exception is available as __cause__.
    """

    def __init__(self, error: BaseException, screenshot_path: Path | None = None) -> None:
        self.screenshot_path = screenshot_path
        message = f"operation failed: {error}"
        if screenshot_path is not None:
            message += f" (screenshot: {screenshot_path})"
        super().__init__(message)


class RetryExhaustedError(BrowserUtilsError):
    """Raised when every attempt of a retried action failed.

    Only the last attempt's failure is kept, as last_error and __cause__.
    """

    def __init__(self, action: str, selector: str, attempts: int, last_error: BaseException | None) -> None:
        self.action = action
        self.selector = selector
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"all {attempts} {action} attempt(s) failed for {selector!r}: {last_error}"
        )


class ScreenshotError(BrowserUtilsError):
    """Base class for failures while persisting a failure screenshot.

    Attributes:
        path: The directory or file that could not be written.
        operation_error: The operation failure that triggered the screenshot.
    """

    action = "handle screenshot"

    def __init__(self, path: Path, operation_error: BaseException | None = None) -> None:
        self.path = path
        self.operation_error = operation_error
        super().__init__(f"failed to {self.action}: {path}")


class ScreenshotDirectoryError(ScreenshotError):
    action = "create screenshot directory"


class ScreenshotCaptureError(ScreenshotError):
    action = "capture screenshot"


class ScreenshotSaveError(ScreenshotError):
    action = "save screenshot"


class ConfigError(BrowserUtilsError):
    """Raised when configuration cannot be loaded or validated."""
