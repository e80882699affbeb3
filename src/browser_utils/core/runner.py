"""Bounded operation runner and screenshot-on-failure wrapper.

run_bounded races one asyncio task against a deadline. When the deadline
wins, the task is abandoned, not cancelled: it keeps running until it
finishes on its own. Operations that must stop early have to watch for
their own cancellation signal.

An operation whose duration equals the timeout may land on either side;
which one wins is up to the event loop's callback order.
"""

import asyncio
from typing import Any, Awaitable, Callable

from playwright.async_api import Page

from browser_utils.core.errors import (
    OperationFailedError,
    OperationTimeoutError,
    ScreenshotCaptureError,
    ScreenshotDirectoryError,
    ScreenshotError,
)
from browser_utils.core.logging import ErrorIds, logError, logEvent, logForDebugging
from browser_utils.models.outcome import Completed, Failed, Outcome, TimedOut
from browser_utils.models.policy import OperationOptions
from browser_utils.tools.guard import ensure_target
from browser_utils.tools.screenshot import capture_screenshot, screenshot_path

Operation = Callable[[], Awaitable[Any]]

# Abandoned tasks stay referenced until they finish; the event loop only
# holds weak references to running tasks.
_abandoned: set["asyncio.Task[Any]"] = set()


def _release(task: "asyncio.Task[Any]") -> None:
    _abandoned.discard(task)
    if task.cancelled():
        logForDebugging("Abandoned operation was cancelled")
        return
    error = task.exception()
    if error is not None:
        logForDebugging(f"Abandoned operation finished with error: {error}")
    else:
        logForDebugging("Abandoned operation finished")


def abandoned_count() -> int:
    """Number of timed-out operations that are still running."""
    return len(_abandoned)


async def run_bounded(operation: Operation, timeout: float) -> Outcome:
    """Run an operation with a wall-clock deadline.

    Args:
        operation: Zero-argument callable returning an awaitable.
        timeout: Deadline in seconds.

    Returns:
        Completed with the operation's value, Failed with the exception it
        raised, or TimedOut if the deadline elapsed first. An operation
        that ends up cancelled on its own is Failed with a CancelledError;
        cancelling the caller still propagates.
    """
    try:
        task = asyncio.ensure_future(operation())
    except Exception as e:
        return Failed(error=e)

    try:
        done, _ = await asyncio.wait({task}, timeout=timeout)
    finally:
        if not task.done():
            _abandoned.add(task)
            task.add_done_callback(_release)

    if task not in done:
        logForDebugging(f"Operation exceeded {timeout}s; abandoning it", extra={"timeout": timeout})
        return TimedOut(timeout=timeout)

    # Cancelled from inside, e.g. by awaiting a future someone else cancelled
    if task.cancelled():
        return Failed(error=asyncio.CancelledError())

    error = task.exception()
    if error is not None:
        return Failed(error=error)
    return Completed(value=task.result())


async def time_limit(operation: Operation, timeout: float) -> Any:
    """Run an operation with a deadline, raising on failure.

    Returns:
        The operation's value.

    Raises:
        OperationTimeoutError: If the deadline elapsed first.
        Exception: Whatever the operation raised, unchanged.
    """
    outcome = await run_bounded(operation, timeout)
    if isinstance(outcome, TimedOut):
        raise OperationTimeoutError(outcome.timeout)
    if isinstance(outcome, Failed):
        raise outcome.error
    return outcome.value


_SCREENSHOT_ERROR_IDS = {
    ScreenshotDirectoryError: ErrorIds.SCREENSHOT_DIRECTORY_FAILED,
    ScreenshotCaptureError: ErrorIds.SCREENSHOT_CAPTURE_FAILED,
}


async def run_operation(
    page: Page,
    operation: Operation,
    options: OperationOptions | None = None,
) -> Any:
    """Run an operation with a deadline and screenshot the page if it fails.

    The screenshot goes to `<path>/<name>_<timestamp>.png`, or
    `<path>/<timestamp>.png` without a name. The timestamp is taken when
    this call starts.

    Args:
        page: The page to screenshot on failure.
        operation: Zero-argument callable returning an awaitable.
        options: Timeout and screenshot location. Defaults to OperationOptions().

    Returns:
        The operation's value.

    Raises:
        NilTargetError: If page is None. The operation is not run.
        OperationFailedError: If the operation raised; chained from its error.
        OperationTimeoutError: If the deadline elapsed first.
        ScreenshotError: If the failure screenshot could not be written.
            The operation's failure is kept as `operation_error`.
    """
    ensure_target(page, "page")
    if options is None:
        options = OperationOptions()

    target = screenshot_path(options.path, options.name)
    outcome = await run_bounded(operation, options.timeout)
    if isinstance(outcome, Completed):
        return outcome.value

    if isinstance(outcome, Failed):
        failure: BaseException = outcome.error
    else:
        failure = OperationTimeoutError(outcome.timeout)

    try:
        saved = await capture_screenshot(page, target, full_page=True, operation_error=failure)
    except ScreenshotError as e:
        error_id = _SCREENSHOT_ERROR_IDS.get(type(e), ErrorIds.SCREENSHOT_SAVE_FAILED)
        logError(error_id, str(e), extra={"operation_error": failure})
        raise

    logEvent("failure_screenshot_saved", {"path": saved})

    if isinstance(outcome, TimedOut):
        logError(ErrorIds.OPERATION_TIMEOUT, f"Operation timed out after {outcome.timeout}s", extra={"screenshot": saved})
        raise OperationTimeoutError(outcome.timeout, screenshot_path=saved)

    logError(ErrorIds.OPERATION_FAILED, f"Operation failed: {outcome.error}", extra={"screenshot": saved})
    raise OperationFailedError(outcome.error, screenshot_path=saved) from outcome.error
