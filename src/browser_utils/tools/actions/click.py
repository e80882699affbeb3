"""Click action helpers for browser automation.

This module provides click and click_and_load for element handles.
"""

from playwright.async_api import ElementHandle, Error as PlaywrightError

from browser_utils.core.errors import ActionError, PageNotLoadedError
from browser_utils.core.logging import ErrorIds, logError
from browser_utils.tools.guard import ensure_target
from browser_utils.tools.wait import DEFAULT_WAIT_TIMEOUT, wait_enabled


async def click(handle: ElementHandle, timeout: float = DEFAULT_WAIT_TIMEOUT) -> None:
    """Left-click an element once, after waiting for it to be enabled.

    Args:
        handle: The element to click.
        timeout: Maximum time for each of the enabled wait and the click (ms).

    Raises:
        NilTargetError: If handle is None.
        ActionError: If the element never becomes enabled or the click fails.
    """
    ensure_target(handle, "element")
    await wait_enabled(handle, timeout=timeout)
    try:
        await handle.click(button="left", click_count=1, timeout=timeout)
    except PlaywrightError as e:
        logError(ErrorIds.CLICK_FAILED, f"Click failed: {e}")
        raise ActionError("click", "element", str(e)) from e


async def click_and_load(handle: ElementHandle, timeout: float = DEFAULT_WAIT_TIMEOUT) -> None:
    """Click an element, then wait for its page to finish loading.

    Raises:
        NilTargetError: If handle is None.
        ActionError: If the click fails.
        PageNotLoadedError: If the owning page does not reach "load" in time.
    """
    await click(handle, timeout=timeout)
    try:
        frame = await handle.owner_frame()
        if frame is None:
            logError(ErrorIds.PAGE_NOT_LOADED, "Clicked element is detached from its frame")
            raise PageNotLoadedError("element is detached from its frame")
        await frame.page.wait_for_load_state("load", timeout=timeout)
    except PlaywrightError as e:
        logError(ErrorIds.PAGE_NOT_LOADED, f"Page did not load after click: {e}")
        raise PageNotLoadedError(f"error waiting for page load to complete: {e}") from e
