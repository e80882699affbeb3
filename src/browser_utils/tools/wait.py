"""Wait helpers for element and page conditions.

All timeouts are in milliseconds, as in the Playwright API.
"""

import asyncio

from playwright.async_api import ElementHandle, Error as PlaywrightError, Page

from browser_utils.core.errors import (
    ActionError,
    ElementNotStableError,
    ElementNotVisibleError,
    PageNotLoadedError,
)
from browser_utils.core.logging import ErrorIds, logError
from browser_utils.tools.guard import ensure_target

DEFAULT_WAIT_TIMEOUT = 10000
DEFAULT_STABLE_MS = 200


async def wait_visible(
    handle: ElementHandle,
    selector: str = "",
    timeout: float = DEFAULT_WAIT_TIMEOUT,
) -> None:
    """Wait for an element to become visible.

    Args:
        handle: The element to wait on.
        selector: Selector used to find the element, for error messages.
        timeout: Maximum time to wait (ms).

    Raises:
        NilTargetError: If handle is None.
        ElementNotVisibleError: If the element is not visible in time.
    """
    ensure_target(handle, "element")
    try:
        await handle.wait_for_element_state("visible", timeout=timeout)
    except PlaywrightError as e:
        logError(ErrorIds.ELEMENT_NOT_VISIBLE, f"Element not visible: {selector}", extra={"timeout": timeout})
        raise ElementNotVisibleError(selector, str(e)) from e


def _not_stable(selector: str, reason: str) -> ElementNotStableError:
    logError(ErrorIds.ELEMENT_NOT_STABLE, f"Element not stable: {selector} ({reason})")
    return ElementNotStableError(selector, reason)


async def wait_stable(
    handle: ElementHandle,
    selector: str = "",
    duration: float = DEFAULT_STABLE_MS,
    timeout: float = DEFAULT_WAIT_TIMEOUT,
) -> None:
    """Wait until an element's bounding box stays unchanged for `duration` ms.

    A stability window is only started when it can finish before the
    timeout, so the wait never runs past it.

    Args:
        handle: The element to wait on.
        selector: Selector used to find the element, for error messages.
        duration: Window the box must hold still (ms).
        timeout: Maximum total time to wait (ms).

    Raises:
        NilTargetError: If handle is None.
        ElementNotStableError: If the element keeps changing past the
            timeout, has no layout box, or its box cannot be read.
    """
    ensure_target(handle, "element")

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout / 1000
    try:
        previous = await handle.bounding_box()
        while True:
            if loop.time() + duration / 1000 > deadline:
                if previous is None:
                    raise _not_stable(selector, "element has no layout box")
                raise _not_stable(selector, f"did not hold still for {duration}ms within {timeout}ms")
            await asyncio.sleep(duration / 1000)
            current = await handle.bounding_box()
            if current is not None and current == previous:
                return
            previous = current
    except PlaywrightError as e:
        raise _not_stable(selector, str(e)) from e


async def wait_enabled(handle: ElementHandle, timeout: float = DEFAULT_WAIT_TIMEOUT) -> None:
    """Wait for an element to become enabled.

    Raises:
        ActionError: If the element does not become enabled in time.
    """
    ensure_target(handle, "element")
    try:
        await handle.wait_for_element_state("enabled", timeout=timeout)
    except PlaywrightError as e:
        logError(ErrorIds.CLICK_FAILED, "Element did not become enabled", extra={"timeout": timeout})
        raise ActionError("wait enabled", "element", str(e)) from e


async def wait_editable(handle: ElementHandle, timeout: float = DEFAULT_WAIT_TIMEOUT) -> None:
    """Wait for an element to become editable.

    Raises:
        ActionError: If the element does not become editable in time.
    """
    ensure_target(handle, "element")
    try:
        await handle.wait_for_element_state("editable", timeout=timeout)
    except PlaywrightError as e:
        logError(ErrorIds.TYPE_FAILED, "Element did not become editable", extra={"timeout": timeout})
        raise ActionError("wait editable", "element", str(e)) from e


async def wait_load(page: Page, timeout: float = DEFAULT_WAIT_TIMEOUT) -> None:
    """Wait for the page to reach the "load" state.

    Raises:
        NilTargetError: If page is None.
        PageNotLoadedError: If the load state is not reached in time.
    """
    ensure_target(page, "page")
    try:
        await page.wait_for_load_state("load", timeout=timeout)
    except PlaywrightError as e:
        logError(ErrorIds.PAGE_NOT_LOADED, "Page did not reach load state", extra={"timeout": timeout})
        raise PageNotLoadedError(f"page not loaded: {e}") from e
