"""Element lookup helpers.

Lookups under an element are immediate; page_element waits for the
selector to attach to the DOM, up to its timeout (ms).
"""

from playwright.async_api import ElementHandle, Error as PlaywrightError, Page

from browser_utils.core.errors import ElementNotFoundError
from browser_utils.core.logging import ErrorIds, logError
from browser_utils.tools.guard import ensure_target
from browser_utils.tools.wait import (
    DEFAULT_STABLE_MS,
    DEFAULT_WAIT_TIMEOUT,
    wait_stable,
    wait_visible,
)


def _not_found(selector: str, reason: str | None = None) -> ElementNotFoundError:
    error = ElementNotFoundError(selector, reason)
    logError(ErrorIds.ELEMENT_NOT_FOUND, str(error))
    return error


async def element(parent: ElementHandle, selector: str) -> ElementHandle:
    """Find the first descendant of `parent` matching the selector.

    Raises:
        NilTargetError: If parent is None.
        ElementNotFoundError: If nothing matches or the lookup fails.
    """
    ensure_target(parent, "element")
    try:
        found = await parent.query_selector(selector)
    except PlaywrightError as e:
        raise _not_found(selector, f"failed to check element existence: {e}") from e
    if found is None:
        raise _not_found(selector)
    return found


async def element_visible(
    parent: ElementHandle,
    selector: str,
    timeout: float = DEFAULT_WAIT_TIMEOUT,
) -> ElementHandle:
    """Find a descendant and wait for it to become visible."""
    found = await element(parent, selector)
    await wait_visible(found, selector, timeout=timeout)
    return found


async def element_stable(
    parent: ElementHandle,
    selector: str,
    duration: float = DEFAULT_STABLE_MS,
    timeout: float = DEFAULT_WAIT_TIMEOUT,
) -> ElementHandle:
    """Find a descendant and wait for it to hold still for `duration` ms."""
    found = await element(parent, selector)
    await wait_stable(found, selector, duration=duration, timeout=timeout)
    return found


async def elements(parent: ElementHandle, selector: str) -> list[ElementHandle]:
    """Find all descendants of `parent` matching the selector.

    Raises:
        NilTargetError: If parent is None.
        ElementNotFoundError: If the lookup fails or matches nothing.
    """
    ensure_target(parent, "element")
    try:
        found = await parent.query_selector_all(selector)
    except PlaywrightError as e:
        raise _not_found(selector, f"failed to get elements: {e}") from e
    if not found:
        raise _not_found(selector, "the number of acquired elements was 0")
    return found


async def page_element(
    page: Page,
    selector: str,
    timeout: float = DEFAULT_WAIT_TIMEOUT,
) -> ElementHandle:
    """Wait for an element matching the selector to attach to the page.

    Args:
        page: The Playwright Page object.
        selector: CSS-like selector.
        timeout: Maximum time to wait for the element (ms).

    Returns:
        The element handle.

    Raises:
        NilTargetError: If page is None.
        ElementNotFoundError: If the element does not appear in time.
    """
    ensure_target(page, "page")
    try:
        found = await page.wait_for_selector(selector, state="attached", timeout=timeout)
    except PlaywrightError as e:
        raise _not_found(selector, str(e)) from e
    if found is None:
        raise _not_found(selector)
    return found


async def page_element_visible(
    page: Page,
    selector: str,
    timeout: float = DEFAULT_WAIT_TIMEOUT,
) -> ElementHandle:
    """Find an element already on the page and wait for it to become visible."""
    ensure_target(page, "page")
    try:
        found = await page.query_selector(selector)
    except PlaywrightError as e:
        raise _not_found(selector, str(e)) from e
    if found is None:
        raise _not_found(selector)
    await wait_visible(found, selector, timeout=timeout)
    return found


async def page_elements(page: Page, selector: str) -> list[ElementHandle]:
    """Find all elements on the page matching the selector.

    Raises:
        NilTargetError: If page is None.
        ElementNotFoundError: If the lookup fails or matches nothing.
    """
    ensure_target(page, "page")
    try:
        found = await page.query_selector_all(selector)
    except PlaywrightError as e:
        raise _not_found(selector, f"failed to get elements: {e}") from e
    if not found:
        raise _not_found(selector, "the number of acquired elements was 0")
    return found
