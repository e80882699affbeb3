"""Navigate action helper for browser automation."""

from typing import Literal

from playwright.async_api import Error as PlaywrightError, Page

from browser_utils.core.errors import NavigationError
from browser_utils.core.logging import ErrorIds, logError
from browser_utils.tools.guard import ensure_target

WaitUntil = Literal["commit", "domcontentloaded", "load", "networkidle"]


async def navigate(
    page: Page,
    url: str,
    wait_until: WaitUntil = "load",
    timeout: float = 30000,
) -> Page:
    """Navigate the page to a URL.

    Args:
        page: The Playwright Page object.
        url: The URL to navigate to.
        wait_until: When to consider navigation succeeded. Default: "load".
        timeout: Maximum time to wait for navigation (ms). Default: 30000.

    Returns:
        The same page, for chaining.

    Raises:
        NilTargetError: If page is None.
        NavigationError: If navigation fails or the response status is >= 400.
    """
    ensure_target(page, "page")
    try:
        response = await page.goto(url, wait_until=wait_until, timeout=timeout)
    except PlaywrightError as e:
        logError(ErrorIds.NAVIGATION_FAILED, f"Navigation to {url} failed: {e}")
        raise NavigationError(url, str(e)) from e

    # No response for non-http protocols such as about: and data:
    if response is not None and response.status >= 400:
        logError(ErrorIds.NAVIGATION_FAILED, f"Navigation to {url} returned HTTP {response.status}")
        raise NavigationError(url, f"HTTP {response.status}")
    return page
