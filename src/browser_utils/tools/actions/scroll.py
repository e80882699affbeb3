"""Scroll action helpers for browser automation."""

from playwright.async_api import Error as PlaywrightError, Page

from browser_utils.core.errors import ActionError
from browser_utils.core.logging import ErrorIds, logError
from browser_utils.tools.guard import ensure_target


def _scroll_failed(action: str, e: PlaywrightError) -> ActionError:
    logError(ErrorIds.SCROLL_FAILED, f"{action} failed: {e}")
    return ActionError(action, "page", str(e))


async def scroll(page: Page, dx: int = 0, dy: int = 0) -> None:
    """Scroll the page by the specified delta in pixels.

    Positive dx scrolls right, positive dy scrolls down. A zero delta is a no-op.

    Raises:
        NilTargetError: If page is None.
        ActionError: If the scroll script fails.
    """
    ensure_target(page, "page")
    if dx == 0 and dy == 0:
        return
    try:
        await page.evaluate("([dx, dy]) => window.scrollBy(dx, dy)", [dx, dy])
    except PlaywrightError as e:
        raise _scroll_failed("scroll", e) from e


async def scroll_to_bottom(page: Page) -> None:
    """Scroll to the top, then wheel down by the document height.

    Raises:
        NilTargetError: If page is None.
        ActionError: If any step fails.
    """
    ensure_target(page, "page")
    try:
        await page.evaluate("() => window.scrollTo(0, 0)")
    except PlaywrightError as e:
        raise _scroll_failed("reset scroll position", e) from e
    try:
        height = await page.evaluate("() => document.body.scrollHeight")
        await page.mouse.wheel(0, float(height))
    except PlaywrightError as e:
        raise _scroll_failed("scroll to bottom", e) from e
