"""Type action helper for browser automation.

This module provides the type_ function for filling input elements.
"""

from playwright.async_api import ElementHandle, Error as PlaywrightError

from browser_utils.core.errors import ActionError
from browser_utils.core.logging import ErrorIds, logError
from browser_utils.tools.guard import ensure_target
from browser_utils.tools.wait import DEFAULT_WAIT_TIMEOUT, wait_editable


async def type_(handle: ElementHandle, text: str, timeout: float = DEFAULT_WAIT_TIMEOUT) -> None:
    """Fill an input element with text, after waiting for it to be editable.

    Args:
        handle: The input element.
        text: The text to enter (replaces existing content).
        timeout: Maximum time for each of the editable wait and the fill (ms).

    Raises:
        NilTargetError: If handle is None.
        ActionError: If the element never becomes editable or the fill fails.
    """
    ensure_target(handle, "element")
    await wait_editable(handle, timeout=timeout)
    try:
        await handle.fill(text, timeout=timeout)
    except PlaywrightError as e:
        logError(ErrorIds.TYPE_FAILED, f"Text input failed: {e}")
        raise ActionError("input text", "element", str(e)) from e
