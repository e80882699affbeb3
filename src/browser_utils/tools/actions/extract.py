"""Read helpers for element text and attributes."""

from playwright.async_api import ElementHandle, Error as PlaywrightError

from browser_utils.core.errors import ActionError
from browser_utils.core.logging import ErrorIds, logError
from browser_utils.tools.guard import ensure_target
from browser_utils.tools.locate import element


async def element_text(parent: ElementHandle, selector: str) -> str:
    """Return the rendered text of the first descendant matching the selector.

    Raises:
        NilTargetError: If parent is None.
        ElementNotFoundError: If nothing matches.
        ActionError: If the text cannot be read.
    """
    found = await element(parent, selector)
    try:
        return await found.inner_text()
    except PlaywrightError as e:
        logError(ErrorIds.ATTRIBUTE_READ_FAILED, f"Reading text of {selector} failed: {e}")
        raise ActionError("get text", selector, str(e)) from e


async def attribute(handle: ElementHandle, name: str) -> str | None:
    """Return an attribute value, or None when the element lacks it.

    Raises:
        NilTargetError: If handle is None.
        ActionError: If the attribute cannot be read.
    """
    ensure_target(handle, "element")
    try:
        return await handle.get_attribute(name)
    except PlaywrightError as e:
        logError(ErrorIds.ATTRIBUTE_READ_FAILED, f"Reading attribute {name} failed: {e}")
        raise ActionError("get attribute", name, str(e)) from e
