"""Browser utility tools."""

from browser_utils.tools.actions import (
    attribute,
    click,
    click_and_load,
    element_text,
    navigate,
    scroll,
    scroll_to_bottom,
    type_,
)
from browser_utils.tools.locate import (
    element,
    element_stable,
    element_visible,
    elements,
    page_element,
    page_element_visible,
    page_elements,
)
from browser_utils.tools.screenshot import capture_screenshot, screenshot_path
from browser_utils.tools.wait import (
    wait_editable,
    wait_enabled,
    wait_load,
    wait_stable,
    wait_visible,
)

__all__ = [
    "attribute",
    "capture_screenshot",
    "click",
    "click_and_load",
    "element",
    "element_stable",
    "element_text",
    "element_visible",
    "elements",
    "navigate",
    "page_element",
    "page_element_visible",
    "page_elements",
    "screenshot_path",
    "scroll",
    "scroll_to_bottom",
    "type_",
    "wait_editable",
    "wait_enabled",
    "wait_load",
    "wait_stable",
    "wait_visible",
]
