"""Browser action helpers for element and page interaction."""

from browser_utils.tools.actions.click import click, click_and_load
from browser_utils.tools.actions.extract import attribute, element_text
from browser_utils.tools.actions.navigate import navigate
from browser_utils.tools.actions.scroll import scroll, scroll_to_bottom
# Import from type.py but export as type_ to avoid shadowing built-in
from browser_utils.tools.actions.type import type_

__all__ = [
    "attribute",
    "click",
    "click_and_load",
    "element_text",
    "navigate",
    "scroll",
    "scroll_to_bottom",
    "type_",
]
