"""Retrying element lookup and click for browser automation.

safe_element and safe_click run the same attempt up to policy.attempts
times, pausing policy.retry_delay seconds between attempts:

1. wait for the page load state (if must_wait_load)
2. locate the element
3. wait for visibility (if must_visible)
4. wait for stability over stable_duration (if must_stable)
5. click (safe_click only)

All steps of one attempt share a deadline of policy.timeout seconds. The
first failing step ends the attempt. When every attempt fails, only the
last attempt's error is reported.
"""

import asyncio
from typing import Awaitable, Callable

from playwright.async_api import ElementHandle, Page

from browser_utils.core.errors import BrowserUtilsError, RetryExhaustedError
from browser_utils.core.logging import ErrorIds, logError, logEvent, logForDebugging
from browser_utils.models.policy import Policy
from browser_utils.tools.actions.click import click
from browser_utils.tools.guard import ensure_target
from browser_utils.tools.locate import page_element
from browser_utils.tools.wait import wait_load, wait_stable, wait_visible

Action = Callable[[ElementHandle, float], Awaitable[None]]


class _Deadline:
    """Remaining time of one attempt, in Playwright milliseconds."""

    def __init__(self, seconds: float) -> None:
        self._loop = asyncio.get_running_loop()
        self._expires = self._loop.time() + seconds

    def remaining_ms(self) -> float:
        # Playwright treats 0 as "no timeout", so never hand it out
        return max((self._expires - self._loop.time()) * 1000, 1.0)


async def _attempt(
    page: Page,
    selector: str,
    policy: Policy,
    action: Action | None,
) -> ElementHandle:
    deadline = _Deadline(policy.timeout)

    if policy.must_wait_load:
        await wait_load(page, timeout=deadline.remaining_ms())

    handle = await page_element(page, selector, timeout=deadline.remaining_ms())

    if policy.must_visible:
        await wait_visible(handle, selector, timeout=deadline.remaining_ms())

    if policy.must_stable:
        await wait_stable(
            handle,
            selector,
            duration=policy.stable_duration * 1000,
            timeout=deadline.remaining_ms(),
        )

    if action is not None:
        await action(handle, deadline.remaining_ms())

    return handle


async def _retry(
    page: Page,
    selector: str,
    policy: Policy | None,
    action_name: str,
    action: Action | None,
) -> ElementHandle:
    ensure_target(page, "page")
    if policy is None:
        policy = Policy()

    last_error: BrowserUtilsError | None = None

    for attempt in range(policy.attempts):
        if attempt > 0:
            await asyncio.sleep(policy.retry_delay)

        try:
            handle = await _attempt(page, selector, policy, action)
        except BrowserUtilsError as e:
            last_error = e
            logForDebugging(
                f"{action_name} attempt {attempt + 1}/{policy.attempts} failed: {e}",
                extra={"selector": selector},
            )
            continue

        if attempt > 0:
            logEvent("retry_succeeded", {"action": action_name, "selector": selector, "attempt": attempt + 1})
        return handle

    logError(
        ErrorIds.RETRY_EXHAUSTED,
        f"All {policy.attempts} {action_name} attempts failed",
        extra={"selector": selector, "last_error": last_error},
    )
    raise RetryExhaustedError(action_name, selector, policy.attempts, last_error) from last_error


async def safe_element(page: Page, selector: str, policy: Policy | None = None) -> ElementHandle:
    """Locate an element, retrying until it satisfies the policy.

    Args:
        page: The Playwright Page object.
        selector: CSS-like selector for the element.
        policy: Retry and wait policy. Defaults to Policy().

    Returns:
        The element handle from the first successful attempt.

    Raises:
        NilTargetError: If page is None. No attempt is made.
        RetryExhaustedError: If every attempt failed; wraps the last failure.
    """
    return await _retry(page, selector, policy, "get element", None)


async def safe_click(page: Page, selector: str, policy: Policy | None = None) -> None:
    """Click an element once it satisfies the policy, retrying on failure.

    Args:
        page: The Playwright Page object.
        selector: CSS-like selector for the element.
        policy: Retry and wait policy. Defaults to Policy().

    Raises:
        NilTargetError: If page is None. No attempt is made.
        RetryExhaustedError: If every attempt failed; wraps the last failure.
    """
    await _retry(page, selector, policy, "click", _click)


async def _click(handle: ElementHandle, timeout: float) -> None:
    await click(handle, timeout=timeout)
