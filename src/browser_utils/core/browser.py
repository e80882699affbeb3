"""Browser context management for persistent sessions.

This module provides a function to launch a Playwright browser context
with persistent storage for session data (cookies, localStorage, etc.).
"""

from pathlib import Path

from playwright.async_api import BrowserContext, Page, Playwright


async def launch_persistent_context(
    playwright: Playwright,
    user_data_dir: str | Path,
    headless: bool = False,
) -> BrowserContext:
    """Launch Chromium with persistent storage for session data.

    Args:
        playwright: The Playwright instance (from async_playwright()).
        user_data_dir: Path to directory where session data will be stored.
                      Directory will be created if it doesn't exist.
        headless: If False (default), launches in visible (headful) mode.

    Returns:
        A BrowserContext instance. The browser is closed when the context is closed.

    Example:
        from playwright.async_api import async_playwright

        async with async_playwright() as p:
            context = await launch_persistent_context(p, "./session", headless=True)
            page = await first_page(context)
            await page.goto("https://example.com")
            await context.close()

    Note:
        Only ONE browser instance can use a given user_data_dir at a time.
    """
    Path(user_data_dir).mkdir(parents=True, exist_ok=True)
    return await playwright.chromium.launch_persistent_context(
        user_data_dir=str(user_data_dir),
        headless=headless,
    )


async def first_page(context: BrowserContext) -> Page:
    """Return the context's first open page, opening one if there is none."""
    if context.pages:
        return context.pages[0]
    return await context.new_page()
