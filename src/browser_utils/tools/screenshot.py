"""Screenshot capture for failure diagnostics.

This module provides screenshot_path for naming failure screenshots and
capture_screenshot for writing a PNG of the current page.
"""

from datetime import datetime
from pathlib import Path

from playwright.async_api import Error as PlaywrightError, Page

from browser_utils.core.errors import (
    ScreenshotCaptureError,
    ScreenshotDirectoryError,
    ScreenshotSaveError,
)
from browser_utils.tools.guard import ensure_target

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def screenshot_path(
    directory: Path | str,
    name: str | None = None,
    timestamp: datetime | None = None,
) -> Path:
    """Build the file path for a screenshot.

    Args:
        directory: Directory that receives the screenshot.
        name: Optional file name prefix.
        timestamp: Time to stamp into the name. Defaults to now.

    Returns:
        `<directory>/<name>_<timestamp>.png`, or `<directory>/<timestamp>.png`
        when no name is given.
    """
    stamp = (timestamp or datetime.now()).strftime(TIMESTAMP_FORMAT)
    filename = f"{name}_{stamp}" if name else stamp
    return Path(directory) / f"{filename}.png"


async def capture_screenshot(
    page: Page,
    output_path: Path | str,
    full_page: bool = True,
    operation_error: BaseException | None = None,
) -> Path:
    """Capture a PNG screenshot of the page and write it to output_path.

    Args:
        page: The Playwright Page object.
        output_path: File to write. Parent directories are created.
        full_page: If True (default), captures the full scrollable page.
        operation_error: The failure being documented, attached to any
            screenshot error raised here.

    Returns:
        Path to the saved screenshot.

    Raises:
        NilTargetError: If page is None.
        ScreenshotDirectoryError: If the parent directory cannot be created.
        ScreenshotCaptureError: If the browser fails to render the screenshot.
        ScreenshotSaveError: If the file cannot be written.
    """
    ensure_target(page, "page")
    output_path = Path(output_path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScreenshotDirectoryError(output_path.parent, operation_error) from e

    try:
        data = await page.screenshot(full_page=full_page, type="png")
    except PlaywrightError as e:
        raise ScreenshotCaptureError(output_path, operation_error) from e

    try:
        output_path.write_bytes(data)
    except OSError as e:
        raise ScreenshotSaveError(output_path, operation_error) from e

    return output_path
