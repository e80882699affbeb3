"""CLI entry point for browser-utils."""

import argparse
import asyncio
from pathlib import Path

from playwright.async_api import Error as PlaywrightError, Page, async_playwright
from rich.console import Console

from browser_utils.core.browser import first_page, launch_persistent_context
from browser_utils.core.config import Settings, load_settings
from browser_utils.core.errors import BrowserUtilsError, ScreenshotError
from browser_utils.core.logging import ErrorIds, enable_file_logging, logError, set_log_level
from browser_utils.core.retry import safe_click, safe_element
from browser_utils.core.runner import run_operation
from browser_utils.tools.actions import navigate

console = Console()

DEFAULT_SESSION_DIR = Path.home() / ".browser-utils" / "session"

COMMANDS = ("click", "locate", "text")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="browser-utils - run a retried click or lookup against a page"
    )
    parser.add_argument("command", choices=COMMANDS, help="What to do with the element")
    parser.add_argument("url", help="Page to open")
    parser.add_argument("selector", help="CSS selector of the element")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with 'policy' and 'operation' sections",
    )
    parser.add_argument(
        "--session-dir",
        type=Path,
        default=DEFAULT_SESSION_DIR,
        help=f"Directory for persistent session data (default: {DEFAULT_SESSION_DIR})",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run in headless mode (default: visible browser)",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=("debug", "info", "warning", "error"),
        help="Console log level (default: info)",
    )
    parser.add_argument("--log-file", default=None, help="Also write debug logs to this file")
    return parser


async def run_command(page: Page, command: str, selector: str, settings: Settings) -> str:
    """Run one CLI command against an open page and describe the result."""

    async def operation() -> str:
        if command == "click":
            await safe_click(page, selector, settings.policy)
            return f"Clicked {selector!r}"
        handle = await safe_element(page, selector, settings.policy)
        if command == "text":
            return await handle.inner_text()
        return f"Found {selector!r}"

    return await run_operation(page, operation, settings.operation)


async def _main(args: argparse.Namespace) -> int:
    settings = load_settings(args.config)

    async with async_playwright() as p:
        console.print("[yellow]Launching browser...[/yellow]")
        context = await launch_persistent_context(p, args.session_dir, headless=args.headless)
        try:
            page = await first_page(context)
            await navigate(page, args.url)
            result = await run_command(page, args.command, args.selector, settings)
        finally:
            await context.close()

    console.print(f"[green]{result}[/green]")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    set_log_level(args.log_level)
    if args.log_file:
        enable_file_logging(args.log_file)

    try:
        return asyncio.run(_main(args))
    except ScreenshotError as e:
        console.print(f"[red]{e}[/red]")
        if e.operation_error is not None:
            console.print(f"[red]Original failure: {e.operation_error}[/red]")
        return 1
    except BrowserUtilsError as e:
        console.print(f"[red]{e}[/red]")
        return 1
    except PlaywrightError as e:
        # Browser launch and teardown failures are not wrapped by the library
        logError(ErrorIds.UNEXPECTED_ERROR, f"Browser error: {e}")
        console.print(f"[red]Browser error: {e}[/red]")
        return 1
    except KeyboardInterrupt:
        logError(ErrorIds.KEYBOARD_INTERRUPT, "Interrupted by user")
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
