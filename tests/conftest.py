"""Shared test fixtures for browser_utils tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from browser_utils.models.policy import Policy


@pytest.fixture
def mock_handle() -> MagicMock:
    """Create a mock Playwright ElementHandle."""
    handle = MagicMock()
    handle.query_selector = AsyncMock()
    handle.query_selector_all = AsyncMock(return_value=[])
    handle.wait_for_element_state = AsyncMock()
    handle.bounding_box = AsyncMock(return_value={"x": 10.0, "y": 20.0, "width": 100.0, "height": 50.0})
    handle.click = AsyncMock()
    handle.fill = AsyncMock()
    handle.inner_text = AsyncMock(return_value="Submit")
    handle.get_attribute = AsyncMock(return_value=None)
    handle.owner_frame = AsyncMock()
    return handle


@pytest.fixture
def mock_page(mock_handle: MagicMock) -> MagicMock:
    """Create a mock Playwright Page."""
    page = MagicMock()
    page.url = "https://example.com"
    page.goto = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.wait_for_selector = AsyncMock(return_value=mock_handle)
    page.query_selector = AsyncMock(return_value=mock_handle)
    page.query_selector_all = AsyncMock(return_value=[mock_handle])
    page.evaluate = AsyncMock()
    page.mouse = MagicMock()
    page.mouse.wheel = AsyncMock()
    page.screenshot = AsyncMock(return_value=b"\x89PNG fake")
    return page


@pytest.fixture
def fast_policy() -> Policy:
    """Policy with short waits for tests."""
    return Policy(timeout=1.0, stable_duration=0.01, retry_count=3, retry_delay=0.0)
