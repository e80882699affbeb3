"""Tests for safe_element and safe_click."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from browser_utils.core import retry
from browser_utils.core.errors import (
    ActionError,
    ElementNotFoundError,
    ElementNotStableError,
    ElementNotVisibleError,
    NilTargetError,
    PageNotLoadedError,
    RetryExhaustedError,
)
from browser_utils.core.retry import safe_click, safe_element
from browser_utils.models.policy import Policy


@pytest.fixture
def steps(mock_handle: MagicMock):
    """Replace every step helper used by the retry loop with an AsyncMock."""
    mocks = SimpleNamespace(
        wait_load=AsyncMock(),
        page_element=AsyncMock(return_value=mock_handle),
        wait_visible=AsyncMock(),
        wait_stable=AsyncMock(),
        click=AsyncMock(),
        sleep=AsyncMock(),
    )
    with patch.object(retry, "wait_load", mocks.wait_load), \
            patch.object(retry, "page_element", mocks.page_element), \
            patch.object(retry, "wait_visible", mocks.wait_visible), \
            patch.object(retry, "wait_stable", mocks.wait_stable), \
            patch.object(retry, "click", mocks.click), \
            patch.object(retry.asyncio, "sleep", mocks.sleep):
        yield mocks


class TestExhaustion:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("retry_count", [0, 1, 3])
    async def test_permanent_not_found_makes_n_plus_one_attempts(
        self, mock_page: MagicMock, steps: SimpleNamespace, retry_count: int
    ) -> None:
        steps.page_element.side_effect = ElementNotFoundError("#missing")
        policy = Policy(retry_count=retry_count, retry_delay=0.25)

        with pytest.raises(RetryExhaustedError) as exc_info:
            await safe_element(mock_page, "#missing", policy)

        assert steps.page_element.await_count == retry_count + 1
        assert steps.sleep.await_count == retry_count
        assert exc_info.value.attempts == retry_count + 1
        assert isinstance(exc_info.value.last_error, ElementNotFoundError)
        assert exc_info.value.__cause__ is exc_info.value.last_error

    @pytest.mark.asyncio
    async def test_delay_uses_policy_value(self, mock_page: MagicMock, steps: SimpleNamespace) -> None:
        steps.page_element.side_effect = ElementNotFoundError("#missing")

        with pytest.raises(RetryExhaustedError):
            await safe_element(mock_page, "#missing", Policy(retry_count=2, retry_delay=0.75))

        for call in steps.sleep.await_args_list:
            assert call.args == (0.75,)

    @pytest.mark.asyncio
    async def test_last_failure_wins(
        self, mock_page: MagicMock, mock_handle: MagicMock, steps: SimpleNamespace
    ) -> None:
        # attempt 1: not found, attempt 2: not visible, attempt 3: not stable
        steps.page_element.side_effect = [ElementNotFoundError("#x"), mock_handle, mock_handle]
        steps.wait_visible.side_effect = [ElementNotVisibleError("#x"), None]
        steps.wait_stable.side_effect = [ElementNotStableError("#x")]

        with pytest.raises(RetryExhaustedError) as exc_info:
            await safe_element(mock_page, "#x", Policy(retry_count=2, retry_delay=0))

        assert isinstance(exc_info.value.last_error, ElementNotStableError)
        assert "not stable" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_action_failure_is_retried(self, mock_page: MagicMock, steps: SimpleNamespace) -> None:
        steps.click.side_effect = ActionError("click", "element", "detached")

        with pytest.raises(RetryExhaustedError) as exc_info:
            await safe_click(mock_page, "#btn", Policy(retry_count=1, retry_delay=0))

        assert steps.click.await_count == 2
        assert isinstance(exc_info.value.last_error, ActionError)
        assert exc_info.value.action == "click"

    @pytest.mark.asyncio
    async def test_page_not_loaded_skips_lookup(self, mock_page: MagicMock, steps: SimpleNamespace) -> None:
        steps.wait_load.side_effect = PageNotLoadedError("page not loaded")

        with pytest.raises(RetryExhaustedError) as exc_info:
            await safe_element(mock_page, "#x", Policy(retry_count=1, retry_delay=0))

        steps.page_element.assert_not_awaited()
        assert isinstance(exc_info.value.last_error, PageNotLoadedError)


class TestSuccess:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("k", [1, 2, 4])
    async def test_succeeds_on_attempt_k(
        self, mock_page: MagicMock, mock_handle: MagicMock, steps: SimpleNamespace, k: int
    ) -> None:
        steps.page_element.side_effect = [ElementNotFoundError("#x")] * (k - 1) + [mock_handle]

        result = await safe_element(mock_page, "#x", Policy(retry_count=3, retry_delay=0.1))

        assert result is mock_handle
        assert steps.page_element.await_count == k
        assert steps.sleep.await_count == k - 1

    @pytest.mark.asyncio
    async def test_no_visibility_or_stability_wait_when_disabled(
        self, mock_page: MagicMock, mock_handle: MagicMock, steps: SimpleNamespace
    ) -> None:
        policy = Policy(must_visible=False, must_stable=False)

        await safe_click(mock_page, "#btn", policy)

        steps.wait_visible.assert_not_awaited()
        steps.wait_stable.assert_not_awaited()
        steps.click.assert_awaited_once()
        assert steps.click.await_args.args[0] is mock_handle

    @pytest.mark.asyncio
    async def test_checks_run_in_order(
        self, mock_page: MagicMock, mock_handle: MagicMock, steps: SimpleNamespace
    ) -> None:
        order: list[str] = []

        def record(name: str, value=None):
            def side_effect(*args, **kwargs):
                order.append(name)
                return value
            return side_effect

        steps.wait_load.side_effect = record("wait_load")
        steps.page_element.side_effect = record("page_element", mock_handle)
        steps.wait_visible.side_effect = record("wait_visible")
        steps.wait_stable.side_effect = record("wait_stable")
        steps.click.side_effect = record("click")

        await safe_click(mock_page, "#btn", Policy())

        assert order == ["wait_load", "page_element", "wait_visible", "wait_stable", "click"]

    @pytest.mark.asyncio
    async def test_failed_visibility_stops_attempt(self, mock_page: MagicMock, steps: SimpleNamespace) -> None:
        steps.wait_visible.side_effect = ElementNotVisibleError("#btn")

        with pytest.raises(RetryExhaustedError):
            await safe_click(mock_page, "#btn", Policy(retry_count=0))

        steps.wait_stable.assert_not_awaited()
        steps.click.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stable_duration_passed_in_ms(self, mock_page: MagicMock, steps: SimpleNamespace) -> None:
        await safe_element(mock_page, "#x", Policy(stable_duration=0.3))

        assert steps.wait_stable.await_args.kwargs["duration"] == pytest.approx(300)

    @pytest.mark.asyncio
    async def test_default_policy_when_none(self, mock_page: MagicMock, steps: SimpleNamespace) -> None:
        steps.page_element.side_effect = ElementNotFoundError("#x")

        with pytest.raises(RetryExhaustedError) as exc_info:
            await safe_element(mock_page, "#x")

        assert exc_info.value.attempts == Policy().attempts == 4
        steps.wait_load.assert_awaited()


class TestNilTarget:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("func", [safe_element, safe_click])
    async def test_none_page_makes_no_attempt(self, steps: SimpleNamespace, func) -> None:
        with pytest.raises(NilTargetError):
            await func(None, "#x", Policy())

        steps.wait_load.assert_not_awaited()
        steps.page_element.assert_not_awaited()
        steps.sleep.assert_not_awaited()


class TestWithMockPage:
    """Run the retry loop through the real helpers against a mock page."""

    @pytest.mark.asyncio
    async def test_safe_click_clicks_handle(
        self, mock_page: MagicMock, mock_handle: MagicMock, fast_policy: Policy
    ) -> None:
        await safe_click(mock_page, "#submit", fast_policy)

        mock_page.wait_for_load_state.assert_awaited_once()
        mock_page.wait_for_selector.assert_awaited_once()
        assert mock_page.wait_for_selector.await_args.args == ("#submit",)
        mock_handle.click.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_safe_element_returns_handle(
        self, mock_page: MagicMock, mock_handle: MagicMock, fast_policy: Policy
    ) -> None:
        result = await safe_element(mock_page, "#submit", fast_policy)

        assert result is mock_handle
        mock_handle.click.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_attempt_steps_share_one_deadline(
        self, mock_page: MagicMock, mock_handle: MagicMock
    ) -> None:
        policy = Policy(timeout=2.0, stable_duration=0.01, retry_count=1, retry_delay=0.0)
        load_timeouts: list[float] = []
        selector_timeouts: list[float] = []

        async def slow_first_load(state: str, timeout: float) -> None:
            load_timeouts.append(timeout)
            if len(load_timeouts) == 1:
                await asyncio.sleep(0.1)

        async def missing_then_found(selector: str, state: str, timeout: float) -> MagicMock:
            selector_timeouts.append(timeout)
            if len(selector_timeouts) == 1:
                raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded")
            return mock_handle

        mock_page.wait_for_load_state.side_effect = slow_first_load
        mock_page.wait_for_selector.side_effect = missing_then_found

        await safe_click(mock_page, "#submit", policy)

        state_timeouts = [c.kwargs["timeout"] for c in mock_handle.wait_for_element_state.await_args_list]
        click_timeout = mock_handle.click.await_args.kwargs["timeout"]
        every_timeout = load_timeouts + selector_timeouts + state_timeouts + [click_timeout]
        assert all(0 < t <= 2000 for t in every_timeout)

        # Time spent loading is taken out of the lookup's budget
        assert selector_timeouts[0] <= load_timeouts[0] - 50

        # The second attempt starts with a fresh budget
        assert load_timeouts[1] > selector_timeouts[0]

        # Later steps never get more time than earlier ones in the same attempt
        assert selector_timeouts[1] <= load_timeouts[1]
        assert all(t <= selector_timeouts[1] for t in state_timeouts)
        assert click_timeout <= state_timeouts[-1]
