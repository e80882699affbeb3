"""Tests for bounded run outcome models."""

from browser_utils.models.outcome import Completed, Failed, TimedOut


class TestCompleted:
    def test_creation(self) -> None:
        outcome = Completed(value={"ok": True})
        assert outcome.value == {"ok": True}
        assert outcome.success is True
        assert outcome.error is None

    def test_value_defaults_to_none(self) -> None:
        assert Completed().value is None


class TestFailed:
    def test_creation(self) -> None:
        error = ValueError("boom")
        outcome = Failed(error=error)
        assert outcome.error is error
        assert outcome.success is False


class TestTimedOut:
    def test_creation(self) -> None:
        outcome = TimedOut(timeout=2.5)
        assert outcome.timeout == 2.5
        assert outcome.success is False
        assert outcome.error is None
