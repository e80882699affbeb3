"""Outcome models for bounded operations.

This module defines the Outcome type which represents the result of
running an operation against a deadline.

The union type design makes invalid states unrepresentable:
- Completed: always has a value, never has an error
- Failed: always has the operation's exception
- TimedOut: always has the configured bound, never has a value
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict


class Completed(BaseModel):
    """The operation finished before the deadline without raising.

    Attributes:
        value: Whatever the operation returned.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None

    @property
    def success(self) -> bool:
        """Always True for Completed."""
        return True

    @property
    def error(self) -> None:
        """Always None for Completed."""
        return None


class Failed(BaseModel):
    """The operation raised before the deadline.

    Attributes:
        error: The exception raised by the operation.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: BaseException

    @property
    def success(self) -> bool:
        """Always False for Failed."""
        return False


class TimedOut(BaseModel):
    """The deadline elapsed before the operation finished.

    Attributes:
        timeout: The configured bound in seconds.
    """

    model_config = ConfigDict(frozen=True)

    timeout: float

    @property
    def success(self) -> bool:
        """Always False for TimedOut."""
        return False

    @property
    def error(self) -> None:
        """TimedOut carries no operation error."""
        return None


# Union type for bounded run outcomes
Outcome = Union[Completed, Failed, TimedOut]
