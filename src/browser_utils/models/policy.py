"""Policy models for retried actions and bounded operations.

Both models are immutable and carry concrete defaults. Overrides go through
merged(), which validates the result like a freshly constructed model.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TIMEOUT = 10.0
DEFAULT_STABLE_DURATION = 0.2
DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_DELAY = 0.5
DEFAULT_SCREENSHOT_PATH = Path("screenshots")


class Policy(BaseModel):
    """Retry and wait policy for safe_click and safe_element.

    Attributes:
        timeout: Deadline for a single attempt in seconds (must be positive).
        stable_duration: Window in seconds the element must hold still.
        retry_count: Retries after the first attempt (non-negative).
        retry_delay: Pause between attempts in seconds.
        must_visible: Wait for the element to become visible.
        must_stable: Wait for the element to stop moving.
        must_wait_load: Wait for the page load state before locating.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    stable_duration: float = Field(default=DEFAULT_STABLE_DURATION, ge=0)
    retry_count: int = Field(default=DEFAULT_RETRY_COUNT, ge=0)
    retry_delay: float = Field(default=DEFAULT_RETRY_DELAY, ge=0)
    must_visible: bool = True
    must_stable: bool = True
    must_wait_load: bool = True

    @property
    def attempts(self) -> int:
        """Total number of attempts (retry_count + 1)."""
        return self.retry_count + 1

    def merged(self, **overrides: Any) -> "Policy":
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate({**self.model_dump(), **overrides})


class OperationOptions(BaseModel):
    """Options for run_operation.

    Attributes:
        timeout: Deadline for the operation in seconds (must be positive).
        path: Directory that receives failure screenshots.
        name: Optional prefix for the screenshot file name.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    path: Path = DEFAULT_SCREENSHOT_PATH
    name: str | None = None

    def merged(self, **overrides: Any) -> "OperationOptions":
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate({**self.model_dump(), **overrides})
