"""Precondition checks shared by the tool helpers."""

from typing import Any

from browser_utils.core.errors import NilTargetError
from browser_utils.core.logging import ErrorIds, logError


def ensure_target(target: Any, kind: str) -> None:
    """Raise NilTargetError (and log it) when a page or element handle is None."""
    if target is None:
        logError(ErrorIds.NIL_TARGET, f"{kind} is None")
        raise NilTargetError(kind)
