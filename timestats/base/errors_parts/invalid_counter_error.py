"""Error raised when a frame counter holds a value no dump can represent."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .timestats_error import TimeStatsError


class InvalidCounterError(TimeStatsError):
    """A frame counter is negative (or otherwise not a valid count)."""

    def __init__(self, message: str, *, layer_name: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.INVALID_COUNTER,
            message=message,
            layer_name=layer_name,
        )


__all__ = ["InvalidCounterError"]
