"""Error raised when an average is requested from a histogram with no observations."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .timestats_error import TimeStatsError


class EmptyHistogramError(TimeStatsError):
    """A histogram holds no observations, so its average is undefined."""

    def __init__(
        self,
        message: str = "histogram has no observations",
        *,
        layer_name: Optional[str] = None,
        delta_name: Optional[str] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_HISTOGRAM,
            message=message,
            layer_name=layer_name,
            delta_name=delta_name,
        )


__all__ = ["EmptyHistogramError"]
