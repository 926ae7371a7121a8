"""Error raised when a layer already tracked by one GlobalStats is adopted by another."""
from __future__ import annotations

from .error_code import ErrorCode
from .timestats_error import TimeStatsError


class LayerOwnedError(TimeStatsError):
    """The LayerStats instance already belongs to a different session."""

    def __init__(self, layer_name: str) -> None:
        super().__init__(
            code=ErrorCode.LAYER_OWNED,
            message="layer is owned by another session",
            layer_name=layer_name,
        )


__all__ = ["LayerOwnedError"]
