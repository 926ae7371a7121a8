"""Error raised when a layer name is already tracked by a GlobalStats."""
from __future__ import annotations

from .error_code import ErrorCode
from .timestats_error import TimeStatsError


class DuplicateLayerError(TimeStatsError):
    """A second LayerStats with an already tracked layer name was added."""

    def __init__(self, layer_name: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_LAYER,
            message="layer is already tracked",
            layer_name=layer_name,
        )


__all__ = ["DuplicateLayerError"]
