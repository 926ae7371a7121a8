"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `timestats.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .timestats_error import TimeStatsError
from .empty_histogram_error import EmptyHistogramError
from .duplicate_layer_error import DuplicateLayerError
from .layer_owned_error import LayerOwnedError
from .invalid_counter_error import InvalidCounterError

__all__ = [
    "ErrorCode",
    "TimeStatsError",
    "EmptyHistogramError",
    "DuplicateLayerError",
    "LayerOwnedError",
    "InvalidCounterError",
]
