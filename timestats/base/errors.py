"""Unified timestats error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``timestats.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.timestats_error import TimeStatsError
from .errors_parts.empty_histogram_error import EmptyHistogramError
from .errors_parts.duplicate_layer_error import DuplicateLayerError
from .errors_parts.layer_owned_error import LayerOwnedError
from .errors_parts.invalid_counter_error import InvalidCounterError

__all__ = [
    "ErrorCode",
    "TimeStatsError",
    "EmptyHistogramError",
    "DuplicateLayerError",
    "LayerOwnedError",
    "InvalidCounterError",
]
