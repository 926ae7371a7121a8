"""
Normalized timestats error codes (taxonomy).

Values are lowercase snake_case and are considered a stable public contract
for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    EMPTY_HISTOGRAM = "empty_histogram"
    DUPLICATE_LAYER = "duplicate_layer"
    LAYER_OWNED = "layer_owned"
    INVALID_COUNTER = "invalid_counter"


__all__ = ["ErrorCode"]
