"""Base shared constants for the timestats histogram engine.

The bucket boundaries are fixed: 1 ms granularity up to 34 ms, 2 ms up to
50 ms, 4 ms up to 150 ms, then 50 ms up to the 1000 ms ceiling.
"""
from __future__ import annotations

from typing import Tuple

# Right edges of the histogram bins, strictly ascending.
HISTOGRAM_BUCKETS: Tuple[int, ...] = (
    tuple(range(0, 35))
    + tuple(range(36, 51, 2))
    + tuple(range(54, 151, 4))
    + tuple(range(200, 1001, 50))
)

HISTOGRAM_SIZE = len(HISTOGRAM_BUCKETS)  # 85

# Deltas above this are clamped to it.
MAX_BUCKET_MS = HISTOGRAM_BUCKETS[-1]

__all__ = [
    "HISTOGRAM_BUCKETS",
    "HISTOGRAM_SIZE",
    "MAX_BUCKET_MS",
]
