"""Fixed-boundary latency histogram.

Observations are millisecond deltas. Each one is assigned to the smallest
boundary in ``HISTOGRAM_BUCKETS`` that is ``>=`` the delta; deltas above the
last boundary are clamped to it and negative deltas are dropped.

Counts are stored sparsely: a boundary absent from ``buckets`` has count zero.
"""
from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Dict, List

from ..constants import HISTOGRAM_BUCKETS, MAX_BUCKET_MS
from ..dto import HistogramBucketRecord
from ..errors import EmptyHistogramError


@dataclass
class Histogram:
    """Bucketed frequency counter over the fixed boundary set.

    Attributes:
        buckets: Sparse mapping of bucket boundary (ms) to observation count.
    """

    buckets: Dict[int, int] = field(default_factory=dict)

    def insert(self, delta: int) -> None:
        """Record one observation of ``delta`` milliseconds."""
        if delta < 0:
            return
        if delta > MAX_BUCKET_MS:
            bucket = MAX_BUCKET_MS
        else:
            bucket = HISTOGRAM_BUCKETS[bisect_left(HISTOGRAM_BUCKETS, delta)]
        self.buckets[bucket] = self.buckets.get(bucket, 0) + 1

    def total_count(self) -> int:
        return sum(self.buckets.values())

    def average_time(self) -> float:
        """Return the count-weighted mean of the bucket boundaries, in ms.

        Raises:
            EmptyHistogramError: if no observation has been inserted.
        """
        count = 0
        total = 0
        for bucket, n in self.buckets.items():
            count += n
            total += bucket * n
        if count == 0:
            raise EmptyHistogramError()
        return total / count

    def clear(self) -> None:
        self.buckets.clear()

    def to_records(self) -> List[HistogramBucketRecord]:
        """Observed buckets only, ascending by boundary."""
        return [
            HistogramBucketRecord(render_millis=bucket, frame_count=self.buckets[bucket])
            for bucket in sorted(self.buckets)
            if self.buckets[bucket] > 0
        ]

    def to_string(self) -> str:
        """Render every boundary as ``<ms>ms=<count>``, space separated, newline terminated."""
        return " ".join(f"{bucket}ms={self.buckets.get(bucket, 0)}" for bucket in HISTOGRAM_BUCKETS) + "\n"


__all__ = ["Histogram"]
