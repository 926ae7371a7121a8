"""timestats package

Frame-timing distributions for a graphics compositor: per-layer and
system-wide latency histograms over a fixed set of millisecond buckets, with
a diagnostic text dump and a structured (wire record) dump.

Public API (re-exported):
    - Version: ``__version__``
    - Aggregates: :class:`Histogram`, :class:`LayerStats`, :class:`GlobalStats`
    - Wire records: :class:`GlobalRecord`, :class:`LayerRecord`,
      :class:`DeltaRecord`, :class:`HistogramBucketRecord`
    - Exceptions: :class:`TimeStatsError`, :class:`EmptyHistogramError`,
      :class:`DuplicateLayerError`, :class:`LayerOwnedError`,
      :class:`InvalidCounterError`, :class:`ErrorCode`
    - Helpers: :func:`derive_package_name`

Typical use::

    stats = GlobalStats(stats_start=now_ms)
    stats.layer("com.example.app/MainActivity#0").insert("present2present", 16)
    print(stats.to_string())
    payload = stats.to_proto().model_dump_json()
"""

from .base import (
    HISTOGRAM_BUCKETS,
    DeltaRecord,
    DuplicateLayerError,
    EmptyHistogramError,
    ErrorCode,
    GlobalRecord,
    GlobalStats,
    Histogram,
    HistogramBucketRecord,
    InvalidCounterError,
    LayerRecord,
    LayerStats,
    LayerOwnedError,
    TimeStatsError,
    derive_package_name,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "HISTOGRAM_BUCKETS",
    "Histogram",
    "LayerStats",
    "GlobalStats",
    "HistogramBucketRecord",
    "DeltaRecord",
    "LayerRecord",
    "GlobalRecord",
    "ErrorCode",
    "TimeStatsError",
    "EmptyHistogramError",
    "DuplicateLayerError",
    "LayerOwnedError",
    "InvalidCounterError",
    "derive_package_name",
]
