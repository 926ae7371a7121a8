"""Base layer: histogram engine, aggregates, wire records, errors and logging."""

from .constants import HISTOGRAM_BUCKETS, HISTOGRAM_SIZE, MAX_BUCKET_MS
from .dto import DeltaRecord, GlobalRecord, HistogramBucketRecord, LayerRecord
from .errors import (
    DuplicateLayerError,
    EmptyHistogramError,
    ErrorCode,
    InvalidCounterError,
    LayerOwnedError,
    TimeStatsError,
)
from .package_name import derive_package_name
from .stats import GlobalStats, Histogram, LayerStats

__all__ = [
    "HISTOGRAM_BUCKETS",
    "HISTOGRAM_SIZE",
    "MAX_BUCKET_MS",
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
    "Histogram",
    "LayerStats",
    "GlobalStats",
]
