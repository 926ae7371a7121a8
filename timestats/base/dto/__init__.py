"""Wire record package for the structured timestats dump."""

from .records import DeltaRecord, GlobalRecord, HistogramBucketRecord, LayerRecord

__all__ = [
    "HistogramBucketRecord",
    "DeltaRecord",
    "LayerRecord",
    "GlobalRecord",
]
