"""One-class-per-file parts for the timestats aggregates."""

from .histogram import Histogram
from .layer_stats import LayerStats
from .global_stats import GlobalStats

__all__ = [
    "Histogram",
    "LayerStats",
    "GlobalStats",
]
