"""Histogram engine and the layer/global aggregates built on it.

This module re-exports the one-class-per-file implementations from
``stats_parts`` as the stable import surface.
"""

from .stats_parts import GlobalStats, Histogram, LayerStats

__all__ = [
    "Histogram",
    "LayerStats",
    "GlobalStats",
]
