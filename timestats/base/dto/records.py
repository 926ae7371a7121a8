"""
Pydantic wire records for the structured timestats dump.

Purpose
-------
These records mirror the external time-stats wire schema field for field so
that ``LayerStats.to_proto()`` / ``GlobalStats.to_proto()`` can be handed to
any serializer. ``model_dump()`` gives plain dicts and ``model_dump_json()``
gives the JSON form.

Failure semantics: building a record with a negative counter or bucket
boundary raises ``pydantic.ValidationError``. Timestamps are signed and are
not range checked.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class HistogramBucketRecord(BaseModel):
    """One observed (boundary, count) pair of a histogram.

    Attributes:
        render_millis: Bucket boundary in milliseconds.
        frame_count: Number of observations assigned to the bucket.
    """

    render_millis: int = Field(..., ge=0)
    frame_count: int = Field(..., ge=0)


class DeltaRecord(BaseModel):
    """One interval kind of a layer with its sparse bucket list."""

    delta_name: str
    histograms: List[HistogramBucketRecord] = Field(default_factory=list)


class LayerRecord(BaseModel):
    """Structured form of one layer's aggregated timing state."""

    layer_name: str
    package_name: str = ""
    stats_start: int = 0
    stats_end: int = 0
    total_frames: int = Field(default=0, ge=0)
    deltas: List[DeltaRecord] = Field(default_factory=list)


class GlobalRecord(BaseModel):
    """Structured form of the system-wide timing state.

    ``stats`` holds one layer record per tracked layer, in tracking order.
    """

    stats_start: int = 0
    stats_end: int = 0
    total_frames: int = Field(default=0, ge=0)
    missed_frames: int = Field(default=0, ge=0)
    client_composition_frames: int = Field(default=0, ge=0)
    stats: List[LayerRecord] = Field(default_factory=list)


__all__ = [
    "HistogramBucketRecord",
    "DeltaRecord",
    "LayerRecord",
    "GlobalRecord",
]
