"""System-wide aggregated timing state for one measurement session.

``GlobalStats`` is an explicitly owned aggregate: the collector creates one at
session start, mutates it (directly for counters and timestamps, through
:meth:`GlobalStats.layer` for per-layer histograms) and calls
:meth:`GlobalStats.clear` to start a new session. No locking is done here;
callers hold their own lock across inserts and full renders.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from ...config.defaults import GLOBAL_DUMP_HEADER, LAYER_SECTION_HEADER
from ..dto import GlobalRecord
from ..errors import DuplicateLayerError, InvalidCounterError, LayerOwnedError
from ..log_support import LogContext
from ..logging import get_logger, log_event
from .layer_stats import LayerStats

logger = get_logger(__name__)


class GlobalStats:
    """Time window, frame counters and the ordered layers of one session."""

    __slots__ = (
        "stats_start",
        "stats_end",
        "total_frames",
        "missed_frames",
        "client_composition_frames",
        "_layers",
        "_by_name",
    )

    def __init__(
        self,
        stats_start: int = 0,
        stats_end: int = 0,
        total_frames: int = 0,
        missed_frames: int = 0,
        client_composition_frames: int = 0,
    ):
        self.stats_start = stats_start
        self.stats_end = stats_end
        self.total_frames = total_frames
        self.missed_frames = missed_frames
        self.client_composition_frames = client_composition_frames
        self._layers: List[LayerStats] = []
        self._by_name: Dict[str, LayerStats] = {}

    def __repr__(self) -> str:
        return (
            f"GlobalStats(total_frames={self.total_frames}, missed_frames={self.missed_frames}, "
            f"client_composition_frames={self.client_composition_frames}, layers={len(self._layers)})"
        )

    @property
    def layers(self) -> Tuple[LayerStats, ...]:
        """Tracked layers in the order they were first observed."""
        return tuple(self._layers)

    # -------------------------- Layer Tracking -------------------------- #
    def layer(self, layer_name: str) -> LayerStats:
        """Return the stats for ``layer_name``, creating and tracking them on first use.

        A newly created layer starts its window at the session's ``stats_start``.
        """
        existing = self._by_name.get(layer_name)
        if existing is not None:
            return existing
        created = LayerStats(layer_name, stats_start=self.stats_start)
        self._track(created)
        log_event(logger, "timestats.layer.created", LogContext(layer_name=layer_name), level=logging.DEBUG)
        return created

    def add_layer(self, layer: LayerStats) -> None:
        """Adopt an externally built layer.

        Raises:
            DuplicateLayerError: if a layer with the same name is already tracked.
            LayerOwnedError: if the layer is tracked by another session.
        """
        if layer.layer_name in self._by_name:
            raise DuplicateLayerError(layer.layer_name)
        if layer.owner is not None:
            raise LayerOwnedError(layer.layer_name)
        self._track(layer)
        log_event(logger, "timestats.layer.adopted", LogContext(layer_name=layer.layer_name), level=logging.DEBUG)

    def remove_layer(self, layer_name: str) -> Optional[LayerStats]:
        """Stop tracking ``layer_name``; returns the dropped stats or ``None``."""
        dropped = self._by_name.pop(layer_name, None)
        if dropped is not None:
            self._layers.remove(dropped)
            dropped._owner = None
        return dropped

    def _track(self, layer: LayerStats) -> None:
        self._layers.append(layer)
        self._by_name[layer.layer_name] = layer
        layer._owner = self

    def clear(self) -> None:
        """Reset the session: zero every counter and timestamp and drop all layers."""
        dropped = len(self._layers)
        self.stats_start = 0
        self.stats_end = 0
        self.total_frames = 0
        self.missed_frames = 0
        self.client_composition_frames = 0
        for layer in self._layers:
            layer._owner = None
        self._layers.clear()
        self._by_name.clear()
        log_event(logger, "timestats.clear", level=logging.DEBUG, dropped_layers=dropped)

    # -------------------------- Render Methods -------------------------- #
    def _select_layers(self, max_layers: Optional[int]) -> List[LayerStats]:
        """Layers to render: all of them, or the ``max_layers`` busiest in tracking order."""
        if max_layers is None or max_layers >= len(self._layers):
            return list(self._layers)
        if max_layers < 0:
            raise ValueError("max_layers must be non-negative")
        ranked = sorted(range(len(self._layers)), key=lambda i: (-self._layers[i].total_frames, i))
        keep = sorted(ranked[:max_layers])
        return [self._layers[i] for i in keep]

    def _check_counters(self) -> None:
        for label, value in (
            ("totalFrames", self.total_frames),
            ("missedFrames", self.missed_frames),
            ("clientCompositionFrames", self.client_composition_frames),
        ):
            if value < 0:
                raise InvalidCounterError(f"{label} is negative: {value}")

    def to_string(self, max_layers: Optional[int] = None) -> str:
        self._check_counters()
        parts: List[str] = [
            f"{GLOBAL_DUMP_HEADER}\n",
            f"statsStart = {self.stats_start}\n",
            f"statsEnd = {self.stats_end}\n",
            f"totalFrames= {self.total_frames}\n",
            f"missedFrames= {self.missed_frames}\n",
            f"clientCompositionFrames= {self.client_composition_frames}\n",
            f"{LAYER_SECTION_HEADER}\n",
        ]
        parts.extend(layer.to_string() for layer in self._select_layers(max_layers))
        return "".join(parts)

    def to_proto(self, max_layers: Optional[int] = None) -> GlobalRecord:
        self._check_counters()
        layer_records = [layer.to_proto() for layer in self._select_layers(max_layers)]
        try:
            return GlobalRecord(
                stats_start=self.stats_start,
                stats_end=self.stats_end,
                total_frames=self.total_frames,
                missed_frames=self.missed_frames,
                client_composition_frames=self.client_composition_frames,
                stats=layer_records,
            )
        except ValidationError as exc:
            raise InvalidCounterError(str(exc)) from exc


__all__ = ["GlobalStats"]
