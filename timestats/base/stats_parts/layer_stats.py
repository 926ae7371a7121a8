"""Per-layer aggregated timing state.

A ``LayerStats`` owns one :class:`Histogram` per interval kind observed for
the layer, in first-observation order, plus the layer's time window and frame
counter. Timestamps and counters are set directly by the collector.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from pydantic import ValidationError

from ...config.defaults import PRESENT_TO_PRESENT
from ..dto import DeltaRecord, LayerRecord
from ..errors import InvalidCounterError
from ..package_name import derive_package_name
from .histogram import Histogram

if TYPE_CHECKING:
    from .global_stats import GlobalStats


class LayerStats:
    """One layer's identity, time window, frame counter and interval histograms."""

    __slots__ = (
        "_layer_name",
        "stats_start",
        "stats_end",
        "total_frames",
        "deltas",
        "_owner",
    )

    def __init__(
        self,
        layer_name: str,
        stats_start: int = 0,
        stats_end: int = 0,
        total_frames: int = 0,
    ):
        self._layer_name = layer_name
        self.stats_start = stats_start
        self.stats_end = stats_end
        self.total_frames = total_frames
        self.deltas: Dict[str, Histogram] = {}
        # set by the GlobalStats that tracks this layer
        self._owner: Optional[GlobalStats] = None

    def __repr__(self) -> str:
        return f"LayerStats(layer_name={self._layer_name!r}, total_frames={self.total_frames}, deltas={list(self.deltas)})"

    @property
    def layer_name(self) -> str:
        return self._layer_name

    @property
    def package_name(self) -> str:
        """Package name derived from ``layer_name``; ``""`` when not recognized."""
        return derive_package_name(self._layer_name)

    # -------------------------- Record Methods -------------------------- #
    def histogram(self, delta_name: str) -> Histogram:
        """Return the histogram for ``delta_name``, creating an empty one on first use."""
        hist = self.deltas.get(delta_name)
        if hist is None:
            hist = Histogram()
            self.deltas[delta_name] = hist
        return hist

    def insert(self, delta_name: str, delta: int) -> None:
        self.histogram(delta_name).insert(delta)

    def average_fps(self) -> Optional[float]:
        """Frames per second derived from the mean present-to-present interval.

        Returns ``None`` when no present-to-present observation exists.
        """
        hist = self.deltas.get(PRESENT_TO_PRESENT)
        if hist is None or hist.total_count() == 0:
            return None
        return 1000.0 / hist.average_time()

    @property
    def owner(self) -> Optional[GlobalStats]:
        """The session currently tracking this layer, if any."""
        return self._owner

    # -------------------------- Render Methods -------------------------- #
    def _check_counters(self) -> None:
        if self.total_frames < 0:
            raise InvalidCounterError(f"totalFrames is negative: {self.total_frames}", layer_name=self._layer_name)

    def to_string(self) -> str:
        self._check_counters()
        lines: List[str] = [
            f"layerName = {self._layer_name}\n",
            f"packageName = {self.package_name}\n",
            f"statsStart = {self.stats_start}\n",
            f"statsEnd = {self.stats_end}\n",
            f"totalFrames= {self.total_frames}\n",
        ]
        fps = self.average_fps()
        if fps is not None:
            lines.append(f"averageFPS = {fps:.3f}\n")
        for name, hist in self.deltas.items():
            lines.append(f"{name} histogram is as below:\n")
            lines.append(hist.to_string())
        return "".join(lines)

    def to_proto(self) -> LayerRecord:
        self._check_counters()
        try:
            return LayerRecord(
                layer_name=self._layer_name,
                package_name=self.package_name,
                stats_start=self.stats_start,
                stats_end=self.stats_end,
                total_frames=self.total_frames,
                deltas=[
                    DeltaRecord(delta_name=name, histograms=hist.to_records())
                    for name, hist in self.deltas.items()
                ],
            )
        except ValidationError as exc:
            raise InvalidCounterError(str(exc), layer_name=self._layer_name) from exc


__all__ = ["LayerStats"]
