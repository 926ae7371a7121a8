"""Pytest configuration for the timestats test suite.

Provides a pre-populated session aggregate and a fixture that captures the
shared ``timestats`` logger output as parsed JSON payloads.
"""

from __future__ import annotations

import io
import json
import logging
from typing import Callable, Iterator, List

import pytest

from timestats import GlobalStats
from timestats.base.log_support import JsonFormatter
from timestats.base.logging import get_logger


@pytest.fixture()
def example_stats() -> GlobalStats:
    """One layer with three present-to-present deltas (16, 16, 33 ms)."""

    stats = GlobalStats(stats_start=1000, stats_end=5000, total_frames=3)
    layer = stats.layer("com.example.app/MainActivity#0")
    layer.stats_end = 5000
    layer.total_frames = 3
    for delta in (16, 16, 33):
        layer.insert("present2present", delta)
    return stats


@pytest.fixture()
def captured_events() -> Iterator[Callable[[], List[dict]]]:
    """Attach a JSON handler at DEBUG to the shared logger; yield a reader for emitted payloads."""

    base = get_logger()
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setFormatter(JsonFormatter())
    handler.setLevel(logging.DEBUG)
    prev_level = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)

    def _read() -> List[dict]:
        return [json.loads(line) for line in buf.getvalue().splitlines() if line.strip()]

    try:
        yield _read
    finally:
        base.removeHandler(handler)
        base.setLevel(prev_level)
