"""Wire record validation and JSON serialization."""
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from timestats import DeltaRecord, ErrorCode, GlobalRecord, HistogramBucketRecord, InvalidCounterError, LayerRecord


def test_structured_dump_uses_wire_field_names(example_stats):
    data = example_stats.to_proto().model_dump()
    assert set(data) == {
        "stats_start",
        "stats_end",
        "total_frames",
        "missed_frames",
        "client_composition_frames",
        "stats",
    }
    layer = data["stats"][0]
    assert set(layer) == {"layer_name", "package_name", "stats_start", "stats_end", "total_frames", "deltas"}
    assert layer["deltas"] == [
        {
            "delta_name": "present2present",
            "histograms": [
                {"render_millis": 16, "frame_count": 2},
                {"render_millis": 33, "frame_count": 1},
            ],
        }
    ]


def test_json_round_trip(example_stats):
    record = example_stats.to_proto()
    payload = record.model_dump_json()
    assert json.loads(payload)["stats"][0]["package_name"] == "com.example.app"
    assert GlobalRecord.model_validate_json(payload) == record


def test_negative_counters_are_rejected():
    with pytest.raises(ValidationError):
        HistogramBucketRecord(render_millis=-1, frame_count=1)
    with pytest.raises(ValidationError):
        HistogramBucketRecord(render_millis=1, frame_count=-1)
    with pytest.raises(ValidationError):
        LayerRecord(layer_name="L#0", total_frames=-1)
    with pytest.raises(ValidationError):
        GlobalRecord(missed_frames=-2)


def test_negative_timestamps_are_allowed():
    record = LayerRecord(layer_name="L#0", stats_start=-10, stats_end=-1)
    assert record.stats_start == -10


def test_negative_frame_counter_surfaces_when_rendering_proto(example_stats):
    example_stats.client_composition_frames = -1
    with pytest.raises(InvalidCounterError) as exc:
        example_stats.to_proto()
    assert exc.value.code is ErrorCode.INVALID_COUNTER
    assert not isinstance(exc.value, ValidationError)


def test_delta_record_defaults_to_no_buckets():
    assert DeltaRecord(delta_name="post2present").histograms == []
