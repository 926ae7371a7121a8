"""GlobalStats tracking, reset and rendering."""
from __future__ import annotations

import pytest

from timestats import (
    DuplicateLayerError,
    ErrorCode,
    GlobalRecord,
    GlobalStats,
    InvalidCounterError,
    LayerOwnedError,
    LayerStats,
    TimeStatsError,
)


def test_to_string_header_and_layer_sections(example_stats):
    example_stats.missed_frames = 2
    example_stats.client_composition_frames = 1
    layer = example_stats.layers[0]

    text = example_stats.to_string()
    header = (
        "SurfaceFlinger TimeStats:\n"
        "statsStart = 1000\n"
        "statsEnd = 5000\n"
        "totalFrames= 3\n"
        "missedFrames= 2\n"
        "clientCompositionFrames= 1\n"
        "TimeStats for each layer is as below:\n"
    )
    assert text == header + layer.to_string()
    assert "packageName = com.example.app\n" in text
    assert "averageFPS = 46.154\n" in text


def test_to_string_without_layers_is_header_only():
    text = GlobalStats().to_string()
    assert text.endswith("TimeStats for each layer is as below:\n")
    assert len(text.splitlines()) == 7


def test_to_proto_preserves_layer_order():
    stats = GlobalStats(stats_start=1, stats_end=2, total_frames=30, missed_frames=3, client_composition_frames=4)
    for name in ("b/B#0", "a/A#0", "c/C#0"):
        stats.layer(name).insert("present2present", 16)

    record = stats.to_proto()
    assert isinstance(record, GlobalRecord)
    assert (
        record.stats_start,
        record.stats_end,
        record.total_frames,
        record.missed_frames,
        record.client_composition_frames,
    ) == (1, 2, 30, 3, 4)
    assert [r.layer_name for r in record.stats] == ["b/B#0", "a/A#0", "c/C#0"]
    assert [r.package_name for r in record.stats] == ["b", "a", "c"]


def test_layer_is_get_or_create_and_inherits_session_start():
    stats = GlobalStats(stats_start=42)
    first = stats.layer("L#0")
    assert first.stats_start == 42
    assert stats.layer("L#0") is first
    assert len(stats.layers) == 1


def test_add_layer_rejects_duplicate_names():
    stats = GlobalStats()
    stats.add_layer(LayerStats("L#0"))
    with pytest.raises(DuplicateLayerError) as exc:
        stats.add_layer(LayerStats("L#0"))
    assert exc.value.code is ErrorCode.DUPLICATE_LAYER
    assert exc.value.layer_name == "L#0"
    assert len(stats.layers) == 1


def test_layers_view_is_read_only():
    stats = GlobalStats()
    stats.layer("L#0")
    view = stats.layers
    assert isinstance(view, tuple)
    with pytest.raises(AttributeError):
        view.append(LayerStats("M#0"))  # type: ignore[attr-defined]


def test_remove_layer():
    stats = GlobalStats()
    kept = stats.layer("keep#0")
    dropped = stats.layer("drop#0")
    assert stats.remove_layer("drop#0") is dropped
    assert stats.remove_layer("drop#0") is None
    assert stats.layers == (kept,)
    # name can be tracked again once removed
    stats.add_layer(LayerStats("drop#0"))
    assert [layer.layer_name for layer in stats.layers] == ["keep#0", "drop#0"]


def test_clear_resets_session(example_stats, captured_events):
    example_stats.missed_frames = 9
    example_stats.clear()
    assert example_stats.layers == ()
    assert (
        example_stats.stats_start,
        example_stats.stats_end,
        example_stats.total_frames,
        example_stats.missed_frames,
        example_stats.client_composition_frames,
    ) == (0, 0, 0, 0, 0)
    assert example_stats.to_proto() == GlobalRecord()
    events = [e for e in captured_events() if e.get("event") == "timestats.clear"]
    assert events and events[-1]["dropped_layers"] == 1
    assert events[-1]["level"] == "DEBUG"


def test_layer_creation_is_logged(captured_events):
    stats = GlobalStats()
    stats.layer("com.app/Main#0")
    stats.layer("com.app/Main#0")
    created = [e for e in captured_events() if e.get("event") == "timestats.layer.created"]
    assert len(created) == 1
    assert created[0]["layer_name"] == "com.app/Main#0"
    assert created[0]["level"] == "DEBUG"


def test_max_layers_keeps_busiest_in_tracking_order():
    stats = GlobalStats()
    for name, frames in (("a#0", 5), ("b#0", 50), ("c#0", 20), ("d#0", 20)):
        stats.layer(name).total_frames = frames

    assert [r.layer_name for r in stats.to_proto(max_layers=2).stats] == ["b#0", "c#0"]
    assert [r.layer_name for r in stats.to_proto(max_layers=3).stats] == ["b#0", "c#0", "d#0"]
    assert len(stats.to_proto(max_layers=10).stats) == 4
    assert stats.to_proto(max_layers=0).stats == []

    text = stats.to_string(max_layers=1)
    assert "layerName = b#0\n" in text
    assert "layerName = a#0\n" not in text


def test_max_layers_must_be_non_negative():
    stats = GlobalStats()
    stats.layer("a#0")
    with pytest.raises(ValueError):
        stats.to_proto(max_layers=-1)


def test_layer_tracked_by_one_session_cannot_join_another():
    first = GlobalStats()
    second = GlobalStats()
    layer = first.layer("com.app/Main#0")
    assert layer.owner is first

    with pytest.raises(LayerOwnedError) as exc:
        second.add_layer(layer)
    assert exc.value.code is ErrorCode.LAYER_OWNED
    assert exc.value.layer_name == "com.app/Main#0"
    assert second.layers == ()
    assert layer.owner is first


def test_released_layers_can_be_adopted_again():
    first = GlobalStats()
    second = GlobalStats()
    cleared = first.layer("a#0")
    removed = first.layer("b#0")

    assert first.remove_layer("b#0") is removed
    assert removed.owner is None
    first.clear()
    assert cleared.owner is None

    second.add_layer(cleared)
    second.add_layer(removed)
    assert second.layers == (cleared, removed)
    assert cleared.owner is second and removed.owner is second


def test_adopted_layer_is_owned_by_the_adopting_session():
    stats = GlobalStats()
    layer = LayerStats("L#0")
    assert layer.owner is None
    stats.add_layer(layer)
    assert layer.owner is stats


def test_negative_layer_counter_is_rejected_by_both_renderings():
    stats = GlobalStats()
    stats.layer("a#0").total_frames = -1
    for render in (stats.to_string, stats.to_proto):
        with pytest.raises(InvalidCounterError) as exc:
            render()
        assert isinstance(exc.value, TimeStatsError)
        assert exc.value.code is ErrorCode.INVALID_COUNTER
        assert exc.value.layer_name == "a#0"


@pytest.mark.parametrize("field", ["total_frames", "missed_frames", "client_composition_frames"])
def test_negative_session_counter_is_rejected_by_both_renderings(field):
    stats = GlobalStats()
    setattr(stats, field, -3)
    for render in (stats.to_string, stats.to_proto):
        with pytest.raises(InvalidCounterError) as exc:
            render()
        assert exc.value.code is ErrorCode.INVALID_COUNTER
        assert "-3" in exc.value.message
