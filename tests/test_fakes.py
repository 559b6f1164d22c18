from __future__ import annotations

from music_insights.testing import make_events


def test_make_events_keeps_start_minutes() -> None:
    events = make_events(["a", "b"], start="2024-08-02T17:45:00")
    assert [e["timestamp"] for e in events] == ["2024-08-02T17:45:00", "2024-08-02T17:46:00"]


def test_make_events_rolls_over_midnight() -> None:
    events = make_events(["a", "b", "c"], start="2024-08-02T23:59:30")
    assert [e["timestamp"] for e in events] == [
        "2024-08-02T23:59:30",
        "2024-08-03T00:00:30",
        "2024-08-03T00:01:30",
    ]
    assert [e["song_id"] for e in events] == ["a", "b", "c"]


def test_make_events_past_a_full_day() -> None:
    events = make_events(["x"] * (24 * 60 + 1), start="2024-08-01T10:00:00")
    assert events[-1]["timestamp"] == "2024-08-02T10:00:00"
