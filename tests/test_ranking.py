from __future__ import annotations

from music_insights.analytics.core.ranking import arg_max, top_n


def test_arg_max_empty_returns_none() -> None:
    assert arg_max({}) is None


def test_arg_max_first_seen_wins_ties() -> None:
    assert arg_max({"a": 3, "b": 3, "c": 1}) == "a"
    assert arg_max({"c": 1, "b": 3, "a": 3}) == "b"


def test_arg_max_picks_strict_maximum() -> None:
    assert arg_max({"a": 1, "b": 5, "c": 4}) == "b"


def test_arg_max_all_zero_returns_first_key() -> None:
    assert arg_max({"x": 0, "y": 0}) == "x"


def test_top_n_orders_by_value_then_insertion() -> None:
    counts = {"rock": 2, "pop": 5, "jazz": 2, "folk": 1}
    assert top_n(counts, 3) == ["pop", "rock", "jazz"]


def test_top_n_fewer_keys_than_requested() -> None:
    assert top_n({"a": 1}, 3) == ["a"]


def test_top_n_empty_and_non_positive() -> None:
    assert top_n({}, 3) == []
    assert top_n({"a": 1}, 0) == []
    assert top_n({"a": 1}, -2) == []
