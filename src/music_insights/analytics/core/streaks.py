from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import islice
from typing import TypeVar

from music_insights.models import StreakResult

E = TypeVar("E")


def _record_run(best_for_key: dict[str, int], key: str, length: int) -> None:
    if length > best_for_key.get(key, 0):
        best_for_key[key] = length


def longest_run(events: Sequence[E], key_of: Callable[[E], str]) -> StreakResult:
    """Find the longest run of identical consecutive keys.

    Events are scanned in the given order. Each key is credited with its own
    best run, and every key whose best run equals the overall maximum is
    reported, in order of first appearance.
    """
    if len(events) == 0:
        return {"keys": [], "length": 0}

    best_for_key: dict[str, int] = {}
    current_key = key_of(events[0])
    current_length = 1
    for event in islice(events, 1, None):
        key = key_of(event)
        if key == current_key:
            current_length += 1
            continue
        _record_run(best_for_key, current_key, current_length)
        current_key = key
        current_length = 1
    _record_run(best_for_key, current_key, current_length)

    max_length = max(best_for_key.values())
    keys = [key for key, length in best_for_key.items() if length == max_length]
    return {"keys": keys, "length": max_length}


__all__ = ["longest_run"]
