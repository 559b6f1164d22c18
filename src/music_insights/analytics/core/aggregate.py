from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from typing import TypeVar

from music_insights.models import CountMap

E = TypeVar("E")

# Key used for events whose grouping key cannot be resolved (e.g. unknown song).
MISSING_KEY = ""


def aggregate(
    events: Iterable[E],
    key_of: Callable[[E], str | None],
    value_of: Callable[[E], int | None] | None = None,
) -> CountMap:
    """Sum a per-event weight into buckets keyed by ``key_of``.

    Without ``value_of`` every event weighs 1, giving a plain frequency count.
    A key or value that cannot be resolved (``None``) is credited to
    ``MISSING_KEY`` / 0 instead of failing the whole aggregation. The returned
    mapping lists keys in the order they were first seen.
    """
    counts: Counter[str] = Counter()
    for event in events:
        key = key_of(event)
        value = 1 if value_of is None else value_of(event)
        counts[key if key is not None else MISSING_KEY] += value if value is not None else 0
    return dict(counts)


def count_by(events: Iterable[E], key_of: Callable[[E], str | None]) -> CountMap:
    return aggregate(events, key_of)


__all__ = ["MISSING_KEY", "aggregate", "count_by"]
