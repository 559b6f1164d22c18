from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import date
from typing import TypeVar

E = TypeVar("E")


def keys_every_day(
    events: Iterable[E],
    key_of: Callable[[E], str],
    day_of: Callable[[E], date],
) -> frozenset[str]:
    """Return the keys seen on every distinct calendar day present in ``events``.

    No events means no days, which yields an empty set.
    """
    keys_by_day: dict[date, set[str]] = defaultdict(set)
    for event in events:
        keys_by_day[day_of(event)].add(key_of(event))

    common: set[str] | None = None
    for day_keys in keys_by_day.values():
        common = set(day_keys) if common is None else common & day_keys
        if not common:
            return frozenset()
    return frozenset(common) if common is not None else frozenset()


__all__ = ["keys_every_day"]
