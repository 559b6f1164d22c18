from __future__ import annotations

from collections import Counter
from collections.abc import Mapping


def arg_max(counts: Mapping[str, int]) -> str | None:
    """Return the key with the highest value, or None for an empty mapping.

    Only a strictly greater value replaces the current best, so among tied
    maxima the key inserted first wins.
    """
    best_key: str | None = None
    best_value = 0
    for key, value in counts.items():
        if best_key is None or value > best_value:
            best_key = key
            best_value = value
    return best_key


def top_n(counts: Mapping[str, int], n: int) -> list[str]:
    """Return up to ``n`` keys by descending value; ties keep insertion order."""
    if n <= 0:
        return []
    return [key for key, _ in Counter(counts).most_common(n)]


__all__ = ["arg_max", "top_n"]
