from __future__ import annotations

from typing import Protocol, runtime_checkable

from music_insights.models import ListenEvent, Song


@runtime_checkable
class CatalogProto(Protocol):
    """Read-only source of songs and per-user listen events."""

    def get_song(self, song_id: str) -> Song | None:
        """Return the song, or None when the id is unknown."""
        ...

    def get_listen_events(self, user_id: str) -> list[ListenEvent]:
        """Return the user's events in chronological order ([] for unknown users)."""
        ...

    def get_user_ids(self) -> list[str]: ...


__all__ = ["CatalogProto"]
