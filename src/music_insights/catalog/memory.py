from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from music_insights.catalog.protocol import CatalogProto
from music_insights.models import ListenEvent, Song


class InMemoryCatalog(CatalogProto):
    """Catalog over fully materialized songs and event lists.

    Nothing is mutated after construction; callers receive copies of the
    event lists.
    """

    def __init__(
        self,
        *,
        songs: Iterable[Song],
        listen_events: Mapping[str, Sequence[ListenEvent]],
    ) -> None:
        self._songs: dict[str, Song] = {song["id"]: song for song in songs}
        self._events: dict[str, list[ListenEvent]] = {
            user_id: list(events) for user_id, events in listen_events.items()
        }

    def get_song(self, song_id: str) -> Song | None:
        return self._songs.get(song_id)

    def get_listen_events(self, user_id: str) -> list[ListenEvent]:
        return list(self._events.get(user_id, []))

    def get_user_ids(self) -> list[str]:
        return list(self._events)


__all__ = ["InMemoryCatalog"]
