from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

from music_insights.analytics.core.windows import resolve_timezone
from music_insights.catalog.protocol import CatalogProto
from music_insights.models import AnswerRow, ListenEvent, Song
from music_insights.queries import QueryCatalog

# =============================================================================
# Fake collaborators
# =============================================================================


class FakeCatalog(CatalogProto):
    """Simple in-memory catalog fake for testing."""

    def __init__(self) -> None:
        self._songs: dict[str, Song] = {}
        self._events: dict[str, list[ListenEvent]] = {}

    def add_song(
        self,
        *,
        song_id: str,
        title: str,
        artist: str,
        genre: str = "Pop",
        duration_seconds: int = 180,
    ) -> None:
        self._songs[song_id] = {
            "id": song_id,
            "title": title,
            "artist": artist,
            "genre": genre,
            "duration_seconds": duration_seconds,
        }

    def add_listen(self, *, user_id: str, song_id: str, timestamp: str) -> None:
        self._events.setdefault(user_id, []).append({"song_id": song_id, "timestamp": timestamp})

    def add_raw_event(self, *, user_id: str, event: ListenEvent) -> None:
        """Append an event as-is, bypassing any shape checks."""
        self._events.setdefault(user_id, []).append(event)

    def add_user(self, user_id: str) -> None:
        self._events.setdefault(user_id, [])

    def get_song(self, song_id: str) -> Song | None:
        return self._songs.get(song_id)

    def get_listen_events(self, user_id: str) -> list[ListenEvent]:
        return list(self._events.get(user_id, []))

    def get_user_ids(self) -> list[str]:
        return list(self._events)


class RecordingPresenter:
    """Presenter fake that keeps every batch of rows it was asked to render."""

    def __init__(self) -> None:
        self.rendered: list[list[AnswerRow]] = []

    def render(self, rows: list[AnswerRow]) -> None:
        self.rendered.append(list(rows))


# =============================================================================
# Factories
# =============================================================================


def make_events(song_ids: list[str], *, start: str = "2024-08-01T10:00:00") -> list[ListenEvent]:
    """Events for the given song ids, one minute apart starting at ``start``."""
    first = datetime.fromisoformat(start)
    return [
        {"song_id": song_id, "timestamp": (first + timedelta(minutes=i)).isoformat()}
        for i, song_id in enumerate(song_ids)
    ]


def make_query_catalog(
    catalog: FakeCatalog, *, tz: tzinfo | None = None, top_genres_limit: int = 3
) -> QueryCatalog:
    zone = tz if tz is not None else resolve_timezone("UTC")
    return QueryCatalog(catalog, tz=zone, top_genres_limit=top_genres_limit)


__all__ = [
    "FakeCatalog",
    "RecordingPresenter",
    "make_events",
    "make_query_catalog",
]
