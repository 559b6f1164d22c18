from __future__ import annotations

from pathlib import Path

from platform_core.errors import AppError
from platform_core.json_utils import (
    InvalidJsonError,
    JSONTypeError,
    JSONValue,
    load_json_str,
    narrow_json_to_dict,
    narrow_json_to_list,
    require_int,
    require_str,
)
from platform_core.logging import get_logger

from music_insights.catalog.memory import InMemoryCatalog
from music_insights.error_codes import MusicInsightsErrorCode
from music_insights.models import ListenEvent, Song

_log = get_logger(__name__)


class DecoderError(ValueError):
    """Raised when a catalog JSON document fails validation."""


def _decode_song(raw: JSONValue) -> Song:
    """Decode one song object.

    Expected shape:
    {
        "id": "song-1",
        "title": "Title",
        "artist": "Artist",
        "genre": "Pop",
        "duration_seconds": 215
    }
    """
    if not isinstance(raw, dict):
        raise DecoderError("song must be a dict")
    try:
        song_id = require_str(raw, "id")
        title = require_str(raw, "title")
        artist = require_str(raw, "artist")
        genre = require_str(raw, "genre")
        duration = require_int(raw, "duration_seconds")
    except JSONTypeError as exc:
        raise DecoderError(f"song: {exc}") from exc
    if song_id == "":
        raise DecoderError("song.id must be a non-empty string")
    if duration < 0:
        raise DecoderError("song.duration_seconds must be a non-negative int")
    return {
        "id": song_id,
        "title": title,
        "artist": artist,
        "genre": genre,
        "duration_seconds": duration,
    }


def _decode_listen_event(raw: JSONValue) -> ListenEvent:
    """Decode one listen event: {"song_id": "song-1", "timestamp": "2024-08-02T18:00:00"}."""
    if not isinstance(raw, dict):
        raise DecoderError("listen event must be a dict")
    song_id = raw.get("song_id")
    if not isinstance(song_id, str) or song_id == "":
        raise DecoderError("listen event song_id must be a non-empty string")
    timestamp = raw.get("timestamp")
    if not isinstance(timestamp, str) or timestamp == "":
        raise DecoderError("listen event timestamp must be a non-empty string")
    return {"song_id": song_id, "timestamp": timestamp}


def decode_catalog(doc: JSONValue) -> InMemoryCatalog:
    """Decode {"songs": [...], "listen_events": {user_id: [...]}} into a catalog.

    User ids keep document order. Raises DecoderError on any shape problem.
    """
    try:
        root = narrow_json_to_dict(doc)
        raw_songs = narrow_json_to_list(root.get("songs"))
        raw_events = narrow_json_to_dict(root.get("listen_events"))
        events_by_user: dict[str, list[ListenEvent]] = {
            user_id: [_decode_listen_event(item) for item in narrow_json_to_list(items)]
            for user_id, items in raw_events.items()
        }
    except JSONTypeError as exc:
        raise DecoderError(str(exc)) from exc
    songs = [_decode_song(item) for item in raw_songs]
    return InMemoryCatalog(songs=songs, listen_events=events_by_user)


def load_catalog_json(raw: str) -> InMemoryCatalog:
    """Parse and decode a catalog document, raising AppError(INVALID_CATALOG)."""
    try:
        catalog = decode_catalog(load_json_str(raw))
    except (InvalidJsonError, DecoderError) as exc:
        raise AppError(
            code=MusicInsightsErrorCode.INVALID_CATALOG,
            message=f"invalid catalog document: {exc}",
        ) from exc
    _log.info(
        "catalog loaded: %d users",
        len(catalog.get_user_ids()),
    )
    return catalog


def load_catalog_file(path: Path) -> InMemoryCatalog:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AppError(
            code=MusicInsightsErrorCode.INVALID_CATALOG,
            message=f"cannot read catalog {path}: {exc}",
        ) from exc
    return load_catalog_json(raw)


__all__ = [
    "DecoderError",
    "_decode_listen_event",
    "_decode_song",
    "decode_catalog",
    "load_catalog_file",
    "load_catalog_json",
]
