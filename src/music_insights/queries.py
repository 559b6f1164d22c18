from __future__ import annotations

from collections.abc import Callable
from datetime import date, tzinfo
from typing import Final

from platform_core.config import MusicInsightsSettings, load_music_insights_settings
from platform_core.errors import AppError, code_value
from platform_core.logging import LogEventFields, get_logger

from music_insights.analytics.core.aggregate import MISSING_KEY, aggregate, count_by
from music_insights.analytics.core.daily import keys_every_day
from music_insights.analytics.core.ranking import arg_max, top_n
from music_insights.analytics.core.streaks import longest_run
from music_insights.analytics.core.windows import is_friday_night, local_date, resolve_timezone
from music_insights.catalog.protocol import CatalogProto
from music_insights.error_codes import MusicInsightsErrorCode
from music_insights.models import (
    DEFAULT_TOP_GENRES,
    AnswerRow,
    ListenEvent,
    Question,
)

_log = get_logger(__name__)

# Display order.
QUESTIONS: Final[tuple[Question, ...]] = (
    {
        "id": "most_often_song",
        "text": "What was the user's most often listened to song?",
    },
    {
        "id": "most_often_artist",
        "text": "What was the user's most often listened to artist?",
    },
    {
        "id": "most_often_song_friday",
        "text": (
            "What was the user's most often listened to song on Friday nights "
            "(between 5pm and 4am)?"
        ),
    },
    {
        "id": "most_listened_song_by_time",
        "text": (
            "What was the user's most often listened to song by listening time "
            "(not number of listens)?"
        ),
    },
    {
        "id": "most_listened_artist_by_time",
        "text": (
            "What was the user's most often listened to artist by listening time "
            "(not number of listens)?"
        ),
    },
    {
        "id": "most_listened_song_friday_by_time",
        "text": (
            "What was the user's most often listened to song on Friday nights "
            "(between 5pm and 4am) by listening time?"
        ),
    },
    {
        "id": "most_consecutive_song",
        "text": (
            "What song did the user listen to the most times in a row "
            "(i.e. without any other song being listened to in between)?"
        ),
    },
    {
        "id": "songs_every_day",
        "text": (
            "Are there any songs that, on each day the user listened to music, "
            "they listened to every day? Which one(s)?"
        ),
    },
    {
        "id": "top_genres",
        "text": "What were the user's top genres to listen to by number of listens?",
    },
)


def _song_id(event: ListenEvent) -> str:
    return event["song_id"]


def _require_well_formed(event: ListenEvent) -> None:
    song_id = event.get("song_id")
    timestamp = event.get("timestamp")
    if not isinstance(song_id, str) or song_id == "":
        raise AppError(
            code=MusicInsightsErrorCode.MALFORMED_EVENT,
            message="listen event without song_id",
        )
    if not isinstance(timestamp, str) or timestamp == "":
        raise AppError(
            code=MusicInsightsErrorCode.MALFORMED_EVENT,
            message=f"listen event for {song_id} without timestamp",
        )


class QueryCatalog:
    """Answer the fixed set of listening questions for one user at a time.

    Every answer is recomputed from the catalog on each call. An empty string
    means the question has no answer for that user.
    """

    def __init__(
        self,
        catalog: CatalogProto,
        *,
        tz: tzinfo,
        top_genres_limit: int = DEFAULT_TOP_GENRES,
    ) -> None:
        self._catalog = catalog
        self._tz = tz
        self._top_genres_limit = top_genres_limit
        self._answer_fns: dict[str, Callable[[str], str]] = {
            "most_often_song": self.most_often_song,
            "most_often_artist": self.most_often_artist,
            "most_often_song_friday": self.most_often_song_friday,
            "most_listened_song_by_time": self.most_listened_song_by_time,
            "most_listened_artist_by_time": self.most_listened_artist_by_time,
            "most_listened_song_friday_by_time": self.most_listened_song_friday_by_time,
            "most_consecutive_song": self.most_consecutive_song,
            "songs_every_day": self.songs_every_day,
            "top_genres": self._top_genres_answer,
        }

    # -- catalog access ------------------------------------------------------

    def _events(self, user_id: str) -> list[ListenEvent]:
        events = self._catalog.get_listen_events(user_id)
        for event in events:
            _require_well_formed(event)
        return events

    def _friday_night_events(self, user_id: str) -> list[ListenEvent]:
        return [e for e in self._events(user_id) if is_friday_night(e["timestamp"], self._tz)]

    def _artist_of(self, event: ListenEvent) -> str | None:
        song = self._catalog.get_song(event["song_id"])
        return song["artist"] if song is not None else None

    def _genre_of(self, event: ListenEvent) -> str | None:
        song = self._catalog.get_song(event["song_id"])
        return song["genre"] if song is not None else None

    def _duration_of(self, event: ListenEvent) -> int | None:
        song = self._catalog.get_song(event["song_id"])
        return song["duration_seconds"] if song is not None else None

    def _day_of(self, event: ListenEvent) -> date:
        return local_date(event["timestamp"], self._tz)

    def _song_label(self, song_id: str | None) -> str:
        if song_id is None:
            return ""
        song = self._catalog.get_song(song_id)
        if song is None:
            return ""
        return f"{song['artist']} - {song['title']}"

    # -- questions -----------------------------------------------------------

    def most_often_song(self, user_id: str) -> str:
        return self._song_label(arg_max(count_by(self._events(user_id), _song_id)))

    def most_often_artist(self, user_id: str) -> str:
        counts = count_by(self._events(user_id), self._artist_of)
        return arg_max(counts) or ""

    def most_often_song_friday(self, user_id: str) -> str:
        counts = count_by(self._friday_night_events(user_id), _song_id)
        return self._song_label(arg_max(counts))

    def most_listened_song_by_time(self, user_id: str) -> str:
        counts = aggregate(self._events(user_id), _song_id, self._duration_of)
        return self._song_label(arg_max(counts))

    def most_listened_artist_by_time(self, user_id: str) -> str:
        counts = aggregate(self._events(user_id), self._artist_of, self._duration_of)
        return arg_max(counts) or ""

    def most_listened_song_friday_by_time(self, user_id: str) -> str:
        counts = aggregate(self._friday_night_events(user_id), _song_id, self._duration_of)
        return self._song_label(arg_max(counts))

    def most_consecutive_song(self, user_id: str) -> str:
        streak = longest_run(self._events(user_id), _song_id)
        parts: list[str] = []
        for song_id in streak["keys"]:
            label = self._song_label(song_id)
            if label:
                parts.append(f"{label} ({streak['length']} times)")
        return ", ".join(parts)

    def songs_every_day(self, user_id: str) -> str:
        events = self._events(user_id)
        common = keys_every_day(events, _song_id, self._day_of)
        # order by first listen
        ordered = [song_id for song_id in dict.fromkeys(map(_song_id, events)) if song_id in common]
        labels = [label for label in map(self._song_label, ordered) if label]
        return ", ".join(labels)

    def top_genres(self, user_id: str, *, limit: int | None = None) -> list[str]:
        n = limit if limit is not None else self._top_genres_limit
        # unknown songs share one unnamed bucket that takes a slot but is not reported
        ranked = top_n(count_by(self._events(user_id), self._genre_of), n)
        return [genre for genre in ranked if genre != MISSING_KEY]

    def _top_genres_answer(self, user_id: str) -> str:
        return ", ".join(self.top_genres(user_id))

    # -- dispatch ------------------------------------------------------------

    def questions(self) -> list[Question]:
        return list(QUESTIONS)

    def answer(self, question_id: str, user_id: str) -> str:
        answer_fn = self._answer_fns.get(question_id)
        if answer_fn is None:
            raise AppError(
                code=MusicInsightsErrorCode.UNKNOWN_QUESTION,
                message=f"unknown question: {question_id}",
            )
        return answer_fn(user_id)

    def all_answers(self, user_id: str) -> list[AnswerRow]:
        """Answer every question in display order, omitting empty answers.

        A question that fails with AppError (e.g. a malformed event) is logged
        and left out; the remaining questions are still answered.
        """
        rows: list[AnswerRow] = []
        for question in QUESTIONS:
            try:
                answer = self.answer(question["id"], user_id)
            except AppError as exc:
                dropped: LogEventFields = {
                    "user_id": user_id,
                    "question_id": question["id"],
                    "error_code": code_value(exc.code),
                }
                _log.warning("question dropped: %s", exc.message, extra=dropped)
                continue
            if answer:
                rows.append({"question": question["text"], "answer": answer})
        computed: LogEventFields = {"user_id": user_id, "row_count": len(rows)}
        _log.debug("answers computed", extra=computed)
        return rows


def build_query_catalog(
    catalog: CatalogProto, *, settings: MusicInsightsSettings | None = None
) -> QueryCatalog:
    """Create a QueryCatalog using the configured time zone and genre limit."""
    cfg = settings if settings is not None else load_music_insights_settings()
    return QueryCatalog(
        catalog,
        tz=resolve_timezone(cfg["timezone"]),
        top_genres_limit=cfg["top_genres"],
    )


__all__ = ["QUESTIONS", "QueryCatalog", "build_query_catalog"]
