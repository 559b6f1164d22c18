from __future__ import annotations

from typing import Final, Literal, TypedDict

UserID = str
SongID = str

# Accumulated weight per aggregation key, in first-seen order.
CountMap = dict[str, int]


class Song(TypedDict):
    id: SongID
    title: str
    artist: str
    genre: str
    duration_seconds: int


class ListenEvent(TypedDict):
    song_id: SongID
    timestamp: str  # ISO 8601 instant


class StreakResult(TypedDict):
    keys: list[str]
    length: int


QuestionID = Literal[
    "most_often_song",
    "most_often_artist",
    "most_often_song_friday",
    "most_listened_song_by_time",
    "most_listened_artist_by_time",
    "most_listened_song_friday_by_time",
    "most_consecutive_song",
    "songs_every_day",
    "top_genres",
]


class Question(TypedDict):
    id: QuestionID
    text: str


class AnswerRow(TypedDict):
    question: str
    answer: str


DEFAULT_TOP_GENRES: Final[int] = 3
