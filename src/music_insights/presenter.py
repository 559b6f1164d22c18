from __future__ import annotations

from typing import Final, Protocol, TextIO

from music_insights.models import AnswerRow
from music_insights.queries import QueryCatalog

EMPTY_RESULTS_MESSAGE: Final[str] = "This user hasn't listened to any songs yet."


class PresenterProto(Protocol):
    def render(self, rows: list[AnswerRow]) -> None: ...


def build_result_lines(rows: list[AnswerRow]) -> list[str]:
    if not rows:
        return [EMPTY_RESULTS_MESSAGE]
    return [f"{row['question']}: {row['answer']}" for row in rows]


class StreamPresenter:
    """Write one "question: answer" line per row to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def render(self, rows: list[AnswerRow]) -> None:
        for line in build_result_lines(rows):
            self._stream.write(line + "\n")


def present_user(
    queries: QueryCatalog, user_id: str, presenter: PresenterProto
) -> list[AnswerRow]:
    rows = queries.all_answers(user_id)
    presenter.render(rows)
    return rows


__all__ = [
    "EMPTY_RESULTS_MESSAGE",
    "PresenterProto",
    "StreamPresenter",
    "build_result_lines",
    "present_user",
]
