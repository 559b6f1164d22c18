from __future__ import annotations

import io

from music_insights.presenter import (
    EMPTY_RESULTS_MESSAGE,
    StreamPresenter,
    build_result_lines,
    present_user,
)
from music_insights.testing import FakeCatalog, RecordingPresenter, make_query_catalog


def test_build_result_lines_empty() -> None:
    assert build_result_lines([]) == [EMPTY_RESULTS_MESSAGE]


def test_stream_presenter_writes_one_line_per_row() -> None:
    buf = io.StringIO()
    StreamPresenter(buf).render(
        [
            {"question": "Q1?", "answer": "A - T"},
            {"question": "Q2?", "answer": "A"},
        ]
    )
    assert buf.getvalue() == "Q1?: A - T\nQ2?: A\n"


def test_present_user_hands_rows_to_presenter() -> None:
    fake = FakeCatalog()
    fake.add_song(song_id="s1", title="T", artist="A")
    fake.add_listen(user_id="1", song_id="s1", timestamp="2024-08-05T08:00:00")
    fake.add_user("4")
    queries = make_query_catalog(fake)
    presenter = RecordingPresenter()

    rows = present_user(queries, "1", presenter)
    empty = present_user(queries, "4", presenter)

    assert presenter.rendered == [rows, []]
    assert rows[0]["answer"] == "A - T"
    assert empty == []
