from __future__ import annotations

import io

from platform_core.json_utils import load_json_str, narrow_json_to_dict
from platform_core.logging import get_logger, setup_logging, stdlib_logging


def test_json_logging_includes_static_and_structured_fields() -> None:
    buf = io.StringIO()
    root = setup_logging(
        level="DEBUG",
        format_mode="json",
        service_name="music-insights",
        instance_id="test-1",
        extra_fields=["user_id"],
        stream=buf,
    )
    assert len(root.handlers) == 1

    get_logger("music_insights.test").info(
        "answers computed", extra={"user_id": "7", "row_count": 4}
    )

    payload = narrow_json_to_dict(load_json_str(buf.getvalue().strip()))
    assert payload["message"] == "answers computed"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "music_insights.test"
    assert payload["service"] == "music-insights"
    assert payload["instance_id"] == "test-1"
    assert payload["user_id"] == "7"
    assert payload["row_count"] == 4
    assert "question_id" not in payload


def test_text_logging_prefixes_extra_fields() -> None:
    buf = io.StringIO()
    setup_logging(
        level="INFO",
        format_mode="text",
        service_name="music-insights",
        instance_id=None,
        extra_fields=["user_id", "question_id"],
        stream=buf,
    )

    get_logger("music_insights.test").warning(
        "question dropped", extra={"user_id": "3", "question_id": "top_genres"}
    )
    get_logger("music_insights.test").debug("hidden")

    output = buf.getvalue()
    assert "[WARNING] [music_insights.test] user_id=3 question_id=top_genres" in output
    assert output.rstrip().endswith("question dropped")
    assert "hidden" not in output


def test_repeated_setup_keeps_one_handler() -> None:
    for _ in range(3):
        setup_logging(
            level="INFO",
            format_mode="text",
            service_name="music-insights",
            instance_id="x",
            extra_fields=None,
            stream=io.StringIO(),
        )
    assert len(stdlib_logging.getLogger().handlers) == 1


def test_json_logging_formats_exceptions() -> None:
    buf = io.StringIO()
    setup_logging(
        level="INFO",
        format_mode="json",
        service_name="music-insights",
        instance_id="x",
        extra_fields=None,
        stream=buf,
    )
    logger = get_logger("music_insights.test")
    try:
        raise ValueError("boom")
    except ValueError:
        logger.exception("failed")

    payload = narrow_json_to_dict(load_json_str(buf.getvalue().strip()))
    exc_info = payload["exc_info"]
    assert isinstance(exc_info, str) and "ValueError: boom" in exc_info
