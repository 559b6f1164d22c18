from __future__ import annotations

import pytest
from platform_core.config import load_music_insights_settings
from platform_core.testing import make_fake_env


def test_defaults_when_env_empty() -> None:
    make_fake_env()
    settings = load_music_insights_settings()
    assert settings == {
        "logging": {"level": "INFO", "format": "json"},
        "timezone": "UTC",
        "top_genres": 3,
        "catalog_path": None,
    }


def test_overrides_from_env() -> None:
    make_fake_env(
        {
            "LOGGING__LEVEL": "debug",
            "LOGGING__FORMAT": "TEXT",
            "INSIGHTS__TIMEZONE": "Europe/Berlin",
            "INSIGHTS__TOP_GENRES": "5",
            "INSIGHTS__CATALOG_PATH": " /data/catalog.json ",
        }
    )
    settings = load_music_insights_settings()
    assert settings["logging"] == {"level": "DEBUG", "format": "text"}
    assert settings["timezone"] == "Europe/Berlin"
    assert settings["top_genres"] == 5
    assert settings["catalog_path"] == "/data/catalog.json"


def test_blank_values_fall_back_to_defaults() -> None:
    make_fake_env({"INSIGHTS__TIMEZONE": "  ", "LOGGING__LEVEL": "loud"})
    settings = load_music_insights_settings()
    assert settings["timezone"] == "UTC"
    assert settings["logging"]["level"] == "INFO"


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("INSIGHTS__TOP_GENRES", "three"),
        ("INSIGHTS__TOP_GENRES", "0"),
        ("LOGGING__FORMAT", "xml"),
    ],
)
def test_invalid_values_raise(key: str, value: str) -> None:
    make_fake_env({key: value})
    with pytest.raises(RuntimeError, match=key):
        load_music_insights_settings()


def test_fake_env_unset() -> None:
    env = make_fake_env({"INSIGHTS__TOP_GENRES": "7"})
    assert load_music_insights_settings()["top_genres"] == 7
    env.unset("INSIGHTS__TOP_GENRES")
    assert load_music_insights_settings()["top_genres"] == 3
