from __future__ import annotations

from typing import TypedDict

from ._utils import (
    LogFormat,
    LogLevel,
    _optional_env_str,
    _parse_int,
    _parse_log_format,
    _parse_log_level,
    _parse_str,
)


class MusicInsightsLoggingConfig(TypedDict, total=True):
    """Logging configuration."""

    level: LogLevel
    format: LogFormat


class MusicInsightsSettings(TypedDict, total=True):
    """Configuration for the music insights engine."""

    logging: MusicInsightsLoggingConfig
    timezone: str
    top_genres: int
    catalog_path: str | None


def load_music_insights_settings() -> MusicInsightsSettings:
    """Load music insights settings from environment variables.

    Environment variables:
        LOGGING__LEVEL: Log level (default: INFO)
        LOGGING__FORMAT: json or text (default: json)
        INSIGHTS__TIMEZONE: IANA zone for calendar days and the Friday night window
            (default: UTC)
        INSIGHTS__TOP_GENRES: How many genres the top genres question reports (default: 3)
        INSIGHTS__CATALOG_PATH: Optional path to a JSON catalog document
    """
    logging_cfg: MusicInsightsLoggingConfig = {
        "level": _parse_log_level("LOGGING__LEVEL", "INFO"),
        "format": _parse_log_format("LOGGING__FORMAT", "json"),
    }
    return {
        "logging": logging_cfg,
        "timezone": _parse_str("INSIGHTS__TIMEZONE", "UTC"),
        "top_genres": _parse_int("INSIGHTS__TOP_GENRES", 3, ge=1),
        "catalog_path": _optional_env_str("INSIGHTS__CATALOG_PATH"),
    }


__all__ = [
    "MusicInsightsLoggingConfig",
    "MusicInsightsSettings",
    "load_music_insights_settings",
]
