from __future__ import annotations

from ._utils import (
    LogFormat,
    LogLevel,
    _optional_env_str,
    _parse_int,
    _parse_log_format,
    _parse_log_level,
    _parse_str,
)
from .music_insights import (
    MusicInsightsLoggingConfig,
    MusicInsightsSettings,
    load_music_insights_settings,
)

__all__ = [
    "LogFormat",
    "LogLevel",
    "MusicInsightsLoggingConfig",
    "MusicInsightsSettings",
    "_optional_env_str",
    "_parse_int",
    "_parse_log_format",
    "_parse_log_level",
    "_parse_str",
    "load_music_insights_settings",
]
