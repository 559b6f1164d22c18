from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from platform_core.errors import AppError

from music_insights.error_codes import MusicInsightsErrorCode

_FRIDAY: Final[int] = 4
_SATURDAY: Final[int] = 5

# [Fri 17:00:00, Sat 04:00:00) in local wall-clock time
FRIDAY_NIGHT_START_SECONDS: Final[int] = 17 * 60 * 60
FRIDAY_NIGHT_END_SECONDS: Final[int] = 4 * 60 * 60


def resolve_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise AppError(
            code=MusicInsightsErrorCode.INVALID_TIMEZONE,
            message=f"unknown time zone: {name!r}",
        ) from exc


def parse_instant(timestamp: str) -> datetime:
    """Parse an ISO 8601 timestamp; a trailing ``Z`` means UTC."""
    text = timestamp[:-1] + "+00:00" if timestamp.endswith("Z") else timestamp
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise AppError(
            code=MusicInsightsErrorCode.MALFORMED_EVENT,
            message=f"invalid timestamp: {timestamp!r}",
        ) from exc


def to_local(timestamp: str, tz: tzinfo) -> datetime:
    """Express ``timestamp`` as wall-clock time in ``tz``.

    Offset-aware timestamps are converted; naive ones are taken to already be
    local to ``tz``.
    """
    moment = parse_instant(timestamp)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def local_date(timestamp: str, tz: tzinfo) -> date:
    return to_local(timestamp, tz).date()


def _seconds_since_midnight(moment: datetime) -> int:
    return moment.hour * 3600 + moment.minute * 60 + moment.second


def is_friday_night(timestamp: str, tz: tzinfo) -> bool:
    """True for Friday from 17:00 through Saturday before 04:00, local time."""
    local = to_local(timestamp, tz)
    seconds = _seconds_since_midnight(local)
    weekday = local.weekday()
    if weekday == _FRIDAY:
        return seconds >= FRIDAY_NIGHT_START_SECONDS
    if weekday == _SATURDAY:
        return seconds < FRIDAY_NIGHT_END_SECONDS
    return False


__all__ = [
    "FRIDAY_NIGHT_END_SECONDS",
    "FRIDAY_NIGHT_START_SECONDS",
    "is_friday_night",
    "local_date",
    "parse_instant",
    "resolve_timezone",
    "to_local",
]
