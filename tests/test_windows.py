from __future__ import annotations

from datetime import date

import pytest
from platform_core.errors import AppError

from music_insights.analytics.core.windows import (
    is_friday_night,
    local_date,
    parse_instant,
    resolve_timezone,
    to_local,
)
from music_insights.error_codes import MusicInsightsErrorCode

UTC = resolve_timezone("UTC")
NEW_YORK = resolve_timezone("America/New_York")


@pytest.mark.parametrize(
    ("timestamp", "expected"),
    [
        ("2024-08-02T17:00:00", True),  # Fri 17:00:00
        ("2024-08-02T16:59:59", False),  # Fri 16:59:59
        ("2024-08-02T23:59:59", True),
        ("2024-08-03T00:00:00", True),  # Sat midnight
        ("2024-08-03T03:59:59", True),  # Sat 03:59:59
        ("2024-08-03T04:00:00", False),  # Sat 04:00:00
        ("2024-08-01T23:59:59", False),  # Thu 23:59:59
        ("2024-08-03T18:00:00", False),  # Sat evening
        ("2024-08-04T02:00:00", False),  # Sun early morning
    ],
)
def test_is_friday_night_boundaries(timestamp: str, expected: bool) -> None:
    assert is_friday_night(timestamp, UTC) is expected


def test_is_friday_night_uses_local_time_of_zone() -> None:
    # Fri 19:00 UTC is Fri 15:00 in New York
    assert is_friday_night("2024-08-02T19:00:00Z", UTC) is True
    assert is_friday_night("2024-08-02T19:00:00Z", NEW_YORK) is False
    # Sat 06:00 UTC is Sat 02:00 in New York
    assert is_friday_night("2024-08-03T06:00:00Z", UTC) is False
    assert is_friday_night("2024-08-03T06:00:00Z", NEW_YORK) is True


def test_naive_timestamp_is_wall_clock_in_zone() -> None:
    local = to_local("2024-08-02T17:00:00", NEW_YORK)
    assert (local.hour, local.minute) == (17, 0)
    assert local.tzinfo is NEW_YORK
    assert is_friday_night("2024-08-02T17:00:00", NEW_YORK) is True


def test_local_date_crosses_midnight_by_zone() -> None:
    assert local_date("2024-08-03T02:00:00Z", UTC) == date(2024, 8, 3)
    assert local_date("2024-08-03T02:00:00Z", NEW_YORK) == date(2024, 8, 2)


def test_parse_instant_accepts_z_and_offsets() -> None:
    assert parse_instant("2024-08-02T17:00:00Z") == parse_instant("2024-08-02T18:00:00+01:00")


def test_parse_instant_invalid_raises_malformed_event() -> None:
    with pytest.raises(AppError) as excinfo:
        parse_instant("last friday")
    err: AppError[MusicInsightsErrorCode] = excinfo.value
    assert err.code == MusicInsightsErrorCode.MALFORMED_EVENT


@pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "America", "../UTC", ""])
def test_resolve_timezone_invalid_name(name: str) -> None:
    with pytest.raises(AppError) as excinfo:
        resolve_timezone(name)
    err: AppError[MusicInsightsErrorCode] = excinfo.value
    assert err.code == MusicInsightsErrorCode.INVALID_TIMEZONE
