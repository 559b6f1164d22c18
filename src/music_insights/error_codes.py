from __future__ import annotations

from platform_core.errors import ErrorCodeBase


class MusicInsightsErrorCode(ErrorCodeBase):
    """Domain-specific error codes for listening statistics."""

    MALFORMED_EVENT = "MALFORMED_EVENT"
    UNKNOWN_QUESTION = "UNKNOWN_QUESTION"
    INVALID_TIMEZONE = "INVALID_TIMEZONE"
    INVALID_CATALOG = "INVALID_CATALOG"


__all__ = ["MusicInsightsErrorCode"]
