from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar


class ErrorCodeBase(str, Enum):
    """Base class for domain error codes.

    This is a string enum where each member is both an Enum and a str.
    To get the string value, use: code if isinstance(code, str) else str(code)
    """

    value: str


class ErrorCode(ErrorCodeBase):
    """Platform-wide error codes shared by every domain package.

    All codes are precise and identify a specific issue. Domain packages define
    their own ErrorCodeBase subclasses for anything more specific.
    """

    CONFIG_ERROR = "CONFIG_ERROR"  # configuration missing/invalid


ErrorCodeType = TypeVar("ErrorCodeType", bound=ErrorCodeBase)


class AppError(Exception, Generic[ErrorCodeType]):
    """Base application error with a structured error code.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message

    Example:
        >>> raise AppError(
        ...     code=ErrorCode.CONFIG_ERROR,
        ...     message="INSIGHTS__CATALOG_PATH is required",
        ... )
    """

    def __init__(self, code: ErrorCodeType, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def code_value(code: ErrorCodeBase) -> str:
    """Return the string value for any error code enum without exposing Enum repr.

    ErrorCodeBase(str, Enum) members are strings, so this gives
    "CONFIG_ERROR" rather than "ErrorCode.CONFIG_ERROR".
    """
    result: str = code
    return result


__all__ = [
    "AppError",
    "ErrorCode",
    "ErrorCodeBase",
    "code_value",
]
