from __future__ import annotations

import logging
import os
import socket
import sys
import time
from types import TracebackType
from typing import Literal, Protocol, TextIO, TypedDict

from platform_core.json_utils import JSONValue, dump_json_str

LogFormat = Literal["json", "text"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LogRecordValue = (
    JSONValue
    | tuple[
        type[BaseException] | BaseException | None,
        BaseException | None,
        TracebackType | None,
    ]
    | tuple[str | int | float | bool | None, ...]
)

# Structured fields emitted by the domain packages. Any of these present on a
# record is copied into the JSON payload.
STRUCTURED_FIELDS: tuple[str, ...] = (
    "user_id",
    "question_id",
    "error_code",
    "row_count",
)


class _LogRecordMapping(Protocol):
    """Minimal mapping interface for LogRecord.__dict__."""

    def __contains__(self, key: str) -> bool: ...

    def __getitem__(self, key: str) -> _LogRecordValue: ...


class _MissingValue:
    """Sentinel for absent or invalid LogRecord attributes."""

    __slots__ = ()


_MISSING = _MissingValue()


def _get_json_record_value(
    record: logging.LogRecord, field_name: str
) -> JSONValue | _MissingValue:
    """Fetch a record attribute and validate it is JSON-compatible."""
    record_mapping: _LogRecordMapping = record.__dict__
    if field_name not in record_mapping:
        return _MISSING
    raw_value = record_mapping[field_name]
    if isinstance(raw_value, (str, int, float, bool)) or raw_value is None:
        return raw_value
    return _MISSING


class JsonFormatter(logging.Formatter):
    """JSON formatter producing one object per record.

    Payload keys:
    - timestamp (UTC, ISO8601), level, logger, message
    - static fields (service, instance_id)
    - configured extra fields and STRUCTURED_FIELDS found on the record
    - exc_info when present
    """

    def __init__(
        self,
        *,
        static_fields: dict[str, str],
        extra_field_names: list[str],
    ) -> None:
        super().__init__()
        self._static = static_fields
        self._extra_fields = extra_field_names

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, JSONValue] = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in self._static:
            payload[key] = self._static[key]

        for field_name in (*self._extra_fields, *STRUCTURED_FIELDS):
            if field_name in payload:
                continue
            field_value = _get_json_record_value(record, field_name)
            if isinstance(field_value, _MissingValue):
                continue
            payload[field_name] = field_value

        if record.exc_info is not None:
            payload["exc_info"] = self.formatException(record.exc_info)

        return dump_json_str(payload, compact=False)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter for development/debugging.

    Format: [timestamp] [LEVEL] [logger] [extra_fields] message
    """

    def __init__(self, *, extra_fields: list[str]) -> None:
        super().__init__()
        self._extra_fields = extra_fields

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        parts: list[str] = [
            f"[{timestamp}]",
            f"[{record.levelname}]",
            f"[{record.name}]",
        ]

        for field_name in self._extra_fields:
            field_value = _get_json_record_value(record, field_name)
            if isinstance(field_value, _MissingValue):
                continue
            parts.append(f"{field_name}={field_value}")

        parts.append(record.getMessage())
        line = " ".join(parts)

        if record.exc_info is not None:
            line = line + "\n" + self.formatException(record.exc_info)

        return line


def _compute_instance_id() -> str:
    """Generate a stable instance ID from hostname and PID."""
    host = socket.gethostname().split(".")[0]
    return f"{host}-{os.getpid()}"


_LEVELS: dict[LogLevel, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(
    *,
    level: LogLevel,
    format_mode: LogFormat,
    service_name: str,
    instance_id: str | None,
    extra_fields: list[str] | None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the root logger with JSON or text formatting.

    Existing root handlers are cleared so repeated calls leave exactly one handler.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_mode: Output format ("json" for production, "text" for dev)
        service_name: Service name to include in all JSON logs
        instance_id: Instance ID (auto-generated if None)
        extra_fields: Extra field names to extract from records (empty list if None)
        stream: Destination stream (stdout if None)

    Returns:
        Configured root logger

    Example:
        >>> from platform_core.logging import setup_logging
        >>> logger = setup_logging(
        ...     level="INFO",
        ...     format_mode="json",
        ...     service_name="music-insights",
        ...     instance_id=None,
        ...     extra_fields=None,
        ... )
        >>> logger.info("catalog loaded")
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_LEVELS[level])

    computed_instance_id = instance_id if instance_id is not None else _compute_instance_id()
    static_fields: dict[str, str] = {
        "service": service_name,
        "instance_id": computed_instance_id,
    }
    extra_field_names = extra_fields if extra_fields is not None else []

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(logging.DEBUG)
    if format_mode == "json":
        handler.setFormatter(
            JsonFormatter(static_fields=static_fields, extra_field_names=extra_field_names)
        )
    else:
        handler.setFormatter(TextFormatter(extra_fields=extra_field_names))
    root.addHandler(handler)

    return root


# Expose stdlib logging module for typed test utilities.
stdlib_logging = logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance by name.

    Example:
        >>> from platform_core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Processing started")
    """
    return logging.getLogger(name)


class LogEventFields(TypedDict, total=False):
    """Optional structured fields for log events (pass as ``extra=``)."""

    user_id: str
    question_id: str
    error_code: str
    row_count: int


__all__ = [
    "STRUCTURED_FIELDS",
    "JsonFormatter",
    "LogEventFields",
    "LogFormat",
    "LogLevel",
    "TextFormatter",
    "get_logger",
    "setup_logging",
    "stdlib_logging",
]
