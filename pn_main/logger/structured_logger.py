"""Structured logger built on the stdlib logging module.

Each StructuredLogger owns a private logging.Logger that is not registered
with the logging manager, so creating one has no process-wide side effects.
Records are emitted either as one JSON object per line or as a single
human-readable text line.

Hardening:
- values of secret-looking keys are replaced with "[REDACTED]"
- oversized string values are truncated with a "...[truncated]" suffix
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

from pn_main.logger.base import Logger

REDACTED = "[REDACTED]"
TRUNCATED_SUFFIX = "...[truncated]"
MAX_FIELD_LENGTH = 2048

_SECRET_KEY_MARKERS = ("token", "secret", "password", "api_key", "apikey", "authorization")

# Attribute on the LogRecord that carries the structured fields
_FIELDS_ATTR = "fields"


def _is_secret_key(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in _SECRET_KEY_MARKERS)


def sanitize_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Redact secret-looking keys and truncate oversized strings."""
    clean: dict[str, Any] = {}
    for key, value in fields.items():
        if _is_secret_key(key):
            clean[key] = REDACTED
        elif isinstance(value, str) and len(value) > MAX_FIELD_LENGTH:
            clean[key] = value[:MAX_FIELD_LENGTH] + TRUNCATED_SUFFIX
        else:
            clean[key] = value
    return clean


def _record_time(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds")


class JsonFormatter(logging.Formatter):
    """Format a record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname.lower(),
            "msg": record.getMessage(),
            "time": _record_time(record),
            "logger": record.name,
        }
        fields = getattr(record, _FIELDS_ATTR, None) or {}
        for key, value in fields.items():
            # Reserved keys win; a clashing field is kept under a prefixed name
            payload[f"fields.{key}" if key in payload else key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        # default=str keeps URLs, paths and other objects loggable
        return json.dumps(payload, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Format a record as `time LEVEL name message key=value ...`."""

    def format(self, record: logging.LogRecord) -> str:
        line = f"{_record_time(record)} {record.levelname} {record.name} {record.getMessage()}"
        fields = getattr(record, _FIELDS_ATTR, None) or {}
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in fields.items())
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class StdStreamHandler(logging.StreamHandler):
    """StreamHandler bound to sys.stdout or sys.stderr as they are at emit time."""

    def __init__(self, stream_name: str = "stdout") -> None:
        logging.Handler.__init__(self)
        self.stream_name = stream_name

    @property
    def stream(self) -> IO[str]:  # type: ignore[override]
        return getattr(sys, self.stream_name)

    @stream.setter
    def stream(self, value: IO[str]) -> None:
        if value is sys.stdout:
            self.stream_name = "stdout"
        elif value is sys.stderr:
            self.stream_name = "stderr"
        else:
            raise ValueError("StdStreamHandler only writes to sys.stdout or sys.stderr")


class StructuredLogger(Logger):
    """Logger writing structured records to a stream (stdout by default)."""

    def __init__(
        self,
        name: str = "pn-main",
        level: int = logging.INFO,
        json_format: bool = True,
        stream: IO[str] | None = None,
    ) -> None:
        self.name = name
        self.json_format = json_format
        self._logger = logging.Logger(name, level)
        self._handler = self._build_handler(stream)
        self._handler.setFormatter(JsonFormatter() if json_format else TextFormatter())
        self._logger.addHandler(self._handler)

    def _build_handler(self, stream: IO[str] | None) -> logging.StreamHandler:
        if stream is None:
            return StdStreamHandler("stdout")
        return logging.StreamHandler(stream)

    @property
    def level(self) -> int:
        return self._logger.level

    def set_level(self, level: int) -> None:
        self._logger.setLevel(level)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, message, extra={_FIELDS_ATTR: sanitize_fields(fields)})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)

    def flush(self) -> None:
        self._handler.flush()

    def close(self) -> None:
        """Flush and detach the handler. The underlying stream is left open."""
        self._handler.flush()
        self._logger.removeHandler(self._handler)
        self._logger.addHandler(logging.NullHandler())
