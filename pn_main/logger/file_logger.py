"""File-backed structured logging for a server run.

The log file is opened once at startup and held open for the whole run so
request logging is never interrupted. LogFileContext is the scoped owner of
that file: it is released only when the surrounding `with` block exits.

Usage:
    with open_log_context(config) as log_ctx:
        server = PnMainWebServer(config, logger=log_ctx.logger)
        ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from pn_main.config import ServerConfig
from pn_main.exceptions import ConfigurationError
from pn_main.logger.structured_logger import StructuredLogger


def log_file_path(config: ServerConfig) -> Path:
    """Return `{log_dir}/{log_stamp}.log`."""
    return Path(config.log_dir) / f"{config.log_stamp}.log"


def log_level_for(debug: bool) -> int:
    """Minimum severity recorded: everything in debug mode, errors otherwise."""
    return logging.DEBUG if debug else logging.ERROR


class LogFileContext:
    """Owns the open log file and the JSON logger writing to it."""

    def __init__(self, config: ServerConfig) -> None:
        self.config = config
        self.path = log_file_path(config)
        self._file: IO[str] | None = None
        self._logger: StructuredLogger | None = None

    @property
    def logger(self) -> StructuredLogger:
        if self._logger is None:
            raise RuntimeError("Log file is not open. Call open() or use the context manager.")
        return self._logger

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self) -> StructuredLogger:
        """Open (or create) the log file and configure the logger.

        Raises:
            ConfigurationError: if the log file cannot be opened.
        """
        if self._logger is not None:
            return self._logger

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Line buffered so every record reaches the file as soon as it is written
            self._file = open(self.path, "a", encoding="utf-8", buffering=1)
        except OSError as e:
            raise ConfigurationError(
                "LOG_FILE_OPEN_FAILED",
                f"Cannot open log file: {e}",
                details={"path": str(self.path), "error_type": type(e).__name__},
            ) from e

        self._logger = StructuredLogger(
            name=f"pn-main.{self.config.log_stamp}",
            level=log_level_for(self.config.debug),
            json_format=True,
            stream=self._file,
        )
        self._logger.info("Logger initialized successfully.", path=str(self.path))
        return self._logger

    def close(self) -> None:
        """Flush the logger and close the log file."""
        if self._logger is not None:
            self._logger.close()
            self._logger = None
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> LogFileContext:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
        return None


def open_log_context(config: ServerConfig) -> LogFileContext:
    """Build a LogFileContext for *config*; the file opens on `with` entry."""
    return LogFileContext(config)
