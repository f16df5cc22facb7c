"""Logger module for PN-MAIN

Usage:
    from pn_main.logger import Logger, StructuredLogger

    # Console logging before the log file is open
    from pn_main.logger import session_logger
    session_logger.info("Application started")

    # JSON-lines logging to the run's log file
    with open_log_context(config) as log_ctx:
        log_ctx.logger.debug("Request handled", path="/hello")
"""

import logging

from .base import Logger
from .structured_logger import StructuredLogger
from .console_logger import ConsoleLogger
from .file_logger import LogFileContext, log_file_path, log_level_for, open_log_context

# Shared logger instance for startup and fatal messages on the console
session_logger: Logger = ConsoleLogger(level=logging.DEBUG)

__all__ = [
    "Logger",
    "StructuredLogger",
    "ConsoleLogger",
    "LogFileContext",
    "log_file_path",
    "log_level_for",
    "open_log_context",
    "session_logger",
]
