"""Console logger for startup messages and fatal errors."""

import logging
from typing import IO, Optional

from pn_main.logger.structured_logger import StdStreamHandler, StructuredLogger


class ConsoleLogger(StructuredLogger):
    """Human-readable logger writing to stderr."""

    def __init__(self, name: str = "pn-main", level: int = logging.INFO) -> None:
        super().__init__(name=name, level=level, json_format=False)

    def _build_handler(self, stream: Optional[IO[str]]) -> logging.StreamHandler:
        return StdStreamHandler("stderr")
