"""Logger interface shared by every PN-MAIN component.

Components accept a Logger rather than reaching for a global, so tests
can hand in a logger that writes to memory.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Structured logging interface.

    Keyword arguments passed to any method are recorded as structured
    fields alongside the message.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        ...

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        ...
