"""Base exception classes for PN-MAIN.

Every error carries a machine-readable code, a human message and an
optional details dict so the web layer can render a structured response.
"""

from typing import Any, Dict, Optional


class PnMainError(Exception):
    """Base exception for all PN-MAIN errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} ({self.details})"
        return f"{self.code}: {self.message}"


class ConfigurationError(PnMainError):
    """Raised when the server cannot be configured (e.g. log file cannot be opened)."""

    pass


class ResourceNotFoundError(PnMainError):
    """Raised when a requested resource does not exist."""

    pass
