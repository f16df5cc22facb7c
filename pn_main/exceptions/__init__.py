"""Custom exceptions for PN-MAIN.

Startup errors (ConfigurationError) are fatal and handled by the entry
point. Request errors are converted to HTTP responses by the web server.
"""

from pn_main.exceptions.base import (
    PnMainError,
    ConfigurationError,
    ResourceNotFoundError,
)
from pn_main.exceptions.web import (
    SerializationError,
    StaticFileAccessError,
)

__all__ = [
    "PnMainError",
    "ConfigurationError",
    "ResourceNotFoundError",
    "SerializationError",
    "StaticFileAccessError",
]
