"""Request-scoped exceptions raised while building a response.

These never take the process down; the web server maps them to HTTP
error responses.
"""

from pn_main.exceptions.base import PnMainError


class SerializationError(PnMainError):
    """Raised when a response payload cannot be encoded."""

    pass


class StaticFileAccessError(PnMainError):
    """Raised when a static file exists but cannot be served (unreadable, not a file)."""

    pass
