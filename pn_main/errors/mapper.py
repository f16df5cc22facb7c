"""Error response mapping for the web interface.

Converts structured PnMainError exceptions into standardized error responses
with machine-readable error codes, HTTP status codes and recovery strategies.
"""

from typing import Any, Dict

from pn_main.exceptions import (
    PnMainError,
    ConfigurationError,
    ResourceNotFoundError,
    SerializationError,
    StaticFileAccessError,
)


# Recovery strategy templates keyed by error code
RECOVERY_STRATEGIES: Dict[str, str] = {
    # Static page errors
    "STATIC_FILE_NOT_FOUND": "The page file is missing on the server. Check the --home-html path the server was started with.",
    "STATIC_FILE_UNREADABLE": "The page file exists but cannot be read. Check that it is a regular file with read permission.",
    # Echo errors
    "RESPONSE_ENCODING_FAILED": "The response could not be encoded as JSON. Try again with a plain path segment.",
    # Startup errors
    "LOG_FILE_OPEN_FAILED": "Check that the log directory exists or can be created and is writable.",
}


def get_error_code(error: PnMainError) -> str:
    """Extract error code from exception class name.

    Converts class names like ResourceNotFoundError to RESOURCE_NOT_FOUND.
    """
    name = error.__class__.__name__
    # Remove 'Error' suffix
    if name.endswith("Error"):
        name = name[:-5]
    # Convert CamelCase to UPPER_SNAKE_CASE
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.upper())
    return "".join(result)


def get_recovery_strategy(error: PnMainError) -> str:
    """Get recovery strategy for an error.

    Looks up the error's own code first, then falls back to a generic
    strategy based on the exception type.
    """
    if error.code in RECOVERY_STRATEGIES:
        return RECOVERY_STRATEGIES[error.code]

    if isinstance(error, ResourceNotFoundError):
        return "Verify the request path and check that the resource exists."
    elif isinstance(error, (SerializationError, StaticFileAccessError)):
        return "This is a server-side failure. Try again later."
    elif isinstance(error, ConfigurationError):
        return "Check server configuration. Contact administrator if issue persists."

    return "Review the error message and try again. Contact support if the issue persists."


def get_http_status(error: PnMainError) -> int:
    """Map an error to the HTTP status code returned to the client."""
    if isinstance(error, ResourceNotFoundError):
        return 404
    return 500


def error_to_web_response(error: PnMainError) -> Dict[str, Any]:
    """Convert error to web API response format.

    Args:
        error: The exception to convert

    Returns:
        Dictionary suitable for a JSONResponse body
    """
    return {
        "error": {
            "code": get_error_code(error),
            # Same value the server logs as error_code
            "reason": error.code,
            "message": error.message,
            "details": error.details,
            "recovery": get_recovery_strategy(error),
        }
    }
