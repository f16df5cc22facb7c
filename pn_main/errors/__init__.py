"""Error handling utilities for PN-MAIN."""

from pn_main.errors.mapper import (
    error_to_web_response,
    get_error_code,
    get_http_status,
    get_recovery_strategy,
)

__all__ = [
    "error_to_web_response",
    "get_error_code",
    "get_http_status",
    "get_recovery_strategy",
]
