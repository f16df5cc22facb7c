"""HTTP surface of PN-MAIN."""

from pn_main.web_server.payload import ECHO_MESSAGE, EchoPayload, format_utc_timestamp, parse_utc_timestamp
from pn_main.web_server.web_server import NOT_FOUND_BODY, PnMainWebServer

__all__ = [
    "ECHO_MESSAGE",
    "EchoPayload",
    "NOT_FOUND_BODY",
    "PnMainWebServer",
    "format_utc_timestamp",
    "parse_utc_timestamp",
]
