"""Echo response payload and its UTC timestamp format.

Timestamps look like `2024-01-01 00:00:00.25 +0000 UTC`: the fractional
second has trailing zeros removed and is dropped entirely when zero.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from datetime import datetime, timezone

ECHO_MESSAGE = "Hey, you found an API Easter Egg!"

_UTC_SUFFIX = " +0000 UTC"
_TIMESTAMP_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d{1,9}))? \+0000 UTC$"
)


def format_utc_timestamp(moment: datetime) -> str:
    """Render an aware datetime in UTC."""
    if moment.tzinfo is None:
        raise ValueError("timestamp must be timezone-aware")
    moment = moment.astimezone(timezone.utc)
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    return text + _UTC_SUFFIX


def parse_utc_timestamp(text: str) -> datetime:
    """Parse a timestamp produced by format_utc_timestamp.

    Accepts up to nine fractional digits; precision beyond microseconds
    is dropped.
    """
    match = _TIMESTAMP_RE.match(text)
    if not match:
        raise ValueError(f"not a UTC timestamp: {text!r}")

    moment = datetime.strptime(match.group("base"), "%Y-%m-%d %H:%M:%S")
    frac = match.group("frac")
    if frac:
        moment = moment.replace(microsecond=int(frac[:6].ljust(6, "0")))
    return moment.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class EchoPayload:
    """Body returned by the echo route."""

    msg: str
    param: str
    time: str

    @classmethod
    def build(cls, param: str, now: datetime | None = None) -> EchoPayload:
        moment = now if now is not None else datetime.now(timezone.utc)
        return cls(msg=ECHO_MESSAGE, param=param, time=format_utc_timestamp(moment))

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
