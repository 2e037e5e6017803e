"""ISO-8601 date handling shared by the journal models and the client."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator

# Tried in order: with fractional seconds, then without.
ISO8601_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (e.g. dates typed on the command line)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_iso8601(value: str) -> datetime:
    """Parse an internet date-time, with or without fractional seconds.

    A timezone designator (``Z`` or ``+HH:MM``) is required.

    Raises:
        ValueError: If the string matches neither format.
    """
    for fmt in ISO8601_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(f"Cannot decode date string {value!r}")


def _coerce_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str):
        return parse_iso8601(value)
    raise ValueError(f"Expected an ISO-8601 date string, got {type(value).__name__}")


# Datetime field that only accepts ISO-8601 strings or datetime objects. Naive
# datetimes are taken as UTC so every stored value compares with utc_now().
JournalDate = Annotated[datetime, BeforeValidator(_coerce_date)]
