"""Timestamp utilities for backend-provided dates."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

UTC = pytz.utc


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Backend emits naive timestamps in UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a backend timestamp string and return it in UTC.

    Returns None for empty or unparseable values. Handles RFC 3339 strings with
    nanosecond fractions as emitted by the backend.
    """
    if not value:
        return None
    try:
        dt = date_parser.isoparse(value)
    except ValueError:
        try:
            dt = date_parser.parse(value)
        except (ValueError, OverflowError):
            return None
    return to_utc(dt)
