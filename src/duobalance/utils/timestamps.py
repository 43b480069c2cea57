"""Timestamp helpers.

Stores keep creation and settlement times as integer epoch milliseconds.
"""

from datetime import datetime, timedelta, UTC

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def now() -> datetime:
    """Current UTC time truncated to whole milliseconds."""
    current = datetime.now(UTC)
    return current.replace(microsecond=current.microsecond // 1000 * 1000)


def to_millis(value: datetime) -> int:
    """Convert a datetime to epoch milliseconds."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - EPOCH) // timedelta(milliseconds=1)


def from_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=int(millis))
