"""
Shared field validators for request payloads.
"""

from datetime import datetime, timezone


def to_naive_utc(value: datetime) -> datetime:
    """Convert an offset-aware datetime to naive UTC; naive values pass through.

    Timestamps are stored without a zone, so an offset would otherwise be
    dropped and the stored wall-clock time would shift.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
