"""Helpers for reading Supabase rows."""

from datetime import UTC, datetime

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def parse_datetime(raw: object) -> datetime | None:
    """Parse an ISO timestamp, returning None for missing or malformed values.

    Naive timestamps are treated as UTC.
    """
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, str) and raw:
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def serialize_value(value: object) -> object:
    """Convert domain values into JSON-friendly column values."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, tuple):
        return list(value)
    return value
