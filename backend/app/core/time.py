"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC time; used as the created_at default on every model."""
    return datetime.now(UTC)
