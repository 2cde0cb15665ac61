"""Timestamp helpers shared by services."""

from datetime import UTC, datetime, timedelta


def as_utc(value: datetime) -> datetime:
    """Treat a naive timestamp as UTC."""
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


def next_timestamp(previous: datetime) -> datetime:
    """Return now, nudged past the previous timestamp so it strictly increases."""
    return max(datetime.now(tz=UTC), as_utc(previous) + timedelta(microseconds=1))
