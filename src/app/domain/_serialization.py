"""Helpers de (de)serialização de datetimes para persistência."""

from __future__ import annotations

from datetime import UTC, datetime


def dump_datetime(value: datetime) -> str:
    """Serializa datetime em ISO-8601 (sempre com timezone)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.isoformat()


def load_datetime(value: str | datetime | None) -> datetime:
    """Deserializa datetime ISO-8601; ausente vira o instante atual."""
    if value is None:
        return datetime.now(UTC)
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
