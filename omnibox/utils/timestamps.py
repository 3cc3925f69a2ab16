"""Canonical timestamp handling.

Every timestamp stored by the inbox is a UTC ISO-8601 string with
millisecond precision and a trailing ``Z`` (``2025-01-01T12:00:00.000Z``),
so lexicographic order equals chronological order.
"""

from datetime import datetime, timezone
from typing import Optional, Union

from ..errors import ValidationError


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime in canonical form.

    Naive datetimes are assumed to already be UTC.

    Args:
        value: Datetime to render

    Returns:
        Canonical timestamp string
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 string into an aware UTC datetime.

    Args:
        value: ISO-8601 string; a trailing ``Z`` is accepted

    Returns:
        Aware datetime in UTC

    Raises:
        ValidationError: If the value is not a valid ISO-8601 timestamp
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Invalid timestamp: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def normalize_timestamp(value: Optional[Union[str, datetime]]) -> str:
    """
    Normalize an incoming timestamp to canonical form.

    Args:
        value: ISO string, datetime, or None for "now"

    Returns:
        Canonical timestamp string
    """
    if value is None:
        return format_timestamp(utc_now())
    if isinstance(value, datetime):
        return format_timestamp(value)
    return format_timestamp(parse_timestamp(value))
