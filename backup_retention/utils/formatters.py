"""Formatting utilities for retention logs and summaries."""

import re
from datetime import datetime, timezone


# Date, "T", full time, optional fraction, optional offset
RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})?",
    re.ASCII
)


def format_file_size(size_bytes: int) -> str:
    """Format file size in human readable format.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Human readable size string.
    """
    if size_bytes < 1024:
        return f"{size_bytes}B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes // 1024}KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes // (1024 * 1024)}MB"
    else:
        return f"{size_bytes // (1024 * 1024 * 1024)}GB"


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp.

    The value must have a date, a ``T`` separator and a full time. A
    missing offset is taken as UTC so every parsed value can be compared
    against a timezone-aware clock.

    Args:
        text: Timestamp such as ``2024-05-01T10:00:00Z``.

    Returns:
        Timezone-aware datetime.

    Raises:
        ValueError: If the text is not a valid timestamp.
    """
    if not isinstance(text, str):
        raise ValueError(f"Timestamp must be a string, got {type(text).__name__}")

    if not RFC3339_PATTERN.fullmatch(text):
        raise ValueError(f"Invalid RFC 3339 timestamp: {text!r}")

    value = text[:10] + 'T' + text[11:]
    if value.endswith(('Z', 'z')):
        value = value[:-1] + '+00:00'

    dt = _fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _fromisoformat(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass

    # Older interpreters only accept 3 or 6 fractional digits
    head, sep, rest = value.partition('.')
    if not sep:
        raise ValueError(f"Invalid RFC 3339 timestamp: {value}")

    digits = ''
    while rest and rest[0].isdigit():
        digits += rest[0]
        rest = rest[1:]
    if not digits:
        raise ValueError(f"Invalid RFC 3339 timestamp: {value}")

    return datetime.fromisoformat(f"{head}.{digits[:6].ljust(6, '0')}{rest}")


def format_rfc3339(dt: datetime) -> str:
    """Format a datetime as RFC 3339 with second precision.

    UTC is written as ``Z``, any other offset as ``+HH:MM``. Naive values
    are treated as UTC.

    Args:
        dt: Datetime to format.

    Returns:
        Timestamp string.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    base = dt.strftime('%Y-%m-%dT%H:%M:%S')
    offset = dt.utcoffset()
    total_minutes = int(offset.total_seconds() // 60)
    if total_minutes == 0:
        return base + 'Z'

    sign = '+' if total_minutes > 0 else '-'
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{base}{sign}{hours:02d}:{minutes:02d}"
