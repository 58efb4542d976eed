from __future__ import annotations

import re
from datetime import datetime, timezone

# yyyy-MM-ddTHH:mm:ss followed by 'Z' or a +HH:MM / -HH:MM offset
_CANVAS_DATETIME_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:Z|[+-]\d{2}:\d{2})"
)


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_canvas_datetime(value: str) -> datetime:
    """
    Parse a Canvas due timestamp into a timezone-aware UTC datetime.
    Canvas typically returns UTC with 'Z'. Example: '2025-10-01T03:59:00Z'.
    Fractional seconds and naive timestamps are rejected.
    """
    if not value:
        raise ValueError("Empty datetime string")
    if not _CANVAS_DATETIME_RE.fullmatch(value):
        raise ValueError(f"Unrecognized datetime format: {value!r}")
    # Normalize trailing Z to +00:00 for fromisoformat
    normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
    return datetime.fromisoformat(normalized).astimezone(timezone.utc)


def is_past_due(due: datetime, now: datetime) -> bool:
    """True when `due` is strictly earlier than `now`."""
    return due < now
