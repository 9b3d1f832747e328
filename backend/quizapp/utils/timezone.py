"""
Timestamp helpers. Everything is stored as naive UTC.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current UTC time without tzinfo, the form the database columns hold."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_utc(dt: Optional[datetime]) -> Optional[str]:
    """ISO 8601 with an explicit UTC offset; naive values are taken as UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="microseconds")
