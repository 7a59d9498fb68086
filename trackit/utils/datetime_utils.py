"""
Centralized DateTime Utilities
==============================

Timestamps are stored in MongoDB as BSON dates (UTC) and returned to
clients as ISO 8601 strings.

Functions:
- utc_now(): Current UTC time, timezone-aware
- ensure_utc(): Normalize naive/aware datetimes to UTC
- to_iso(): Convert datetime object to ISO 8601 string
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    BSON dates have millisecond precision, so microseconds are truncated to
    keep the in-memory value equal to what is read back.
    """
    now = datetime.now(dt_timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string in UTC with a 'Z' suffix.
    
    Args:
        dt: datetime object (timezone-aware or naive; naive is treated as UTC)
    
    Returns:
        ISO 8601 formatted string with millisecond precision
        (e.g., "2025-12-24T10:30:00.123Z"), or None if dt is None
    """
    if dt is None:
        return None
    
    utc_dt = ensure_utc(dt)
    return utc_dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
