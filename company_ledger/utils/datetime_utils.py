"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in company_ledger.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- now_iso(): Returns ISO 8601 string
- parse_iso(): Safely parse ISO 8601 string to datetime
- to_iso(): Convert datetime object to ISO 8601 string
- ensure_aware(): Attach the application timezone to naive datetimes
- previous_calendar_month_range(): First/last instant of the previous calendar month
- rolling_window(): [now - days, now]
"""
import logging
import zoneinfo
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional, Tuple

from company_ledger.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def ensure_aware(dt: datetime) -> datetime:
    """Return dt unchanged if timezone-aware, otherwise assume application timezone."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=_get_app_timezone())
    return dt


def now_iso() -> str:
    """
    Get current datetime as ISO 8601 string with application-configured timezone.

    Returns:
        ISO 8601 formatted string (e.g., "2025-12-24T10:30:00Z")
    """
    return to_iso(now())


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    Handles both timezone-aware and naive strings.
    If string is naive, assumes application timezone.

    Args:
        dt_str: ISO 8601 string (e.g., "2025-12-24T10:30:00Z" or "2025-12-24T10:30:00+05:30")

    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str or not isinstance(dt_str, str):
        return None

    # Replace 'Z' with '+00:00' for parsing
    normalized = dt_str.strip().replace("Z", "+00:00")
    try:
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return None

    return ensure_aware(dt)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string with millisecond precision.
    If datetime is naive, assumes application timezone.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None

    dt = ensure_aware(dt)
    formatted = dt.isoformat(timespec="milliseconds")
    # Format with 'Z' if UTC
    if dt.utcoffset() == timedelta(0):
        return formatted.replace("+00:00", "Z")
    return formatted


def previous_calendar_month_range(
    reference: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """
    Get the previous calendar month relative to reference.

    Returns:
        (first instant of the previous month, 23:59:59.999 of its last day)
    """
    reference = ensure_aware(reference) if reference else now()
    current_month_start = reference.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    start = (current_month_start - timedelta(days=1)).replace(day=1)
    end = current_month_start - timedelta(milliseconds=1)
    return start, end


def rolling_window(
    days: int,
    reference: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """Get the window [reference - days, reference]."""
    end = ensure_aware(reference) if reference else now()
    return end - timedelta(days=days), end
