"""
Datetime utilities for consistent timezone handling across the application.

All datetimes handled by the application are timezone-aware. Values are
persisted in UTC; hour slots and user-facing text use the configured
business timezone (BUSINESS_TIMEZONE, default UTC).
"""

import logging
from datetime import datetime, timezone, tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from core.config import BUSINESS_TIMEZONE

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_business_timezone(name: str = BUSINESS_TIMEZONE) -> tzinfo:
    """
    Resolve an IANA timezone name.

    "UTC" maps to the built-in timezone.utc so no tz database is needed
    for the default configuration.
    """
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure a datetime is timezone-aware and expressed in UTC.

    Naive values are treated as UTC. SQLite hands back naive datetimes for
    TIMESTAMP(timezone=True) columns, and everything is stored as UTC.

    Args:
        dt: Datetime to normalise

    Returns:
        UTC datetime, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_business_timezone(dt: datetime) -> datetime:
    """Convert a datetime to the business timezone (naive values are UTC)."""
    result = ensure_utc(dt)
    if result is None:
        raise ValueError("Cannot convert None datetime")
    return result.astimezone(get_business_timezone())


def parse_iso_datetime(value: str | datetime) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    Handles:
    - ISO format with offset (e.g., "2024-01-10T14:30:00+02:00")
    - ISO format with Z (UTC) (e.g., "2024-01-10T12:30:00Z")
    - ISO format without offset (interpreted in the business timezone)

    Raises:
        ValueError: If the value is not a parseable timestamp
    """
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
        except ValueError as e:
            raise ValueError(f"Invalid datetime string format: {value}") from e

    if dt.tzinfo is None:
        return dt.replace(tzinfo=get_business_timezone())
    return dt


def start_of_hour(dt: datetime) -> datetime:
    """
    Truncate a datetime to the start of its clock hour in the business timezone.

    The hour boundary is taken in the business timezone so that zones with
    a non-whole-hour UTC offset still get wall-clock slots. The result is
    returned in UTC.
    """
    local = to_business_timezone(dt)
    truncated = local.replace(minute=0, second=0, microsecond=0)
    return truncated.astimezone(timezone.utc)
