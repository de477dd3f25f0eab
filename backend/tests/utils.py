"""
Test utilities for scheduling tests.
"""

from datetime import datetime, timezone
from typing import Callable, Dict

from services.jwt_service import JWTService


def create_jwt_token(user_id: int) -> str:
    """Create a JWT token for an authenticated user."""
    return JWTService.create_access_token(user_id)


def auth_headers(user_id: int) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_jwt_token(user_id)}"}


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def fixed_clock(now: datetime) -> Callable[[], datetime]:
    """Clock that always returns `now`."""
    return lambda: now
