"""
Services package for shared business logic.

This package contains service classes that encapsulate business logic
shared across multiple API endpoints.
"""

from .booking_service import BookingService
from .notification_formatter import NotificationFormatter
from .jwt_service import JWTService, jwt_service

__all__ = [
    "BookingService",
    "NotificationFormatter",
    "JWTService",
    "jwt_service",
]
