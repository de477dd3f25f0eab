"""
Repositories wrapping database access for the booking engine.

Each repository is bound to a SQLAlchemy session. Repositories flush so
generated ids are available, but never commit: the caller owns the unit
of work.
"""

from .user_repository import UserRepository
from .appointment_repository import AppointmentRepository
from .notification_repository import NotificationRepository

__all__ = [
    "UserRepository",
    "AppointmentRepository",
    "NotificationRepository",
]
