# Package initialization
# Import all models to ensure relationships are properly established
from .file import File
from .user import User
from .appointment import Appointment
from .notification import Notification

__all__ = [
    "File",
    "User",
    "Appointment",
    "Notification",
]
