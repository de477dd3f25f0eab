"""
Utility modules for the scheduling backend.

This package contains shared utility functions used across the
application, currently the timezone-aware datetime helpers.
"""

from utils.datetime_utils import utc_now, ensure_utc, start_of_hour

__all__ = ['utc_now', 'ensure_utc', 'start_of_hour']
