"""Application constants and configuration values."""

from core.config import FRONTEND_URL

# Database field limits
MAX_NOTIFICATION_LENGTH = 500
MAX_ID_VALUE = 2**31 - 1  # Upper bound of an INTEGER primary key

# Database connection settings
DB_POOL_RECYCLE_SECONDS = 300  # 5 minutes

# CORS origins for development and production
_CORS_ORIGINS_RAW = [
    "http://localhost:5173",      # React dev server (Vite)
    FRONTEND_URL,
]

# Filter out None values and empty strings to avoid CORS errors
CORS_ORIGINS = [origin for origin in _CORS_ORIGINS_RAW if origin and origin.strip()]

# Appointments
APPOINTMENTS_PAGE_SIZE = 20
CANCELLATION_CUTOFF_HOURS = 2  # Cancellation must happen strictly before date - 2h

# Notifications
NOTIFICATIONS_LIST_LIMIT = 20
