"""Shared FastAPI dependencies for API routers."""

from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from services.booking_service import BookingService


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Booking service bound to the request's database session."""
    return BookingService(db)
