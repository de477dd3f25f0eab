# pyright: reportMissingTypeStubs=false
"""
Appointment API endpoints.

Requesters list, book and cancel their own appointments. Rule violations
raised by BookingService are converted to JSON errors by main.py.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Path, Query
from pydantic import BaseModel

from api.dependencies import get_booking_service
from api.responses import (
    AppointmentResponse, AppointmentSummary, appointment_response, appointment_summary
)
from auth.dependencies import get_current_user_id
from core.constants import MAX_ID_VALUE
from services.booking_service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter()


class AppointmentCreateRequest(BaseModel):
    """
    Request model for booking an appointment.

    Fields are typed loosely on purpose: BookingService performs the schema
    check so every entry point reports the same validation error.
    """
    provider_id: Any = None
    date: Any = None


@router.get("/appointments", summary="List my appointments", response_model=List[AppointmentSummary])
async def list_appointments(
    page: int = Query(1, ge=1, le=MAX_ID_VALUE),
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """
    List the caller's active appointments ordered by date, 20 per page.
    """
    appointments = service.list_appointments(user_id, page)
    now = service.now()
    return [appointment_summary(appointment, now) for appointment in appointments]


@router.post("/appointments", summary="Book an appointment", response_model=AppointmentResponse)
async def create_appointment(
    request: AppointmentCreateRequest,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """
    Book the hour slot containing `date` with provider `provider_id`.

    The provider receives a notification about the booking.
    """
    appointment = service.create_appointment(user_id, request.provider_id, request.date)
    return appointment_response(appointment)


@router.delete("/appointments/{appointment_id}", summary="Cancel an appointment", response_model=AppointmentResponse)
async def cancel_appointment(
    appointment_id: int = Path(..., ge=1, le=MAX_ID_VALUE),
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """
    Cancel one of the caller's appointments, up to 2 hours before it starts.
    """
    appointment = service.cancel_appointment(user_id, appointment_id)
    return appointment_response(appointment)
