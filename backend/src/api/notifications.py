# pyright: reportMissingTypeStubs=false
"""
Notification endpoints.

Notifications are append-only; this router only reads them.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_booking_service
from api.responses import NotificationResponse, notification_response
from auth.dependencies import get_current_user_id
from services.booking_service import BookingService

router = APIRouter()


@router.get("/notifications", summary="List my notifications", response_model=List[NotificationResponse])
async def list_notifications(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Most recent notifications addressed to the caller, newest first."""
    return [notification_response(notification) for notification in service.list_notifications(user_id)]
