# pyright: reportMissingTypeStubs=false
"""
Provider directory endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_booking_service
from api.responses import ProviderResponse, provider_response
from auth.dependencies import get_current_user_id
from services.booking_service import BookingService

router = APIRouter()


@router.get("/providers", summary="List providers", response_model=List[ProviderResponse])
async def list_providers(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """List every user that can be booked, ordered by name."""
    return [provider_response(provider) for provider in service.list_providers()]
