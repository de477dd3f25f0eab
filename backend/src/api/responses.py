"""
Shared response models for API endpoints.

This module contains Pydantic response models that are shared across
multiple API endpoints to ensure consistency and reduce duplication.
Datetimes are always returned timezone-aware in UTC.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from models import Appointment, File, Notification, User
from utils.datetime_utils import ensure_utc


class AvatarResponse(BaseModel):
    """Public reference to a user's avatar file."""
    id: int
    path: str
    url: str


class ProviderSummary(BaseModel):
    """Public provider profile embedded in appointment listings."""
    id: int
    name: str
    avatar: Optional[AvatarResponse] = None


class ProviderResponse(ProviderSummary):
    """Provider entry in the provider directory."""
    email: str


class AppointmentSummary(BaseModel):
    """Appointment entry in the requester's list."""
    id: int
    date: datetime
    past: bool
    cancelable: bool
    provider: ProviderSummary


class AppointmentResponse(BaseModel):
    """Full appointment record returned by create and cancel."""
    id: int
    requester_id: int
    provider_id: int
    date: datetime
    canceled_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class NotificationResponse(BaseModel):
    """Notification addressed to the caller."""
    id: int
    content: str
    read: bool
    created_at: datetime


def avatar_response(file: Optional[File]) -> Optional[AvatarResponse]:
    if file is None:
        return None
    return AvatarResponse(id=file.id, path=file.path, url=file.url)


def provider_summary(user: User) -> ProviderSummary:
    return ProviderSummary(id=user.id, name=user.name, avatar=avatar_response(user.avatar))


def provider_response(user: User) -> ProviderResponse:
    return ProviderResponse(id=user.id, name=user.name, email=user.email, avatar=avatar_response(user.avatar))


def appointment_summary(appointment: Appointment, now: datetime) -> AppointmentSummary:
    """Build a list entry, computing past/cancelable relative to `now`."""
    return AppointmentSummary(
        id=appointment.id,
        date=ensure_utc(appointment.date),
        past=appointment.is_past(now),
        cancelable=appointment.is_cancelable(now),
        provider=provider_summary(appointment.provider),
    )


def appointment_response(appointment: Appointment) -> AppointmentResponse:
    return AppointmentResponse(
        id=appointment.id,
        requester_id=appointment.requester_id,
        provider_id=appointment.provider_id,
        date=ensure_utc(appointment.date),
        canceled_at=ensure_utc(appointment.canceled_at),
        created_at=ensure_utc(appointment.created_at),
        updated_at=ensure_utc(appointment.updated_at),
    )


def notification_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=notification.id,
        content=notification.content,
        read=notification.read,
        created_at=ensure_utc(notification.created_at),
    )
