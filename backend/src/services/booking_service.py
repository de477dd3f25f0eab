"""
Booking service: appointment rules for requesters and providers.

This module owns the decisions around booking and canceling hour slots:
- only providers can be booked, and never by themselves
- only hours that have not started yet can be booked
- a provider hour holds at most one active appointment
- requesters can cancel their own appointments up to 2 hours before

The service commits its own unit of work. Rule violations are raised as
BookingError subclasses and turned into HTTP responses by main.py.
"""

import logging
from datetime import datetime
from typing import Any, Callable, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.config import NOTIFICATION_LOCALE
from core.constants import APPOINTMENTS_PAGE_SIZE, MAX_ID_VALUE, NOTIFICATIONS_LIST_LIMIT
from core.exceptions import (
    AlreadyCanceledError,
    ForbiddenError,
    NotAProviderError,
    NotFoundError,
    PastDateError,
    SelfBookingError,
    SlotUnavailableError,
    TooLateToCancelError,
    ValidationError,
)
from models import Appointment, Notification, User
from repositories import AppointmentRepository, NotificationRepository, UserRepository
from services.notification_formatter import NotificationFormatter
from utils.datetime_utils import ensure_utc, parse_iso_datetime, start_of_hour, utc_now

logger = logging.getLogger(__name__)


def parse_provider_id(value: Any) -> int:
    """
    Coerce a provider id from a request payload.

    Integers and integral numeric strings are accepted. Booleans, floats with
    a fractional part and anything else are rejected, as are ids outside the
    range of the users.id column.

    Raises:
        ValidationError: If the value is missing, not an integer or out of range
    """
    if value is None or isinstance(value, bool):
        raise ValidationError()
    if isinstance(value, int):
        provider_id = value
    elif isinstance(value, float) and value.is_integer():
        provider_id = int(value)
    elif isinstance(value, str):
        try:
            provider_id = int(value.strip())
        except ValueError:
            raise ValidationError()
    else:
        raise ValidationError()

    if not 1 <= provider_id <= MAX_ID_VALUE:
        raise ValidationError()
    return provider_id


def parse_requested_date(value: Any) -> datetime:
    """
    Parse the requested appointment time from a request payload.

    Raises:
        ValidationError: If the value is missing or not an ISO-8601 timestamp
    """
    if value is None or not isinstance(value, (str, datetime)):
        raise ValidationError()
    if isinstance(value, str) and not value.strip():
        raise ValidationError()
    try:
        return parse_iso_datetime(value)
    except ValueError:
        raise ValidationError()


class BookingService:
    """
    Appointment booking rules over injected repositories.

    Args:
        db: Session that owns the unit of work (commit/rollback)
        users: User directory, defaults to a UserRepository over `db`
        appointments: Appointment store, defaults to an AppointmentRepository over `db`
        notifications: Notification sink, defaults to a NotificationRepository over `db`
        clock: Returns the current time
        formatter: Builds provider notification text
    """

    def __init__(
        self,
        db: Session,
        users: Optional[UserRepository] = None,
        appointments: Optional[AppointmentRepository] = None,
        notifications: Optional[NotificationRepository] = None,
        clock: Callable[[], datetime] = utc_now,
        formatter: Optional[NotificationFormatter] = None,
    ):
        self.db = db
        self.users = users or UserRepository(db)
        self.appointments = appointments or AppointmentRepository(db)
        self.notifications = notifications or NotificationRepository(db)
        self.clock = clock
        self.formatter = formatter or NotificationFormatter(NOTIFICATION_LOCALE)

    def now(self) -> datetime:
        """Current time from the injected clock, in UTC."""
        return ensure_utc(self.clock())  # type: ignore[return-value]

    def list_appointments(self, requester_id: int, page: int = 1) -> List[Appointment]:
        """
        List the requester's active appointments, earliest first.

        Args:
            requester_id: Authenticated user ID
            page: 1-based page number, APPOINTMENTS_PAGE_SIZE entries per page

        Returns:
            Appointments with provider (and avatar) loaded

        Raises:
            ValidationError: If page is not a positive integer
        """
        if isinstance(page, bool) or not isinstance(page, int) or not 1 <= page <= MAX_ID_VALUE:
            raise ValidationError()

        offset = (page - 1) * APPOINTMENTS_PAGE_SIZE
        return self.appointments.list_active_for_requester(requester_id, offset, APPOINTMENTS_PAGE_SIZE)

    def create_appointment(self, requester_id: int, provider_id: Any, raw_date: Any) -> Appointment:
        """
        Book a provider hour slot.

        Checks run in order and stop at the first failure. The slot is
        compared at hour granularity, but the stored date keeps the precision
        the client sent. A notification for the provider is written in the
        same transaction as the appointment.

        Args:
            requester_id: Authenticated user ID
            provider_id: Provider to book (int or integral string)
            raw_date: Requested time, ISO-8601 string or datetime

        Returns:
            The created appointment

        Raises:
            ValidationError: Missing or malformed provider_id/date
            SelfBookingError: provider_id is the requester
            NotAProviderError: provider_id is not a provider
            PastDateError: The requested hour has already started
            SlotUnavailableError: The provider hour is already booked
        """
        provider_id, requested_at = self._validate_create_payload(provider_id, raw_date)

        if provider_id == requester_id:
            raise SelfBookingError()

        provider = self.users.get_provider(provider_id)
        if not provider:
            raise NotAProviderError()

        hour_start = start_of_hour(requested_at)
        if hour_start < self.now():
            raise PastDateError()

        if self.appointments.find_active_in_slot(provider_id, hour_start):
            logger.info(f"Provider {provider_id} already booked at {hour_start.isoformat()}")
            raise SlotUnavailableError()

        requester = self.users.get_by_id(requester_id)
        if not requester:
            raise NotFoundError("User not found")

        content = self.formatter.new_appointment(requester.name, hour_start)

        try:
            self.notifications.append(provider_id, content)
            appointment = self.appointments.add(Appointment(
                requester_id=requester_id,
                provider_id=provider_id,
                date=ensure_utc(requested_at),
                slot_start=hour_start,
                canceled_at=None,
            ))
            self.db.commit()
        except IntegrityError as e:
            # Another booking took the slot between the check and the insert
            logger.warning(f"Appointment booking conflict for provider {provider_id} at {hour_start.isoformat()}: {e.orig}")
            self.db.rollback()
            raise SlotUnavailableError() from e

        logger.info(f"Created appointment {appointment.id} for user {requester_id} with provider {provider_id}")
        return appointment

    def cancel_appointment(self, requester_id: int, appointment_id: int) -> Appointment:
        """
        Cancel one of the requester's appointments.

        Allowed only while the current time is strictly before the appointment
        date minus CANCELLATION_CUTOFF_HOURS. Canceling is terminal and frees
        the slot for other bookings. The update only applies while the row is
        still uncanceled, so of two overlapping cancels only one succeeds.

        Raises:
            NotFoundError: Appointment does not exist
            ForbiddenError: Appointment belongs to another user
            AlreadyCanceledError: Appointment was canceled before
            TooLateToCancelError: Inside the cancellation cutoff
        """
        appointment = None
        if 1 <= appointment_id <= MAX_ID_VALUE:
            appointment = self.appointments.get_by_id(appointment_id)
        if not appointment:
            raise NotFoundError()

        if appointment.requester_id != requester_id:
            logger.warning(f"User {requester_id} tried to cancel appointment {appointment_id} owned by {appointment.requester_id}")
            raise ForbiddenError()

        if appointment.is_canceled:
            raise AlreadyCanceledError()

        now = self.now()
        if not appointment.is_cancelable(now):
            raise TooLateToCancelError()

        if not self.appointments.mark_canceled(appointment, now):
            # Canceled by another request since it was loaded
            self.db.rollback()
            raise AlreadyCanceledError()
        self.db.commit()

        logger.info(f"User {requester_id} canceled appointment {appointment_id}")
        return appointment

    def list_providers(self) -> List[User]:
        """Providers available for booking."""
        return self.users.list_providers()

    def list_notifications(self, user_id: int, limit: int = NOTIFICATIONS_LIST_LIMIT) -> List[Notification]:
        """Most recent notifications addressed to the user."""
        return self.notifications.list_for_recipient(user_id, limit)

    @staticmethod
    def _validate_create_payload(provider_id: Any, raw_date: Any) -> Tuple[int, datetime]:
        return parse_provider_id(provider_id), parse_requested_date(raw_date)
