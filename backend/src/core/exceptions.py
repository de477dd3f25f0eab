"""
Booking rule exceptions.

Raised by the booking engine and converted into JSON error responses by the
exception handler registered in main.py. Each error carries the HTTP status
and a short machine-readable type alongside the user-facing message.
"""

from fastapi import status


class BookingError(Exception):
    """Base exception for all booking rule failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error_type: str = "booking_error"
    default_message: str = "Booking request rejected"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BookingError):
    """Request payload is missing fields or has the wrong types."""

    error_type = "validation_error"
    default_message = "Validation failed"


class NotAProviderError(BookingError):
    """Target user does not exist or is not a provider."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_type = "not_a_provider"
    default_message = "User is not a provider"


class PastDateError(BookingError):
    """Requested hour has already started."""

    error_type = "past_date"
    default_message = "You can only schedule a future date"


class SlotUnavailableError(BookingError):
    """Provider already has an active appointment in the requested hour."""

    error_type = "slot_unavailable"
    default_message = "Appointment date is not available"


class SelfBookingError(BookingError):
    """Requester tried to book an appointment with themselves."""

    error_type = "self_booking"
    default_message = "You cannot book an appointment with yourself"


class ForbiddenError(BookingError):
    """Caller does not own the appointment."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_type = "forbidden"
    default_message = "You don't have permission to cancel this appointment"


class TooLateToCancelError(BookingError):
    """Cancellation attempted inside the cutoff window."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_type = "too_late_to_cancel"
    default_message = "You can only cancel appointments 2 hours in advance"


class AlreadyCanceledError(BookingError):
    """Appointment was canceled before."""

    error_type = "already_canceled"
    default_message = "Appointment is already canceled"


class NotFoundError(BookingError):
    """Appointment does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_type = "not_found"
    default_message = "Appointment not found"
