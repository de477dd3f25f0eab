"""
Appointment model representing a booked hour slot with a provider.

Each appointment links the requesting user to a provider for a specific
time. The requested timestamp is stored as sent by the client in `date`;
`slot_start` holds the same value truncated to the start of its hour and
is the column slot exclusivity is enforced on.
"""

from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy import ForeignKey, Index, TIMESTAMP, CheckConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.constants import CANCELLATION_CUTOFF_HOURS
from core.database import Base
from utils.datetime_utils import ensure_utc


class Appointment(Base):
    """
    Appointment between a requester and a provider.

    Lifecycle is one-way: scheduled (canceled_at is NULL) to canceled
    (canceled_at set). Canceled rows are kept and release their slot.
    """

    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    requester_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    """User who booked the appointment."""

    provider_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    """Provider being booked."""

    date: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True))
    """Requested time at the precision the client supplied (UTC)."""

    slot_start: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True))
    """`date` truncated to the start of its hour (UTC)."""

    canceled_at: Mapped[Optional[datetime]] = mapped_column(TIMESTAMP(timezone=True), nullable=True)
    """Timestamp when the appointment was canceled. NULL while scheduled."""

    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)

    # Relationships
    requester = relationship("User", foreign_keys=[requester_id])
    provider = relationship("User", foreign_keys=[provider_id])

    @property
    def is_canceled(self) -> bool:
        return self.canceled_at is not None

    @property
    def cancellation_deadline(self) -> datetime:
        """Latest instant (exclusive) at which the requester may still cancel."""
        return ensure_utc(self.date) - timedelta(hours=CANCELLATION_CUTOFF_HOURS)  # type: ignore[operator]

    def is_past(self, now: datetime) -> bool:
        """Whether the appointment time has been reached."""
        return ensure_utc(self.date) <= ensure_utc(now)  # type: ignore[operator]

    def is_cancelable(self, now: datetime) -> bool:
        """Whether a cancellation at `now` falls strictly before the cutoff."""
        return ensure_utc(now) < self.cancellation_deadline  # type: ignore[operator]

    __table_args__ = (
        # At most one active appointment per provider per hour.
        Index(
            'uq_appointments_provider_slot_active',
            'provider_id', 'slot_start',
            unique=True,
            postgresql_where=text('canceled_at IS NULL'),
            sqlite_where=text('canceled_at IS NULL'),
        ),
        Index('idx_appointments_requester_date', 'requester_id', 'date'),
        CheckConstraint('requester_id <> provider_id', name='ck_appointments_not_self'),
    )

    def __repr__(self) -> str:
        return (
            f"<Appointment(id={self.id}, requester_id={self.requester_id}, "
            f"provider_id={self.provider_id}, date={self.date}, canceled_at={self.canceled_at})>"
        )
