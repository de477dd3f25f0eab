"""
Notification model: append-only, user-directed text messages.

Rows are written by the booking engine when an appointment is created and
are never updated by it.
"""

from datetime import datetime
from sqlalchemy import String, TIMESTAMP, Boolean, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from core.constants import MAX_NOTIFICATION_LENGTH
from core.database import Base


class Notification(Base):
    """Text notification addressed to a single user."""

    __tablename__ = "notifications"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    content: Mapped[str] = mapped_column(String(MAX_NOTIFICATION_LENGTH))
    recipient_user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)

    __table_args__ = (
        Index('idx_notifications_recipient_created', 'recipient_user_id', 'created_at'),
    )

    def __repr__(self) -> str:
        return f"<Notification(id={self.id}, recipient_user_id={self.recipient_user_id})>"
