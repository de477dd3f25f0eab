"""
User model for marketplace accounts.

A single table holds both regular users and providers; the is_provider
flag marks accounts that offer bookable services.
"""

from typing import Optional
from datetime import datetime
from sqlalchemy import String, TIMESTAMP, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.database import Base


class User(Base):
    """Marketplace account (requester or provider)."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    """Hash produced by the external account service. Never read by the booking core."""

    is_provider: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    """Set at account creation. Only providers can be booked."""

    avatar_id: Mapped[Optional[int]] = mapped_column(ForeignKey("files.id"), nullable=True)

    # Metadata
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)

    # Relationships
    avatar = relationship("File", lazy="joined")
    """Profile picture; upload and storage are handled outside this service."""

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', is_provider={self.is_provider})>"
