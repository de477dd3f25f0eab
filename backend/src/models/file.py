"""
File model for uploaded assets referenced by users (avatars).
"""

from datetime import datetime
from sqlalchemy import String, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base


class File(Base):
    """Metadata for a stored upload. The bytes live outside the database."""

    __tablename__ = "files"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    """Original client-side file name."""

    path: Mapped[str] = mapped_column(String(255), unique=True)
    """Storage key, used to build the public URL."""

    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)

    @property
    def url(self) -> str:
        """Public URL of the file."""
        from core.config import API_BASE_URL
        return f"{API_BASE_URL}/files/{self.path}"

    def __repr__(self) -> str:
        return f"<File(id={self.id}, path='{self.path}')>"
