"""Append-only notification sink."""

from typing import List

from sqlalchemy.orm import Session

from models import Notification


class NotificationRepository:
    """Writes and reads user notifications. Rows are never updated."""

    def __init__(self, db: Session):
        self.db = db

    def append(self, recipient_user_id: int, content: str) -> Notification:
        notification = Notification(recipient_user_id=recipient_user_id, content=content, read=False)
        self.db.add(notification)
        self.db.flush()
        return notification

    def list_for_recipient(self, recipient_user_id: int, limit: int) -> List[Notification]:
        """Newest notifications first"""
        return (
            self.db.query(Notification)
            .filter(Notification.recipient_user_id == recipient_user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .limit(limit)
            .all()
        )
