"""User directory lookups."""

from typing import List, Optional

from sqlalchemy.orm import Session

from models import User


class UserRepository:
    """Read access to user accounts."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID"""
        return self.db.get(User, user_id)

    def get_provider(self, user_id: int) -> Optional[User]:
        """Get a user by ID only if the account is a provider"""
        return (
            self.db.query(User)
            .filter(User.id == user_id, User.is_provider.is_(True))
            .first()
        )

    def list_providers(self) -> List[User]:
        """All provider accounts ordered by name"""
        return (
            self.db.query(User)
            .filter(User.is_provider.is_(True))
            .order_by(User.name.asc(), User.id.asc())
            .all()
        )
