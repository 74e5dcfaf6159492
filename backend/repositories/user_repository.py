"""
User repository for user-specific data access operations.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import User as UserModel
from .base_repository import BaseRepository


class UserRepository(BaseRepository[UserModel]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, UserModel)

    def email_taken(self, email: str) -> bool:
        """Check whether any user already uses ``email``."""
        return self.db.query(func.count(self.model.id)).filter(
            self.model.email == email
        ).scalar() > 0
