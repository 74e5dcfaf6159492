"""
Book repository for book-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from models import Book as BookModel
from .base_repository import BaseRepository


class BookRepository(BaseRepository[BookModel]):
    """Repository for Book model operations."""

    def __init__(self, db: Session):
        super().__init__(db, BookModel)

    def list_by_user(self, user_id: int) -> List[BookModel]:
        """
        Get all books owned by a user.

        Args:
            user_id: Owning user id

        Returns:
            Books with books.user_id == user_id, in insertion order
        """
        return self.db.query(self.model).filter(
            self.model.user_id == user_id
        ).order_by(self.model.id).all()

    def find(self, book_id: int, user_id: Optional[int] = None) -> Optional[BookModel]:
        """
        Find a book by id, optionally scoped to its owner.

        Args:
            book_id: Book id
            user_id: When given, the book must also belong to this user

        Returns:
            Book or None
        """
        criteria = [self.model.id == book_id]
        if user_id is not None:
            criteria.append(self.model.user_id == user_id)
        return self.first_where(*criteria)

    def count_for_user(self, user_id: int) -> int:
        return self.db.query(self.model).filter(self.model.user_id == user_id).count()
