"""
Book Service

Handles business logic for books held in a user's collection.
"""

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
import logging

from constants import Messages
from exceptions import NotFoundError, ValidationError
from models import User, Book
from dtos.request import BookCreateRequest
from repositories.user_repository import UserRepository
from repositories.book_repository import BookRepository
from services.interfaces import IBookService
from services.unit_of_work import unit_of_work
from services.validators import check_rating
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class BookService(IBookService):
    """Service for book-related business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)
        self.book_repo = BookRepository(db)

    def _require_user(self, user_id: int) -> User:
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("user", Messages.USER_NOT_FOUND, user_id)
        return user

    def list_books_by_user(self, user_id: int) -> List[Book]:
        """
        Get the books of an existing user.

        A missing user is an error, not an empty list.
        """
        if not self.user_repo.exists(user_id):
            raise NotFoundError("user", Messages.USER_NOT_FOUND, user_id)
        return self.book_repo.list_by_user(user_id)

    @log_operation("add_book")
    def add_book(self, request: BookCreateRequest, user_id: int) -> Tuple[Book, User]:
        """
        Add a book to a user's collection.

        The rating is stored unchecked on this path.

        Args:
            request: Submitted book fields
            user_id: Owning user

        Returns:
            Tuple of (stored book, owning user)
        """
        user = self._require_user(user_id)

        book = Book(
            title=request.title,
            author=request.author,
            publication_year=request.publication_year,
            rating=request.rating,
            review=request.review,
            user_id=user.id,
        )
        with unit_of_work(self.db, "add_book"):
            user.add_book(book)
            self.book_repo.add(book)

        logger.info(f"Added book {book.id} to user {user_id}")
        return book, user

    def find_book(self, book_id: int, user_id: Optional[int] = None) -> Optional[Book]:
        return self.book_repo.find(book_id, user_id)

    @log_operation("update_book_review")
    def update_book_review(self, book_id: int, review: Optional[str], rating: Optional[int]) -> Book:
        """
        Overwrite a book's review and rating.

        The book lookup happens first, so an unknown book is reported as not
        found even when the rating is also invalid.
        """
        book = self.book_repo.get_by_id(book_id)
        if book is None:
            raise NotFoundError("book", Messages.BOOK_NOT_FOUND, book_id)

        valid, error = check_rating(rating)
        if not valid:
            raise ValidationError(error, {"rating": rating})

        with unit_of_work(self.db, "update_book_review"):
            book.review = review
            book.rating = rating
            self.book_repo.save(book)

        return book

    @log_operation("delete_book")
    def delete_book(self, book_id: int, user_id: int) -> Book:
        book = self.book_repo.find(book_id, user_id)
        if book is None:
            raise NotFoundError("book", Messages.BOOK_OR_USER_NOT_FOUND, book_id)

        with unit_of_work(self.db, "delete_book"):
            self.book_repo.remove(book)

        logger.info(f"Deleted book {book_id} of user {user_id}")
        return book
