"""
Service Interfaces

Abstract base classes for the service layer. Routers depend on these through
the providers in dependencies.py, so tests can substitute implementations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from models import User, Book
from dtos.request import UserCreateRequest, UserUpdateRequest, BookCreateRequest


class IUserService(ABC):
    """Interface for user operations."""

    @abstractmethod
    def list_users(self) -> List[User]:
        """Return all users, unprojected."""
        pass

    @abstractmethod
    def create_user(self, request: UserCreateRequest) -> User:
        """
        Validate and persist a new user with a hashed password.

        Raises:
            ValidationError: If any creation rule fails
        """
        pass

    @abstractmethod
    def find_user(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    def update_user(self, user_id: int, request: Optional[UserUpdateRequest]) -> User:
        """
        Merge the non-empty fields of ``request`` over the stored user.

        Raises:
            ValidationError: If the request is missing
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    def delete_user(self, user_id: int) -> User:
        """
        Delete a user and, by cascade, all of its books.

        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    def get_user_with_books(self, user_id: int) -> Tuple[User, List[Book]]:
        """
        Raises:
            NotFoundError: If the user does not exist
        """
        pass


class IBookService(ABC):
    """Interface for book operations."""

    @abstractmethod
    def list_books_by_user(self, user_id: int) -> List[Book]:
        """
        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    def add_book(self, request: BookCreateRequest, user_id: int) -> Tuple[Book, User]:
        """
        Persist a book in a user's collection.

        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    def find_book(self, book_id: int, user_id: Optional[int] = None) -> Optional[Book]:
        pass

    @abstractmethod
    def update_book_review(self, book_id: int, review: Optional[str], rating: Optional[int]) -> Book:
        """
        Raises:
            NotFoundError: If the book does not exist
            ValidationError: If the rating is outside 1..5
        """
        pass

    @abstractmethod
    def delete_book(self, book_id: int, user_id: int) -> Book:
        """
        Raises:
            NotFoundError: If no book with this id belongs to this user
        """
        pass
