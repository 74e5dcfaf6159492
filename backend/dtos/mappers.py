"""
Projection of ORM entities into response DTOs.
"""

from typing import Iterable, List, Optional

from models import User, Book
from .response import BookDto, BookRecord, UserRecord, UserDto


def to_book_dto(book: Book) -> BookDto:
    return BookDto.model_validate(book)


def to_book_dtos(books: Iterable[Book]) -> List[BookDto]:
    return [to_book_dto(book) for book in books]


def to_book_record(book: Book) -> BookRecord:
    return BookRecord.model_validate(book)


def to_user_record(user: User) -> UserRecord:
    return UserRecord.model_validate(user)


def to_user_dto(user: User, books: Optional[Iterable[Book]] = None) -> UserDto:
    """
    Build the with-books view of a user.

    Args:
        user: Persisted user
        books: The user's books; defaults to the loaded ``user.books``

    Returns:
        UserDto carrying BookDto entries and no password
    """
    owned = user.books if books is None else books
    return UserDto(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        books=to_book_dtos(owned or []),
    )
