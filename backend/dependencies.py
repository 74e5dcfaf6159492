"""
Dependency injection providers for FastAPI.

Each request gets its own database session from get_db; the services built
here wrap that session and are released with it when the request ends.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.interfaces import IUserService, IBookService
from services.user_service import UserService
from services.book_service import BookService


def get_user_service(db: Session = Depends(get_db)) -> IUserService:
    """
    Factory function for creating UserService instances.

    Args:
        db: Database session (injected)

    Returns:
        IUserService: User service implementation
    """
    return UserService(db)


def get_book_service(db: Session = Depends(get_db)) -> IBookService:
    """
    Factory function for creating BookService instances.

    Args:
        db: Database session (injected)

    Returns:
        IBookService: Book service implementation
    """
    return BookService(db)
