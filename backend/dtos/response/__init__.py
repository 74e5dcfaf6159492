"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and control exactly which fields are exposed (never the password hash).
"""

from .book_response import BookDto, BookRecord
from .user_response import UserRecord, UserDto

__all__ = [
    "BookDto",
    "BookRecord",
    "UserRecord",
    "UserDto",
]
