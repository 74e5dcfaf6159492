"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.
"""

from .user_request import UserCreateRequest, UserUpdateRequest
from .book_request import BookCreateRequest, ReviewRatingUpdateRequest

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "BookCreateRequest",
    "ReviewRatingUpdateRequest",
]
