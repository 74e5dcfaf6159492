"""
User Response DTOs

DTOs for user-related API responses. None of them has a password field.
"""

from pydantic import BaseModel, Field
from typing import List

from .book_response import BookDto


class UserRecord(BaseModel):
    """User row as returned by the list and create endpoints."""

    id: int = Field(description="User ID")
    first_name: str = Field(alias="firstName", description="First name")
    last_name: str = Field(alias="lastName", description="Last name")
    email: str = Field(description="Email address")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
        populate_by_name = True


class UserDto(UserRecord):
    """User together with a flattened list of its books."""

    books: List[BookDto] = Field(default_factory=list, description="Books owned by the user")
