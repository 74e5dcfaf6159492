"""
Book Response DTOs

DTOs for book-related API responses.
"""

from pydantic import BaseModel, Field
from typing import Optional


class BookDto(BaseModel):
    """
    Book as shown inside a user's collection.

    Omits the owning user id.
    """

    id: int = Field(description="Book ID")
    title: str = Field(description="Book title")
    author: str = Field(description="Book author")
    publication_year: int = Field(alias="publicationYear", description="Year of publication")
    rating: int = Field(description="Rating, 0 when unrated")
    review: Optional[str] = Field(None, description="Free-text review")

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from ORM models
        populate_by_name = True


class BookRecord(BookDto):
    """Full book record, including the owning user id."""

    user_id: Optional[int] = Field(None, alias="userId", description="Owning user ID")
