"""
Book Request DTOs

DTOs for book-related API requests.
"""

from pydantic import BaseModel, Field
from typing import Optional

from constants import RatingBounds


class BookCreateRequest(BaseModel):
    """
    Request DTO for adding a book to a user's collection.

    The rating is stored as given; bounds are only checked on review update.
    """

    title: str = Field(description="Book title")
    author: str = Field(description="Book author")
    publication_year: int = Field(0, alias="publicationYear", description="Year of publication")
    rating: int = Field(RatingBounds.DEFAULT, description="Initial rating (unchecked)")
    review: Optional[str] = Field(None, description="Free-text review")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "T",
                "author": "A",
                "publicationYear": 2020
            }
        }


class ReviewRatingUpdateRequest(BaseModel):
    """Request DTO for replacing a book's review and rating."""

    review: Optional[str] = Field(None, description="New review text")
    rating: Optional[int] = Field(None, description="New rating, 1 to 5 inclusive")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "review": "ok",
                "rating": 3
            }
        }
