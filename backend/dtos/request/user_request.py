"""
User Request DTOs

DTOs for user-related API requests. Every field is optional at this layer so
that the ordered creation rules in services.validators report the first
missing field with its own message.
"""

from pydantic import BaseModel, Field
from typing import Optional


class UserCreateRequest(BaseModel):
    """Request DTO for creating a user."""

    first_name: Optional[str] = Field(None, alias="firstName", description="First name")
    last_name: Optional[str] = Field(None, alias="lastName", description="Last name")
    email: Optional[str] = Field(None, description="Email address, unique across users")
    password: Optional[str] = Field(
        None,
        description="Plaintext password: 6+ letters/digits with an uppercase letter and a digit"
    )

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "firstName": "Ann",
                "lastName": "Lee",
                "email": "a@x.com",
                "password": "Abc123"
            }
        }


class UserUpdateRequest(BaseModel):
    """
    Request DTO for a partial user update.

    Absent or empty fields leave the stored value unchanged; the password
    cannot be changed through this request.
    """

    first_name: Optional[str] = Field(None, alias="firstName", description="New first name")
    last_name: Optional[str] = Field(None, alias="lastName", description="New last name")
    email: Optional[str] = Field(None, description="New email address")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    def changes(self) -> dict:
        """Return only the fields that carry a non-empty value."""
        return {
            name: value
            for name, value in (
                ("first_name", self.first_name),
                ("last_name", self.last_name),
                ("email", self.email),
            )
            if value
        }
