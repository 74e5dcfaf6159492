"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""
import re


class PasswordPolicy:
    """
    Password strength rule applied on user creation.

    At least 6 characters drawn from ASCII letters and digits, with at least
    one uppercase letter and at least one digit.
    """

    PATTERN = re.compile(r'^(?=.*[A-Z])(?=.*\d)[A-Za-z\d]{6,}$')
    BCRYPT_ROUNDS = 12


class RatingBounds:
    """Inclusive bounds for a book rating set through the review endpoint."""

    MIN = 1
    MAX = 5
    DEFAULT = 0  # Unrated book

    @classmethod
    def contains(cls, rating) -> bool:
        """Check whether a rating lies inside the inclusive range."""
        if rating is None or isinstance(rating, bool):
            return False
        return cls.MIN <= rating <= cls.MAX


class Messages:
    """User-facing response texts, returned as plain-text bodies"""

    # Validation
    FIRST_NAME_REQUIRED = "First name is required"
    LAST_NAME_REQUIRED = "Last name is required"
    EMAIL_REQUIRED = "Email is required"
    PASSWORD_POLICY = (
        "Password must be at least 6 characters long, "
        "contain one uppercase letter, and one number"
    )
    EMAIL_EXISTS = "Email already exists"
    USER_DATA_NULL = "User data is null"
    RATING_OUT_OF_RANGE = f"The rating must be between {RatingBounds.MIN} and {RatingBounds.MAX}"

    # Lookups
    USER_NOT_FOUND = "User not found"
    BOOK_NOT_FOUND = "Book not found"
    BOOK_NOT_FOUND_DETAIL = "Book not found."
    BOOK_OR_USER_NOT_FOUND = "Book or user not found."

    # Confirmations
    USER_UPDATED = "User {first_name} updated"
    USER_DELETED = "User {first_name} deleted successfully"
    BOOK_ADDED = "Book added to {first_name}'s collection"
    BOOK_DELETED = "The book {title} was deleted successfully"
    REVIEW_UPDATED = "Review and rating updated"


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"
    PORT = 8080
    SERVICE_NAME = "Book Library API"
    VERSION = "1.0.0"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
