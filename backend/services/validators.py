"""
Request validation rules - evaluated before any user or book mutation.

Each rule is a pure function over the submitted values returning
``(is_valid, error_message)``; the caller decides what to raise.
"""
from typing import Callable, Optional, Tuple

from constants import Messages, PasswordPolicy, RatingBounds

ValidationResult = Tuple[bool, Optional[str]]


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def check_password_policy(password: Optional[str]) -> ValidationResult:
    """
    Check a plaintext password against the creation policy.

    Args:
        password: Submitted plaintext

    Returns:
        Tuple of (is_valid, error_message)
    """
    if is_blank(password) or not PasswordPolicy.PATTERN.fullmatch(password):
        return False, Messages.PASSWORD_POLICY
    return True, None


def check_rating(rating: Optional[int]) -> ValidationResult:
    """Rating must lie in the inclusive 1..5 range; a missing rating fails."""
    if not RatingBounds.contains(rating):
        return False, Messages.RATING_OUT_OF_RANGE
    return True, None


def check_new_user(
    first_name: Optional[str],
    last_name: Optional[str],
    email: Optional[str],
    password: Optional[str],
    email_exists: Callable[[str], bool],
) -> ValidationResult:
    """
    Apply the user creation rules in order, stopping at the first failure.

    Order: first name, last name, email presence, password policy, email
    uniqueness. The uniqueness lookup only runs once every field check passed.

    Args:
        first_name: Submitted first name
        last_name: Submitted last name
        email: Submitted email
        password: Submitted plaintext password
        email_exists: Lookup answering whether an email is already in use

    Returns:
        Tuple of (is_valid, error_message)
    """
    if is_blank(first_name):
        return False, Messages.FIRST_NAME_REQUIRED
    if is_blank(last_name):
        return False, Messages.LAST_NAME_REQUIRED
    if is_blank(email):
        return False, Messages.EMAIL_REQUIRED

    valid, error = check_password_policy(password)
    if not valid:
        return valid, error

    if email_exists(email):
        return False, Messages.EMAIL_EXISTS

    return True, None
