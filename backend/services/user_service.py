"""
User Service

Handles business logic for users: ordered creation rules, password hashing,
partial updates and cascading deletes.
"""

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
import logging

from constants import Messages
from exceptions import NotFoundError, ValidationError
from models import User, Book
from dtos.request import UserCreateRequest, UserUpdateRequest
from repositories.user_repository import UserRepository
from repositories.book_repository import BookRepository
from services.interfaces import IUserService
from services.password_hasher import hash_password
from services.unit_of_work import unit_of_work
from services.validators import check_new_user
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Service for user-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize UserService.

        Args:
            db: Request-scoped database session
        """
        self.db = db
        self.user_repo = UserRepository(db)
        self.book_repo = BookRepository(db)

    def list_users(self) -> List[User]:
        return self.user_repo.list_all()

    @log_operation("create_user")
    def create_user(self, request: UserCreateRequest) -> User:
        """
        Validate and persist a new user.

        Rules run in order: first name, last name, email, password policy,
        email uniqueness. The stored password is a bcrypt hash of the
        submitted plaintext.

        Args:
            request: Submitted user fields

        Returns:
            The stored user with its assigned id

        Raises:
            ValidationError: On the first failing rule
        """
        logger.info(f"Creating user: {request.first_name} {request.last_name}")

        valid, error = check_new_user(
            request.first_name,
            request.last_name,
            request.email,
            request.password,
            email_exists=self.user_repo.email_taken,
        )
        if not valid:
            raise ValidationError(error)

        user = User(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=hash_password(request.password),
        )
        with unit_of_work(self.db, "create_user"):
            self.user_repo.add(user)

        logger.info(f"Created user {user.id}")
        return user

    def find_user(self, user_id: int) -> Optional[User]:
        return self.user_repo.get_by_id(user_id)

    def _require_user(self, user_id: int) -> User:
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("user", Messages.USER_NOT_FOUND, user_id)
        return user

    @log_operation("update_user")
    def update_user(self, user_id: int, request: Optional[UserUpdateRequest]) -> User:
        """
        Apply a partial update.

        Only non-empty first name, last name and email values overwrite the
        stored ones; there is no way to clear a field.

        Args:
            user_id: User to update
            request: Submitted changes, None when the body was absent

        Returns:
            The updated user
        """
        if request is None:
            raise ValidationError(Messages.USER_DATA_NULL)

        user = self._require_user(user_id)
        changes = request.changes()

        with unit_of_work(self.db, "update_user"):
            for field, value in changes.items():
                setattr(user, field, value)
            self.user_repo.save(user)

        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return user

    @log_operation("delete_user")
    def delete_user(self, user_id: int) -> User:
        """
        Delete a user together with every book it owns.

        Returns:
            The deleted (now detached) user
        """
        user = self._require_user(user_id)
        book_count = self.book_repo.count_for_user(user_id)

        with unit_of_work(self.db, "delete_user"):
            self.user_repo.remove(user)

        logger.info(f"Deleted user {user_id} and {book_count} book(s)")
        return user

    def get_user_with_books(self, user_id: int) -> Tuple[User, List[Book]]:
        user = self._require_user(user_id)
        return user, self.book_repo.list_by_user(user_id)
