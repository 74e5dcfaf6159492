"""
Transaction scope shared by the user and book services.
"""
from contextlib import contextmanager
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from constants import Messages
from exceptions import DatabaseError, ValidationError

logger = logging.getLogger(__name__)


def _is_email_conflict(error: IntegrityError) -> bool:
    text = str(error.orig).lower()
    return 'unique' in text and 'email' in text


def _driver_reason(error: SQLAlchemyError) -> str:
    """Driver message only; never the statement or its parameters."""
    orig = getattr(error, 'orig', None)
    if orig is not None:
        return str(orig)
    return type(error).__name__


@contextmanager
def unit_of_work(db: Session, operation: str):
    """
    Commit everything staged inside the block as one transaction.

    On any store failure the session is rolled back. A unique violation on
    users.email becomes a ValidationError; every other store failure becomes
    a DatabaseError.

    Args:
        db: Request-scoped session
        operation: Name used in logs and in DatabaseError details
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _is_email_conflict(e):
            logger.warning(f"{operation} - duplicate email rejected by the store")
            raise ValidationError(Messages.EMAIL_EXISTS, {"email": "duplicate"})
        logger.error(f"{operation} - integrity error: {e.orig}", exc_info=True)
        raise DatabaseError(operation, f"Integrity error: {e.orig}")
    except SQLAlchemyError as e:
        db.rollback()
        reason = _driver_reason(e)
        logger.error(f"{operation} - database error: {reason}", exc_info=True)
        raise DatabaseError(operation, reason)
    except Exception:
        db.rollback()
        raise
