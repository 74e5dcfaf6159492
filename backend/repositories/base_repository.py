"""
Base repository providing the shared collection operations for users and books.
"""

from typing import Generic, TypeVar, List, Optional, Type, Any
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Typed collection over one mapped table.

    Repositories only stage changes (add/flush/delete); committing the unit of
    work is left to the service that owns the request's session.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: Request-scoped SQLAlchemy session
            model: Mapped model class
        """
        self.db = db
        self.model = model

    def add(self, obj: T) -> T:
        """
        Stage a new row and flush so the store assigns its primary key.

        Args:
            obj: Transient model instance

        Returns:
            The same instance, now carrying its id
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        """Return the row with this primary key, or None."""
        return self.db.get(self.model, id)

    def list_all(self) -> List[T]:
        """Return every row in insertion (id) order."""
        return self.db.query(self.model).order_by(self.model.id).all()

    def first_where(self, *criteria: Any) -> Optional[T]:
        """
        Return the first row matching all SQL criteria.

        Args:
            *criteria: SQLAlchemy boolean expressions, ANDed together

        Returns:
            Model instance or None if nothing matches
        """
        return self.db.query(self.model).filter(*criteria).first()

    def exists(self, id: int) -> bool:
        return self.db.query(self.model.id).filter(self.model.id == id).first() is not None

    def save(self, obj: T) -> T:
        """Flush pending attribute changes on an already persistent row."""
        self.db.flush()
        return obj

    def remove(self, obj: T) -> None:
        """Stage deletion of a row and flush it."""
        self.db.delete(obj)
        self.db.flush()
