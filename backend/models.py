from sqlalchemy import Column, String, Integer, Text, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from database import Base
from constants import RatingBounds


class User(Base):
    """
    A library member owning a collection of books.

    The password column only ever holds a bcrypt hash. Deleting a user removes
    every book whose user_id points at it, both through the ORM cascade and the
    ON DELETE CASCADE foreign key.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    password = Column(String, nullable=False)  # bcrypt hash

    # One-directional: Book keeps only the user_id column, no back-reference
    books = relationship(
        "Book",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Book.id",
    )

    __table_args__ = (
        CheckConstraint("first_name != ''"),
        CheckConstraint("last_name != ''"),
    )

    def add_book(self, book: "Book") -> "Book":
        """
        Append a book to this user's in-memory collection.

        The ORM materializes an empty collection on first access, so a user
        without books needs no separate initialization.
        """
        self.books.append(book)
        return book

    def __repr__(self):
        return f"<User id={self.id} name={self.first_name} {self.last_name}>"


class Book(Base):
    __tablename__ = 'books'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    author = Column(String, nullable=False)
    publication_year = Column(Integer, nullable=False, default=0)
    rating = Column(Integer, nullable=False, default=RatingBounds.DEFAULT)  # Only bounded on review update
    review = Column(Text, nullable=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=True)

    __table_args__ = (
        Index('idx_books_user_id', 'user_id'),
    )

    def __repr__(self):
        return f"<Book id={self.id} title={self.title!r} user_id={self.user_id}>"
