import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep test runs away from the real data directory and use a cheap bcrypt cost
_test_data_dir = tempfile.mkdtemp(prefix="booklib_test_")
os.environ.setdefault("BOOKLIB_DATA_DIR", _test_data_dir)
os.environ.setdefault("BOOKLIB_DATABASE_URL", f"sqlite:///{_test_data_dir}/library.db")
os.environ.setdefault("BOOKLIB_BCRYPT_ROUNDS", "4")

# Now import after path and environment are set
import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from database import Base, build_engine, get_db
import models  # noqa: F401
from dtos.request import UserCreateRequest, BookCreateRequest
from services.user_service import UserService
from services.book_service import BookService


@pytest.fixture
def engine():
    """In-memory database shared by every connection of one test"""
    engine = build_engine('sqlite://', poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def user_service(db_session):
    return UserService(db_session)


@pytest.fixture
def book_service(db_session):
    return BookService(db_session)


@pytest.fixture
def make_user(user_service):
    """Create a user through the service; fields can be overridden."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        fields = {
            "first_name": "Ann",
            "last_name": "Lee",
            "email": f"user{counter['n']}@x.com",
            "password": "Abc123",
        }
        fields.update(overrides)
        return user_service.create_user(UserCreateRequest(**fields))

    return _make


@pytest.fixture
def make_book(book_service):
    def _make(user_id: int, **overrides):
        fields = {"title": "T", "author": "A", "publication_year": 2020}
        fields.update(overrides)
        book, _ = book_service.add_book(BookCreateRequest(**fields), user_id)
        return book

    return _make


@pytest.fixture
def client(engine):
    """FastAPI test client bound to the in-memory database"""
    from fastapi.testclient import TestClient
    from main import app

    TestingSessionLocal = sessionmaker(bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
