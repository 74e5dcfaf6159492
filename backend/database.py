from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config.app_config import settings

Base = declarative_base()


def _set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
    cursor.execute("PRAGMA foreign_keys=ON")  # Required for ON DELETE CASCADE on books.user_id
    cursor.close()


def build_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections get foreign key enforcement switched on so the
    books.user_id cascade is honoured by the store itself. Bound parameters
    are kept out of error messages since inserts carry password hashes.
    """
    kwargs.setdefault('hide_parameters', True)
    if url.startswith('sqlite'):
        connect_args = kwargs.pop('connect_args', {})
        connect_args.setdefault('check_same_thread', False)
        engine = create_engine(url, connect_args=connect_args, echo=echo, **kwargs)
        event.listen(engine, "connect", _set_sqlite_pragma)
    else:
        engine = create_engine(
            url,
            echo=echo,
            pool_pre_ping=True,  # Verify connections are alive before using
            pool_recycle=3600,
            **kwargs
        )
    return engine


if settings.is_sqlite:
    settings.ensure_directories()

engine = build_engine(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(bind=engine)


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
