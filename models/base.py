"""
Database configuration and base model.

Uses SQLAlchemy 2.0 declarative style with SQLite.
"""

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from config import PATHS


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_db_engine(url: Optional[str] = None, **kwargs) -> Engine:
    """Create an engine for the given URL, defaulting to the user data file."""
    if url is None:
        PATHS.data_dir.mkdir(parents=True, exist_ok=True)
        url = f"sqlite:///{PATHS.database}"
    return create_engine(url, echo=False, **kwargs)


@contextmanager
def get_session(engine: Engine) -> Generator[Session, None, None]:
    """Context manager for database sessions."""
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> None:
    """Initialize the database, creating all tables."""
    # Import models so their tables are registered on the metadata
    import models.stored_value  # noqa: F401
    Base.metadata.create_all(bind=engine)

