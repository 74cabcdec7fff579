# This project was developed with assistance from AI tools.
"""Engine, session factory and declarative base."""

from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .config import db_settings


class Base(DeclarativeBase):
    pass


engine = create_engine(db_settings.DATABASE_URL, echo=db_settings.SQL_ECHO)
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def create_tables(bind=None) -> None:
    """Create all tables on the given engine (defaults to the configured one)."""
    Base.metadata.create_all(bind or engine)


def get_db() -> Iterator[Session]:
    """FastAPI dependency yielding a session that is closed after the request."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
