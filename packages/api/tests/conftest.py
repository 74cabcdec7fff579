# This project was developed with assistance from AI tools.
"""Shared fixtures: in-memory SQLite database and document settings."""

from decimal import Decimal

import pytest
from db import Base
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from appdocs.core.config import Settings


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    yield session
    session.close()


@pytest.fixture
def doc_settings():
    """Settings with a round tax rate so totals are easy to check by hand."""
    return Settings(
        SUPPORT_EMAIL="help@example.com",
        SIGNATURE="The Client Services Team",
        TAX_RATE=Decimal("0.2"),
    )
