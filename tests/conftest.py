"""
Pytest configuration and shared fixtures
"""
import os

import pytest
from fastapi.testclient import TestClient

# Point the app at a private in-memory database before anything imports it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from user_directory.app import app  # noqa: E402
from user_directory.core.database import SessionLocal, engine  # noqa: E402
from user_directory.models.base import Base  # noqa: E402
from user_directory.schemas.user import RegisterRequest  # noqa: E402
from user_directory.utils.user_directory import UserDirectory  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty tables."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(reset_db):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def directory(db_session):
    return UserDirectory(db_session)


@pytest.fixture
def alice(directory):
    """Alice registered on an empty store, so she gets id 1."""
    return directory.register(
        RegisterRequest(username="alice", password="p1", email="a@x.com")
    )


@pytest.fixture
def client(reset_db):
    """FastAPI test client"""
    return TestClient(app)
