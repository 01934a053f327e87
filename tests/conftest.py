"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at an in-memory SQLite database before anything imports it.
"""

import os
import sys
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["DB_INIT_ATTEMPTS"] = "1"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from domain.models import Base, engine, SessionLocal


@pytest.fixture(autouse=True)
def clean_database() -> Generator[None, None, None]:
    """Give every test an empty schema"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Create a database session for repository and service tests.

    Yields:
        Session: SQLAlchemy session bound to the shared in-memory database
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """TestClient with the application lifespan (schema init) running"""
    from main import app

    with TestClient(app) as test_client:
        yield test_client
