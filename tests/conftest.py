"""Pytest configuration and fixtures."""

import os

# Must be set before apps.api is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from packages.core.models import Base


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite engine with the schema."""
    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a test database session."""
    session_local = sessionmaker(bind=db_engine)
    session = session_local()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api_app(db_engine):
    """FastAPI app with get_db bound to the test database."""
    from apps.api.dependencies import get_db
    from apps.api.main import app

    session_local = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = session_local()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(api_app):
    """Create a test client."""
    from fastapi.testclient import TestClient

    return TestClient(api_app)


@pytest.fixture
def api_store(api_app):
    """HTTP proposal store wired to the in-process API."""
    from packages.stores.http_store import HttpProposalStore

    return HttpProposalStore(base_url="http://testserver", transport=httpx.ASGITransport(app=api_app))
