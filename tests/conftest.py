"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from gridbase.database import Base, build_engine, get_db
from gridbase.main import app


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/gridbase", "/gridbase_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./gridbase_test.db"

engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    # Register every model with Base.metadata
    from gridbase import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, name: str, password: str = "testpass123") -> AuthHeaders:
    """Register a user through the API and return bearer headers for them."""
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201
    data = response.json()
    token = data["access_token"]
    return AuthHeaders(
        {"Authorization": f"Bearer {token}"},
        user_id=data["user"]["id"],
        email=email,
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "test@example.com", "Test User")


@pytest.fixture
def other_auth_headers(client):
    """Create a second, unrelated user."""
    return register(client, "other@example.com", "Other User")


@pytest.fixture
def sheet_id(client, auth_headers):
    """A sheet owned by the auth_headers user."""
    response = client.post(
        "/api/sheets", headers=auth_headers, json={"name": "Contacts", "description": "People"}
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture
def add_field(client, auth_headers):
    """Factory adding a field to a sheet, returning the created field."""

    def _add_field(sheet_id: str, name: str, field_type: str = "text", **extra):
        response = client.post(
            f"/api/sheets/{sheet_id}/fields",
            headers=auth_headers,
            json={"name": name, "type": field_type, **extra},
        )
        assert response.status_code == 201
        return response.json()

    return _add_field


@pytest.fixture
def add_row(client, auth_headers):
    """Factory appending a row to a sheet, returning the created row with cells."""

    def _add_row(sheet_id: str):
        response = client.post(f"/api/sheets/{sheet_id}/rows", headers=auth_headers)
        assert response.status_code == 201
        return response.json()

    return _add_row
