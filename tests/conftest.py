"""
Shared test fixtures: a fresh in-memory SQLite database per test, the
application built against it, and helpers for creating users with tokens.
"""
import pytest
from fastapi.testclient import TestClient

from workforce import database
from workforce.config import Settings
from workforce.main import create_app
from workforce.models import UserRole
from workforce.services import auth_service

TEST_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture
def settings():
    return Settings(
        environment="test",
        database_url="sqlite://",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def db(app):
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db, settings):
    """Register a user and return {"user": {...}, "token": "...", "headers": {...}}"""
    counter = {"n": 0}

    def _make(role=UserRole.EMPLOYEE, email=None, password="Password123"):
        counter["n"] += 1
        email = email or f"user{counter['n']}@company.com"
        result = auth_service.register(db, settings, email, password, role=role)
        result["headers"] = {"Authorization": f"Bearer {result['token']}"}
        return result

    return _make


@pytest.fixture
def admin(make_user):
    return make_user(role=UserRole.ADMIN, email="admin@company.com")


@pytest.fixture
def employee_user(make_user):
    return make_user(email="employee@company.com")
