"""Shared test fixtures for the Outpace backend tests."""

import os
import sys

import pytest

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
os.environ.setdefault("DATABASE_URL", "sqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-secret-for-outpace-api-tests")

from fastapi.testclient import TestClient

from outpace.config import Settings
from outpace.db.database import Database
from outpace.main import create_app
from outpace.models.user import User


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh SQLite file per test."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'outpace.db'}",
        jwt_secret="test-secret-for-outpace-api-tests",
        jwt_expires_in="7d",
        environment="test",
    )


@pytest.fixture
def db(settings):
    database = Database(settings)
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def session(db):
    with db.session() as session:
        yield session


@pytest.fixture
def make_user(session):
    """Insert a user row directly (no hashing) and return it."""

    def _make(email: str = "ada@x.com", name: str = "Ada", is_active: bool = True) -> User:
        user = User(name=name, email=email, password_hash="not-a-real-hash", is_active=is_active)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def register_user(client, name="Ada", email="ada@x.com", password="secret1") -> dict:
    """Register through the API and return the {user, token} payload."""
    resp = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def ada(client):
    """A registered user: {"user": {...}, "token": str, "headers": {...}}."""
    data = register_user(client)
    return {**data, "headers": bearer(data["token"])}


@pytest.fixture
def bob(client):
    data = register_user(client, name="Bob", email="bob@y.com", password="hunter22")
    return {**data, "headers": bearer(data["token"])}
