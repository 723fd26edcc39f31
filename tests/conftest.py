"""Test fixtures: explicit settings, fresh in-memory SQLite database, FastAPI test client.

Every test gets its own in-memory database, so tests never share rows.
"""

import pytest
from fastapi.testclient import TestClient

from blog_api.config import Settings
from blog_api.core.security import create_access_token
from blog_api.database import Database
from blog_api.main import create_app

TEST_JWT_SECRET = "test-jwt-secret-key-for-testing-purposes-only"


def build_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite:///:memory:",
        "JWT_SECRET": TEST_JWT_SECRET,
        "ENVIRONMENT": "test",
        "PORT": 3001,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return build_settings()


@pytest.fixture
def database(settings):
    db = Database(settings.DATABASE_URL)
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_token(settings):
    """Sign a token with the test secret."""
    def _make(user_id, email="author@example.com", **kwargs):
        kwargs.setdefault("expires_delta", settings.jwt_expires_delta)
        return create_access_token(
            str(user_id),
            email,
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            **kwargs,
        )
    return _make


@pytest.fixture
def author(client):
    """A persisted user to own posts."""
    res = client.post(
        "/api/v1/users",
        json={"email": "author@example.com", "password": "password123", "firstName": "Ada"},
    )
    assert res.status_code == 201
    return res.json()["data"]


@pytest.fixture
def auth_headers(author, make_token):
    token = make_token(author["id"], author["email"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_category(client):
    def _make(name, description=None):
        body = {"name": name}
        if description is not None:
            body["description"] = description
        res = client.post("/api/v1/categories", json=body)
        assert res.status_code == 201
        return res.json()["data"]
    return _make
