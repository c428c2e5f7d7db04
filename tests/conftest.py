# File: tests/conftest.py

"""
Shared fixtures.

API tests run against an in-memory SQLite database (one connection shared
through StaticPool) and a cheap bcrypt cost so hashing stays fast.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db, get_password_hasher
from app.core.security import BcryptPasswordHasher
from app.main import app
from app.models.base import Base
from app.models import user  # noqa: F401
from app.models.user import User


class InMemoryUserRepository:
    """Dict-backed stand-in for UserRepository that counts writes."""

    def __init__(self, users=None):
        self.users = {}
        self.saves = 0
        self.deletes = 0
        for u in users or []:
            self.users[u.email] = u

    def find_all(self):
        return list(self.users.values())

    def find_by_email(self, email):
        return self.users.get(email)

    def save(self, user):
        self.saves += 1
        for key in [k for k, v in self.users.items() if v is user]:
            del self.users[key]
        self.users[user.email] = user
        return user

    def delete(self, user):
        self.deletes += 1
        del self.users[user.email]


@pytest.fixture
def fast_hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def repository():
    return InMemoryUserRepository(
        [
            User(email="a@x.com", username="alice", password="hash-a", roles="admin user"),
            User(email="b@x.com", username="bob", password="hash-b", roles="user"),
        ]
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def client(session_factory, fast_hasher):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: fast_hasher
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(client):
    """Client with two users: a@x.com (admin user) and b@x.com (user)."""
    client.post(
        "/api/v1/users/addUser",
        json={"email": "a@x.com", "username": "alice", "password": "pw-a", "roles": "admin user"},
    )
    client.post(
        "/api/v1/users/addUser",
        json={"email": "b@x.com", "username": "bob", "password": "pw-b", "roles": "user"},
    )
    return client
