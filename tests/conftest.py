import os

# Settings are read at import time; point everything at the in-memory store
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ATLAS_APP_CODE"] = "HRIS_TEST"
os.environ["APP_NAME"] = "HRIS Test"
os.environ["APP_VERSION"] = "0.0.0"
os.environ["QR_JWT_SECRET"] = "test-qr-secret"
os.environ["LOGGING_ENABLED"] = "false"
os.environ["DB_AUTO_CREATE"] = "false"

import itertools
from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.api import deps
from app.core.enums import Role
from app.db.init_db import create_tables, drop_tables
from app.db.session import engine, SessionLocal
from app.main import app
from app.repositories.user_repository import UserRepository

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture
def db():
    create_tables(engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        drop_tables(engine)


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)
    repo = UserRepository()

    def _make(role: Role = Role.EMPLOYEE, **overrides):
        n = next(counter)
        data = {
            "username": f"user{n}",
            "email": f"user{n}@example.com",
            "first_name": "Test",
            "last_name": f"User{n}",
            "role": Role(role).value,
            "join_date": date(2024, 1, 15),
            "is_active": True,
        }
        data.update(overrides)
        return repo.create(db, data)

    return _make


@pytest.fixture
def admin(make_user):
    return make_user(Role.ADMIN, username="admin", email=ADMIN_EMAIL)


@pytest.fixture
def identity():
    """Atlas identity returned for every request; tests mutate it to switch users"""
    return {
        "user_id": 1,
        "username": "admin",
        "email": ADMIN_EMAIL,
        "role_level": 100,
        "roles": [],
        "full_name": "Ada Admin",
        "status": "active",
    }


@pytest.fixture
def client(db, identity):
    app.dependency_overrides[deps.get_current_user] = lambda: identity or None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def act_as(identity):
    """Switch the signed-in identity to the given employee"""
    def _act_as(user) -> None:
        identity["email"] = user.email
        identity["username"] = user.username

    return _act_as
