"""Shared fixtures: an in-memory SQLite database injected into the app."""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("OWNER_OPEN_ID", "owner-open-id")
os.environ.pop("DATABASE_URL", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.core.database import Database, get_database
from app.core.security import create_access_token
from app.models.user_db.user_db_crud import upsert_user
from app.services.health_units import HealthUnitStore
from app.services.roles import UserRole
from main import app


@pytest.fixture
def database():
    db = Database("sqlite://", poolclass=StaticPool)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def unavailable_database():
    return Database(None)


@pytest.fixture
def store(database):
    return HealthUnitStore(database)


@pytest.fixture
def client(database):
    app.dependency_overrides[get_database] = lambda: database
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(database, open_id, role):
    with database.session() as db:
        upsert_user(db, open_id=open_id, name=open_id, role=role)
    token = create_access_token({"sub": open_id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(database):
    return auth_headers(database, "admin-open-id", UserRole.admin)


@pytest.fixture
def user_headers(database):
    return auth_headers(database, "user-open-id", UserRole.user)


@pytest.fixture
def unit_payload():
    return {
        "name": "UBS Central",
        "category": "ubs",
        "address": "Rua X, 1",
        "latitude": "-23.5",
        "longitude": "-46.6",
        "occupancyLevel": "low",
        "averageWaitTime": 15,
        "waitingCount": 3,
    }
