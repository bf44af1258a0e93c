"""Shared fixtures for the test suite."""

import os
from datetime import date

# Use in-memory sqlite for tests; must be set before the engine is created
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ.setdefault("LOG_JSON", "false")
os.environ.pop("API_KEY", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from fittrack.core.session import UserSession  # noqa: E402
from fittrack.core.time_utils import get_today  # noqa: E402
from fittrack.db import Base, SessionLocal, engine  # noqa: E402
from fittrack.main import app  # noqa: E402

# Wednesday; its week runs Mon 2025-01-13 .. Sun 2025-01-19
TODAY = date(2025, 1, 15)
USER_ID = "user-1"


@pytest.fixture()
def db():
    """Fresh schema per test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def user():
    return UserSession(user_id=USER_ID)


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        c.headers.update({"X-User-Id": USER_ID})
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def anon_client(db):
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
