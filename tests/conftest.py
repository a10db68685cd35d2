# /tests/conftest.py

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from attendance_app.db.base import Base
from attendance_app.db.database import enable_sqlite_foreign_keys, get_db
from attendance_app.main import app
from attendance_app.services.class_helpers.edit_form import class_save_guard

FIXED_TODAY = date(2026, 3, 15)


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database per test, with foreign keys enforced."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fixed_today(mocker):
    """Pins "today" for everything that asks the datetime utils."""
    mocker.patch("attendance_app.common.datetime_utils.today_utc", return_value=FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture
def client(engine, fixed_today):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: the lifespan would create tables in the
    # configured (non-test) database.
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()
    class_save_guard._in_flight.clear()


def register_and_login(client, username="alice", password="s3cret-pass"):
    response = client.post("/api/auth/register", json={"username": username, "password": password})
    assert response.status_code == 201, response.text
    response = client.post("/api/auth/token", data={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def login_as(client):
    """Registers an account and returns the Authorization header of a fresh session."""
    def _login_as(username="alice", password="s3cret-pass"):
        return register_and_login(client, username=username, password=password)
    return _login_as


@pytest.fixture
def auth_headers(login_as):
    return login_as()
