"""
Pytest configuration and fixtures for wire message tests.
"""
import pytest

from core.config import Settings, reset_settings
from core.db import Database
from services.wire_message_service import WireMessageService

TEST_SECRET = "test-secret-key-for-wire-message-tokens"


@pytest.fixture(autouse=True)
def clean_settings():
    """Never leak the settings singleton between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh SQLite file."""
    return Settings(
        JWT_SECRET=TEST_SECRET,
        DATABASE_PATH=str(tmp_path / "wire_messages.db"),
        AUTH_USERS="user1:password1",
        AUTH_REQUIRED=True,
        DEFAULT_PAGE_SIZE=50,
    )


@pytest.fixture
def db(settings):
    database = Database(settings)
    database.init_db()
    return database


@pytest.fixture
def service(db, settings):
    return WireMessageService(db, settings)


@pytest.fixture
def client(settings):
    """Unauthenticated test client."""
    from fastapi.testclient import TestClient

    from app.api import create_app

    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def auth_client(client):
    """Test client carrying a valid session token cookie."""
    token = client.app.state.token_service.create_token("user1")
    client.cookies.set("token", token)
    return client
