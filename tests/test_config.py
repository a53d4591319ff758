"""
Unit tests for configuration module.
"""
import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings, reset_settings


@pytest.fixture
def env(monkeypatch, tmp_path):
    """Minimal environment with the required secret."""
    for name in ["PORT", "LOG_LEVEL", "DATABASE_PATH", "DATABASE_TIMEOUT", "AUTH_USERS", "AUTH_REQUIRED"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("JWT_SECRET", "test-key")
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "db" / "wire.db"))
    return monkeypatch


def test_settings_defaults(env):
    """Test default configuration values."""
    settings = get_settings()
    assert settings.app_name == "Pillar Bank Wire Message Service"
    assert settings.host == "localhost"
    assert settings.port == 8080
    assert settings.log_level == "INFO"
    assert settings.database_timeout == 5.0
    assert settings.jwt_issuer == "pillar-bank"
    assert settings.token_ttl_minutes == 15
    assert settings.auth_required is True
    assert settings.default_page_size == 50


def test_settings_creates_database_directory(env, tmp_path):
    get_settings()
    assert (tmp_path / "db").is_dir()


def test_settings_requires_jwt_secret(env):
    env.delenv("JWT_SECRET")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_rejects_blank_jwt_secret(env):
    env.setenv("JWT_SECRET", "   ")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_validation_port(env):
    """Test port validation."""
    env.setenv("PORT", "99999")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_validation_log_level(env):
    """Test log level validation."""
    env.setenv("LOG_LEVEL", "INVALID")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_validation_timeout(env):
    env.setenv("DATABASE_TIMEOUT", "0")
    with pytest.raises(ValidationError):
        get_settings()


def test_log_level_is_normalized(env):
    env.setenv("LOG_LEVEL", "debug")
    assert get_settings().log_level == "DEBUG"


def test_settings_singleton(env):
    """Test settings singleton behavior."""
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2

    reset_settings()
    assert get_settings() is not settings1


def test_credentials_parsing():
    settings = Settings(JWT_SECRET="k", AUTH_USERS="user1:password1, user2:pa:ss ,broken,:nouser")
    assert settings.credentials() == {"user1": "password1", "user2": "pa:ss"}


def test_credentials_empty():
    assert Settings(JWT_SECRET="k", AUTH_USERS="").credentials() == {}
