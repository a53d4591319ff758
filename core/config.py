"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
from pathlib import Path
from typing import Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="Pillar Bank Wire Message Service", alias="APP_NAME")
    host: str = Field(default="localhost", alias="HOST")
    port: int = Field(default=8080)
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Storage
    database_path: str = Field(default="pillar_bank.db", alias="DATABASE_PATH")
    database_timeout: float = Field(default=5.0, alias="DATABASE_TIMEOUT")
    default_page_size: int = Field(default=50, alias="DEFAULT_PAGE_SIZE")

    # Authentication
    jwt_secret: str = Field(..., alias="JWT_SECRET")
    jwt_issuer: str = Field(default="pillar-bank", alias="JWT_ISSUER")
    token_ttl_minutes: int = Field(default=15, alias="TOKEN_TTL_MINUTES")
    auth_required: bool = Field(default=True, alias="AUTH_REQUIRED")
    auth_users: str = Field(default="", alias="AUTH_USERS")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """Validate port is in valid range."""
        if not (1 <= v <= 65535):
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("database_timeout")
    @classmethod
    def validate_database_timeout(cls, v):
        """Lock waits must be bounded."""
        if v <= 0:
            raise ValueError("Database timeout must be positive")
        return v

    @field_validator("token_ttl_minutes", "default_page_size")
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @field_validator("jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, v):
        """Refuse to sign tokens with an empty key."""
        if not v.strip():
            raise ValueError("JWT secret must not be empty")
        return v

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"

    def credentials(self) -> Dict[str, str]:
        """
        Parse AUTH_USERS into a username -> password mapping.

        Format: "user1:password1,user2:password2". Entries without a
        colon are ignored.
        """
        users = {}
        for entry in self.auth_users.split(","):
            username, separator, password = entry.strip().partition(":")
            if separator and username:
                users[username] = password
        return users

    def ensure_directories(self) -> None:
        """Ensure the database directory exists."""
        Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.ensure_directories()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
