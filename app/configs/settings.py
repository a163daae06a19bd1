"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Blog Platform backend application.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, SecretStr
from pydantic_settings.main import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_NAME_LENGTH = 5
MAX_NAME_LENGTH = 50
MIN_TEXT_LENGTH = 5
MAX_TEXT_LENGTH = 255

# Response constants
DEFAULT_ERROR_MESSAGE = "Something went wrong."
NO_TOKEN_MESSAGE = "Access denied. No token provided."
INVALID_TOKEN_MESSAGE = "Invalid token."
FORBIDDEN_MESSAGE = "Access denied."

AUTH_TOKEN_HEADER = "x-auth-token"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog Platform API"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "testing", "staging", "production"] = "development"
    CORS_ORIGINS: list[str] = ["http://localhost:3001"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/logfile.log"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./blog.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30
    POOL_RECYCLE: int = 1800

    # Authentication
    SECRET_KEY: SecretStr | None = None
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"


class HasherConfig(BaseModel):
    """Argon2 cost parameters for one security level."""

    memory_cost: int
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, HasherConfig] = {
    "low": HasherConfig(memory_cost=8192, time_cost=1, parallelism=1),
    "medium": HasherConfig(memory_cost=65536, time_cost=2, parallelism=2),
    "high": HasherConfig(memory_cost=262144, time_cost=3, parallelism=4),
}

settings = Settings()
