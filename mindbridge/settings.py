"""Application settings using pydantic-settings.

Loads configuration from environment variables with .env file support.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,  # Allow both field name and alias
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level for mindbridge loggers",
    )

    # Backend API
    api_base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the Mindbridge backend",
        validation_alias=AliasChoices("api_base_url", "mindbridge_api_url"),
    )
    api_token: SecretStr = Field(
        default=SecretStr(""),
        description="Bearer token presented to the backend",
        validation_alias=AliasChoices("api_token", "mindbridge_token"),
    )
    request_timeout: int = Field(
        default=30,
        ge=1,
        le=300,
        description="HTTP request timeout in seconds",
    )

    # Counselor dashboard
    sessions_file: str = Field(
        default="sessions.json",
        description="JSON file holding session records for the counselor dashboard",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are loaded once and reused.
    """
    return Settings()
