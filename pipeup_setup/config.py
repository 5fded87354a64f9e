"""
Bootstrap configuration from environment.
Names match the variables the setup shell script used (API_URL, TEST_EMAIL, ...).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend
    api_url: str = "http://localhost:8000"
    request_timeout: float = 10.0

    # Test user credentials
    test_email: str = "test@example.com"
    test_username: str = "testuser"
    test_password: str = "testpassword123"

    # API token for the CLI
    api_token_name: str = "CLI Test Token"
    token_env_var: str = "PIPEUP_TOKEN"

    # Observability
    sentry_dsn: Optional[str] = None
    app_env: str = "development"
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
