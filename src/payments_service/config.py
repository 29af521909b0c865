"""Application settings using Pydantic for environment-based configuration."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from ``PAYMENTS_*`` environment variables."""

    # Application
    app_name: str = Field(default="payments-service", description="Application name")
    app_env: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON lines")

    # Pipeline wiring
    repository_backend: Literal["stub", "memory"] = Field(
        default="stub",
        description="'stub' fabricates lookups; 'memory' keeps saved payments in a dict",
    )
    notification_channel: Literal["email", "sms", "push"] = Field(
        default="email", description="Notifier used after a payment is saved"
    )
    payment_amount: int = Field(default=100, gt=0, description="Amount of processed payments")

    # API
    api_host: str = Field(default="127.0.0.1", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")

    model_config = SettingsConfigDict(
        env_prefix="PAYMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level. Must be one of: {list(VALID_LOG_LEVELS)}")
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
