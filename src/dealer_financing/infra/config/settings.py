"""Application settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    app_name: str = "Dealer Financing API"
    environment: str = "development"
    log_level: str = "INFO"
    api_prefix: str = "/v1"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DEALER_FINANCING_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Settings are read from the environment once per process."""
    return Settings()
