"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # API
    api_title: str = "Schengen Allowance API"
    api_version: str = "0.1.0"

    # Allowance rule (days)
    max_stay_days: int = 90
    window_days: int = 180

    # Earliest-availability search horizon (days)
    search_horizon_days: int = 365

    # Longest span a single breakdown request may cover (days)
    max_breakdown_days: int = 3660


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
