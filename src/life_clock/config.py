"""
Application configuration using Pydantic Settings.

Values come from ``LIFE_CLOCK_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="LIFE_CLOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "life-clock"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Where the settings file lives and where the static page is written
    data_dir: Path = Path("data")
    site_dir: Path = Path("site")

    api_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
