"""
Configuration and settings for the roster service.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_prefix: str = Field(default="/api")

    # HTTP server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO")

    # Database (MongoDB expected)
    mongodb_url: Optional[str] = Field(default=None)
    mongodb_database: str = Field(default="roster")
    mongodb_collection: str = Field(default="teams")
    mongodb_timeout_ms: int = Field(default=5000)

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False,
        validation_alias="ROSTER_USE_IN_MEMORY_BACKENDS",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
