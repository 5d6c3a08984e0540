"""Configuration management for the Fake Braspag service."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Order store
    store_backend: Literal["memory", "redis"] = Field(
        default="memory",
        description="Key-value backend for orders (memory or redis)",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (used when store_backend=redis)",
    )
    order_key_prefix: str = Field(
        default="fake-braspag.order.",
        description="Key prefix for persisted orders",
    )

    # Service Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(default="development", description="Environment name")
    service_name: str = Field(default="fake-braspag", description="Service name")
    debug: bool = Field(default=False, description="Debug mode")

    # HTTP server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=9292, description="Bind port")

    @field_validator("store_backend", mode="before")
    @classmethod
    def normalize_store_backend(cls, value: object) -> object:
        """Accept STORE_BACKEND=Redis and similar spellings."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


# Global settings instance
settings = Settings()
