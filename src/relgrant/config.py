"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from relgrant.domain.value_objects import ANONYMOUS_USER, PUBLIC_COLLECTION


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Keto relation tuple store
    keto_read_url: str = Field(
        default="http://localhost:4466",
        description="Keto read API URL (check, query)",
    )
    keto_write_url: str = Field(
        default="http://localhost:4467",
        description="Keto write API URL (create, delete)",
    )
    keto_namespace: str = Field(default="ssm", description="Keto namespace for all tuples")
    keto_timeout: float = Field(default=10.0, gt=0, description="Keto request timeout in seconds")
    keto_page_size: int | None = Field(
        default=None,
        gt=0,
        description="Page size for tuple queries, server default when unset",
    )

    # Well-known names
    public_collection: str = Field(
        default=PUBLIC_COLLECTION,
        description="Collection readable and writable by every user",
    )
    anonymous_user: str = Field(
        default=ANONYMOUS_USER,
        description="Subject used for unauthenticated access",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
