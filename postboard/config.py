"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - AWS credentials are never settings; boto3 resolves them from its own chain
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults work for the deployed Lambda; local runs override via .env
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: Literal["dynamodb", "memory"] = "dynamodb"
    posts_table_name: str = "cs351-project-posts"
    aws_region: str | None = None
    dynamodb_endpoint_url: str | None = None

    @field_validator("dynamodb_endpoint_url", mode="before")
    @classmethod
    def blank_endpoint_is_none(cls, v: str | None) -> str | None:
        """An empty DYNAMODB_ENDPOINT_URL means the real AWS endpoint."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Posts
    post_retention_days: int = 30
    default_page_count: int = 1

    # Errors
    include_error_stack: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def post_retention_seconds(self) -> int:
        return self.post_retention_days * 24 * 60 * 60


@lru_cache
def get_settings() -> Settings:
    return Settings()
