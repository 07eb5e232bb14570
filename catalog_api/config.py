"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The database location comes from MONGODB_URI only (never hardcoded in code paths)
    - get_settings() is cached (lru_cache) — read once per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Collection names configurable, defaults kept literal ("courses", "semester")
      so existing databases keep working (ADR: compatibility over naming symmetry)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    mongodb_uri: str = "mongodb://localhost:27017/catalog"
    database_name: str | None = None
    course_collection: str = "courses"
    semester_collection: str = "semester"

    @field_validator("database_name", mode="before")
    @classmethod
    def blank_database_name_is_unset(cls, v: str | None) -> str | None:
        """DATABASE_NAME= (empty) means fall back to the URI's database."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
