"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Subscription key and region come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single immutable instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Frozen model: settings are injected into the translator client, never mutated
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True, extra="ignore",
    )

    # Upstream translator
    translator_key: str
    translator_region: str
    translator_endpoint: str = "https://api.cognitive.microsofttranslator.com"
    translator_api_version: str = "3.0"

    @field_validator("translator_endpoint")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
