"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - No secrets in settings: admin keys are per-invocation inputs, never configuration
    - get_settings() is cached (lru_cache) — single instance per process
    - Base URL stored without trailing slash (paths always start with "/")

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Timeout lives here, not in the core: it is a transport concern
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Counter service
    counter_api_base_url: str = "https://abacus.jasoncameron.dev"
    counter_api_timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = Field(default="counterops/1.0", min_length=1)

    @field_validator("counter_api_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
