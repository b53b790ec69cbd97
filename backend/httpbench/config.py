"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - With no environment set, the server listens on 0.0.0.0:8080 with the full route table
    - get_settings() is cached (lru_cache) — single instance per process
    - Every variable is prefixed HTTPBENCH_ (e.g. HTTPBENCH_PORT)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from httpbench.core.domain_types import LogFormat, RouteProfile


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPBENCH_", env_file=".env", case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)
    route_profile: RouteProfile = RouteProfile.FULL

    # Results aggregation
    results_dir: str = "site/public/results"
    contract_file: str = "benchmarks/contract.json"

    # Observability
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
