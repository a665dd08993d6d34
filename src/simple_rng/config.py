"""
simple-rng Configuration

Loads application-boundary settings from environment variables. The engine
itself never reads the environment; only the CLI and init_default() do.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from simple_rng.constants import ENV_PREFIX, U64_MAX
from simple_rng.models import Algorithm, Variant


class Settings(BaseSettings):
    """simple-rng settings loaded from SIMPLE_RNG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Fixed seed for replaying a run; unset means seed from the clock
    seed: int | None = Field(None, ge=0, le=U64_MAX)

    algorithm: Algorithm = Algorithm.LCG
    variant: Variant = Variant.LCG64

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
