"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a HALLMATCH_-prefixed environment variable
    - get_settings() is cached (lru_cache) - single instance per process
    - Only the shell (services/, infrastructure/) reads settings; core/ never does

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box as a library
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hallmatch.core.domain_types import TightSearchStrategy


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HALLMATCH_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Builder
    tight_search: TightSearchStrategy = TightSearchStrategy.EXHAUSTIVE

    # Checked wrapper - exhaustive validation is 2^n, switch to alternating above this
    max_exhaustive_left: int = 16
    verify_result: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("tight_search", mode="before")
    @classmethod
    def lowercase_strategy(cls, v):
        """Accept EXHAUSTIVE / Alternating from the environment."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("max_exhaustive_left")
    @classmethod
    def non_negative_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_exhaustive_left must be >= 0")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
