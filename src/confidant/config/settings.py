"""
Application settings using Pydantic.

This module provides runtime configuration with environment variable support.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from confidant.config.constants import (
    AFTERNOON_END_HOUR,
    ENV_PREFIX,
    MORNING_END_HOUR,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Settings can be overridden via environment variables prefixed with CONFIDANT_
    For example: CONFIDANT_RANDOM_SEED=42
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow other env vars without error
    )

    # Greeting buckets
    morning_end_hour: int = Field(
        default=MORNING_END_HOUR,
        description="First hour that is no longer greeted as morning",
        ge=0,
        le=24,
    )

    afternoon_end_hour: int = Field(
        default=AFTERNOON_END_HOUR,
        description="First hour that is greeted as evening",
        ge=0,
        le=24,
    )

    # Randomness
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for fallback response selection (None = nondeterministic)",
        ge=0,
    )

    # Runtime
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @model_validator(mode="after")
    def _check_hour_order(self) -> "Settings":
        if self.morning_end_hour > self.afternoon_end_hour:
            raise ValueError(
                f"morning_end_hour ({self.morning_end_hour}) must not exceed "
                f"afternoon_end_hour ({self.afternoon_end_hour})"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the process-wide settings, read from the environment on first use.

    Call ``get_settings.cache_clear()`` to re-read after changing the environment.
    """
    return Settings()
