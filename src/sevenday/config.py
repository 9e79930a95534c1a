"""Configuration settings for sevenday.

Values come from environment variables prefixed with ``SEVENDAY_`` or from a
``.env`` file in the working directory.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory (project root / data)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = DEFAULT_DATA_DIR
    db_name: str = "sevenday.db"

    # Display unit for weights and deltas
    weight_unit: str = "lbs"

    log_level: str = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if v in ("", None):
            return "WARNING"
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="SEVENDAY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
