"""
Configuration for proctree.

Loaded with pydantic-settings from ``PROCTREE_*`` environment variables and an
optional ``.env`` file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """proctree settings with validation."""

    LOG_LEVEL: str = Field(default="INFO", description="Log level for setup_logger")
    LOG_FILE: Optional[str] = Field(default=None, description="Optional log file path")

    MALFORMED_ROWS: Literal["skip", "fail"] = Field(
        default="skip",
        description="What to do with listing rows that do not decode",
    )
    MAX_TREE_DEPTH: int = Field(
        default=256,
        description="Deepest parent/child nesting followed when building a tree",
    )

    model_config = SettingsConfigDict(
        env_prefix="PROCTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("MAX_TREE_DEPTH")
    @classmethod
    def validate_max_tree_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_TREE_DEPTH must be at least 1")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
