"""Configuration management using Pydantic BaseSettings."""
from __future__ import annotations

import logging
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TASKHOOK_",
        env_file=".env",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Archive transition: from one status into any of the target statuses
    archive_from_status: str = "pending"
    archive_to_statuses: List[str] = ["completed", "deleted"]

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, v):
        if not v:
            return "WARNING"
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        """Load configuration from environment variables."""
        return cls()
