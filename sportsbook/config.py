"""
Configuration settings for the sportsbook listing services.

Uses Pydantic Settings to load environment variables for the SQLite database
locations, logging, and seed data defaults.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    racing_db_path: str = Field("./racing.db", alias="RACING_DB_PATH")
    sports_db_path: str = Field("./sports.db", alias="SPORTS_DB_PATH")
    db_timeout_seconds: float = Field(5.0, alias="DB_TIMEOUT_SECONDS")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Seed defaults
    seed_race_count: int = Field(100, alias="SEED_RACE_COUNT")
    seed_meeting_count: int = Field(10, alias="SEED_MEETING_COUNT")
    seed_random_seed: int = Field(42, alias="SEED_RANDOM_SEED")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
