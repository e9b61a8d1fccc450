"""Application configuration using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "MovieFlix"
    debug: bool = False
    log_level: str = "INFO"

    # TMDB API
    tmdb_api_key: str = ""
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_language: str = "en-US"
    tmdb_timeout: float = 30.0

    # Widget snapshot
    widget_store_key: str = "widget_trending_movies"
    widget_movie_limit: int = 5
    widget_refresh_minutes: int = 60

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("widget_movie_limit", "widget_refresh_minutes")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if not self.tmdb_api_key:
            warnings.append("TMDB_API_KEY is not set - movie catalog will not load")

        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
