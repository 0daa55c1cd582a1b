"""Application configuration using Pydantic Settings.

Loads configuration from environment variables and .env files.
Algorithm tunables live in GraphSettings, logging in LoggingSettings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphSettings(BaseSettings):
    """Graph algorithm configuration."""

    model_config = SettingsConfigDict(env_prefix="GRAPH_")

    # A* expansion budget; None means the search runs until the open set empties
    astar_max_expansions: int | None = Field(default=None, ge=1)

    # Upper bound on cycles reported by a single detect_cycles call
    cycle_limit: int | None = Field(default=None, ge=1)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"
    include_timestamp: bool = True
    include_caller: bool = True


class Settings(BaseSettings):
    """Main application settings aggregating all configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Application info
    app_name: str = "graphcore"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    # Sub-configurations
    graph: GraphSettings = Field(default_factory=GraphSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton."""
    return Settings()
