"""Configuration settings for logassert."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``LOGASSERT_*`` environment variables."""

    # Diagnostics emitted by logassert itself
    log_level: str = Field(default="WARNING")

    # Level given to a Logger created without an explicit one
    default_logger_level: str = Field(default="DEBUG")

    # Failure messages
    diff_limit: int = Field(
        default=2000,
        gt=0,
        description="Maximum characters of captured output shown in a failure message",
    )

    @field_validator("log_level", "default_logger_level")
    @classmethod
    def validate_level_name(cls, v: str) -> str:
        """Normalize a level name and reject unknown ones.

        Raises:
            ValueError: If the name is not a stdlib logging level
        """
        name = v.strip().upper()
        if name == "WARN":
            name = "WARNING"
        if name == "FATAL":
            name = "CRITICAL"
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return name

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LOGASSERT_",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Build a settings instance from the current environment."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
