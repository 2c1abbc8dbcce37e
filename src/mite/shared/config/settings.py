"""Application settings using Pydantic."""

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mite import __version__


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(env_prefix="MITE_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_colored: bool = True


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_prefix="MITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Application info
    app_name: str = "mite"
    app_version: str = __version__
    debug: bool = False

    # Sub-settings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def get_logging_config(self) -> dict[str, Any]:
        """Get logging configuration as dictionary."""
        return {
            "level": "DEBUG" if self.debug else self.logging.level.upper(),
            "format": self.logging.format,
            "console_colored": self.logging.console_colored,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
