"""
Configuration Settings.

This module defines the package configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        alias="EXTENSION_KIT_LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: str = Field(
        default="detailed", alias="EXTENSION_KIT_LOG_FORMAT", description="Log format (simple, detailed, json)"
    )
    file_dir: str = Field(
        default="logs", alias="EXTENSION_KIT_LOG_FILE_DIR", description="Directory for the log file"
    )
    enable_file: bool = Field(
        default=False, alias="EXTENSION_KIT_ENABLE_FILE_LOGGING", description="Also write logs to a file"
    )

    model_config = {"populate_by_name": True}


class Settings(BaseSettings):
    """
    Package settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="EXTENSION_KIT_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log format (simple, detailed, json)",
        alias="EXTENSION_KIT_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="EXTENSION_KIT_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to a file",
        alias="EXTENSION_KIT_ENABLE_FILE_LOGGING",
    )

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
