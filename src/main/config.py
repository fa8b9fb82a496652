"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/tasks_db",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="tasks_db", description="Name of the MongoDB database"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class ApiSettings(BaseSettings):
    """HTTP API configuration settings."""

    title: str = Field(default="Devices & Tasks API", description="API title")
    description: str = Field(
        default="JSON API for devices and the maintenance tasks recorded on them",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    prefix: str = Field(default="/api", description="Path prefix of every route")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=3000, description="Port to bind the server")
    debug: bool = Field(default=False, description="Enable debug mode")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="API_", case_sensitive=False, extra="ignore"
    )


class CorsSettings(BaseSettings):
    """Headers sent in answer to CORS preflight requests."""

    allow_headers: str = Field(
        default="Content-Type,Accept",
        description="Value of Access-Control-Allow-Headers",
    )
    max_age: int = Field(
        default=86400, description="Value of Access-Control-Max-Age (seconds)"
    )
    expose_headers: str = Field(
        default="Content-Type,Accept",
        description="Value of Access-Control-Expose-Headers",
    )

    model_config = SettingsConfigDict(
        env_prefix="CORS_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    cors: CorsSettings = Field(default_factory=CorsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()


settings = get_settings()
