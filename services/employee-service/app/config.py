"""
Configuration module for employee service.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
Implements validation and type safety for all configuration parameters.
"""

from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings for the employee service.

    All settings can be configured via environment variables.
    Settings are validated on instantiation to ensure correct configuration.

    Attributes:
        SERVICE_NAME: Name used for log and metric identification
        APP_NAME: Display name for the application
        DEBUG: Enable debug mode (shows API docs)
        HOST: Server bind address
        PORT: Server port number
        DIRECTORY_API_URL: Base URL of the remote employee directory API
        REQUEST_TIMEOUT: Timeout for directory requests in seconds
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console output
        CORS_ORIGINS: Comma separated list of allowed origins
    """

    SERVICE_NAME: str = Field(
        default="employee-service",
        description="Service name for log and metric identification",
    )
    APP_NAME: str = Field(
        default="Employee Directory Service",
        description="Display name for the application",
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Server configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    PORT: int = Field(
        default=8111,
        ge=1,
        le=65535,
        description="Server port number",
    )

    # Remote directory
    DIRECTORY_API_URL: str = Field(
        default="http://localhost:8112/api/v1",
        description="Base URL of the remote employee directory API",
    )
    REQUEST_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        le=60.0,
        description="Timeout for directory requests in seconds",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=True,
        description="Render logs as JSON",
    )

    CORS_ORIGINS: str = Field(
        default="*",
        description="Comma separated list of allowed CORS origins",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DIRECTORY_API_URL")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """
        Validate that the directory URL is properly formatted.

        Args:
            value: The URL to validate

        Returns:
            The validated URL without trailing slash

        Raises:
            ValueError: If URL is invalid
        """
        if not value:
            raise ValueError("Directory API URL cannot be empty")

        value = value.rstrip("/")

        if not (value.startswith("http://") or value.startswith("https://")):
            raise ValueError(
                f"Directory API URL must start with http:// or https://, got: {value}"
            )

        return value

    @property
    def cors_origins_list(self) -> List[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
