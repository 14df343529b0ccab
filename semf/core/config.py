"""Configuration management for the SEMF scoring service.

This module handles configuration loading and validation using Pydantic
Settings for type safety and environment variable support. Scoring constants
(cutoffs, tie-break margin, answer key) are fixed data, not settings.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from semf.utils.logger import setup_logging


class Settings(BaseSettings):
    """Application settings with validation and type hints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    APP_NAME: str = Field(default="SEMF Scoring", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_ENV: str = Field(
        default="development",
        description="Application environment",
        pattern="^(development|test|staging|production)$",
    )
    APP_DEBUG: bool = Field(default=True, description="Debug mode")
    APP_HOST: str = Field(default="0.0.0.0", description="Application host")
    APP_PORT: int = Field(default=8000, description="Application port", ge=1, le=65535)

    # API Settings
    API_V1_PREFIX: str = Field(default="/api/v1", description="API v1 prefix")
    ENABLE_API_DOCS: bool = Field(default=True, description="Serve OpenAPI docs")
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    LOG_DIR: Optional[str] = Field(default=None, description="Directory for log files")

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    @field_validator("API_V1_PREFIX")
    def validate_api_prefix(cls, v: str) -> str:
        """Ensure the prefix starts with a slash and has no trailing slash."""
        if not v.startswith("/"):
            v = f"/{v}"
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings after all fields are set."""
        if self.APP_ENV == "production":
            self.APP_DEBUG = False
            self.LOG_LEVEL = "INFO" if self.LOG_LEVEL == "DEBUG" else self.LOG_LEVEL

        return self

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings instance
    """
    settings = Settings()

    setup_logging(
        environment=settings.APP_ENV,
        log_level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
    )

    return settings
