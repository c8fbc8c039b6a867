# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DEFAULT_DIOCESE)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, catching configuration
# errors early rather than at runtime.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lib.dioceses import DEFAULT_DIOCESE, SUPPORTED_DIOCESES


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default, so the service starts with no
    configuration at all.
    """

    # -------------------------------------------------------------------------
    # Service Identity
    # -------------------------------------------------------------------------

    SERVICE_NAME: str = Field(
        default="tempus-bede",
        description="Service name reported by / and /health"
    )

    VERSION: str = Field(
        default="0.1.0",
        description="API version reported by / and /health"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated, * for any)"
    )

    # -------------------------------------------------------------------------
    # Calendar Settings
    # -------------------------------------------------------------------------

    DEFAULT_DIOCESE: str = Field(
        default=DEFAULT_DIOCESE,
        description="Diocese used when a request doesn't specify one"
    )

    # Engine failures read as 404 NOT_FOUND unless this is set
    EXPOSE_ENGINE_FAILURES: bool = Field(
        default=False,
        description="Report calendar engine faults as 500 ENGINE_FAILURE"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DEFAULT_DIOCESE")
    @classmethod
    def validate_default_diocese(cls, value: str) -> str:
        if value not in SUPPORTED_DIOCESES:
            raise ValueError(
                f"DEFAULT_DIOCESE must be one of: {', '.join(SUPPORTED_DIOCESES)}"
            )
        return value

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
