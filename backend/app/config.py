"""
Storefront API — Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, the store factory and the info route.
When:  Loaded once at module import time.

None of these values change the shape of the API; they only control
reporting (app name/version), the docs UI, logging and demo seeding.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from app import __version__


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults; the service starts with no
    environment at all.
    """

    # ── Identity ──────────────────────────────────────────────────────────
    # Reported verbatim by GET /info
    app_name: str = Field(default="TestDotnetApi")
    app_version: str = Field(default=__version__)

    # What: Deployment environment name
    # The interactive docs (/docs, /redoc, /openapi.json) are only mounted
    # in "development"
    environment: str = Field(default="production")

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1, le=65535)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Store ─────────────────────────────────────────────────────────────
    # What: Whether a fresh store starts with the three demo products
    seed_products: bool = Field(default=True)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance, imported throughout the application
settings = Settings()
