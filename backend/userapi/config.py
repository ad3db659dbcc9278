"""
Users API Backend - Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the logging setup and the entry point.
When:  Loaded once at module import time.
"""

from typing import Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_PORT = 8080


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults that match the service's documented behavior,
    so the server starts with no environment at all.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # PORT is the only variable the deployment contract names.
    # An empty PORT falls back to the default, same as an unset one.
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    host: str = Field(default="0.0.0.0")

    @field_validator("port", mode="before")
    @classmethod
    def default_empty_port(cls, v: Any) -> Any:
        """Treats PORT="" as unset."""
        if isinstance(v, str) and not v.strip():
            return DEFAULT_PORT
        return v

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

    # ── CORS ──────────────────────────────────────────────────────────────
    # Permissive by default: any origin may call the API.
    # Format: Comma-separated origins, or "*"
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Store ─────────────────────────────────────────────────────────────
    # Seeds John Doe / Jane Smith on startup so the API has data to show.
    seed_sample_users: bool = Field(default=True)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
