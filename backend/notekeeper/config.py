"""
NoteKeeper Backend - Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (app factory, logging) and __main__.py (server bind).
When:  Loaded once at module import time.

Every setting has a development-friendly default, so the service starts
with no environment at all: `PORT=8080 python -m notekeeper` is the
usual override.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")

    # What: TCP port uvicorn binds to
    # Env:  PORT (case-insensitive, so `port` works too)
    port: int = Field(default=3001, ge=1, le=65535)

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
    # What: Allowed origins for cross-origin requests
    # Default "*": every origin may call the API
    # Format: Comma-separated URLs (split by cors_origins_list)
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into the list CORSMiddleware expects."""
        origins = [origin.strip() for origin in self.cors_origins.split(",")]
        return [origin for origin in origins if origin] or ["*"]

    # ── Store ─────────────────────────────────────────────────────────────
    # What: Seed the in-memory store with the three fixture notes at start-up
    # Set SEED_FIXTURES=false to start from an empty collection
    seed_fixtures: bool = Field(default=True)

    # ── API Docs ──────────────────────────────────────────────────────────
    # What: Serve Swagger UI at /docs and the schema at /openapi.json
    docs_enabled: bool = Field(default=True)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }


# Singleton instance - imported throughout the application
settings = Settings()
