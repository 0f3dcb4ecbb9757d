"""
KB Notes Backend — Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults that reproduce the stock behavior:
    serve the built-in catalog on localhost:8080 and create `notes.db`
    in the working directory.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # What: Path of the SQLite file created at startup
    # The file only ever receives an empty `folders` table
    database_path: str = Field(
        default="notes.db",
        description="SQLite database file created on startup",
    )

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the configured SQLite file."""
        return f"sqlite+aiosqlite:///{self.database_path}"

    # ── Catalog ───────────────────────────────────────────────────────────
    # What: Optional JSON document replacing the built-in folders and notes
    # Unset means the built-in seed is served
    catalog_file: Optional[str] = Field(
        default=None,
        description="JSON file with folders and notes to serve instead of the built-in seed",
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="localhost")
    backend_port: int = Field(default=8080, ge=1, le=65535)

    # What: Indentation of JSON response bodies (0 disables pretty-printing)
    json_indent: int = Field(default=4, ge=0, le=8)

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_PATH and database_path both work
    }


# Singleton instance — imported throughout the application
settings = Settings()
