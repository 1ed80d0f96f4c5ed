"""
Basic Resource — Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.
"""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Templates ship inside the package: app/templates/
_DEFAULT_TEMPLATES_DIR = str(Path(__file__).resolve().parent / "templates")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    Attributes are grouped by concern for readability.
    """

    # ── Templates ─────────────────────────────────────────────────────────
    # What: Directory the Jinja2 environment loads `<name>.html` files from
    templates_dir: str = Field(
        default=_DEFAULT_TEMPLATES_DIR,
        description="Directory containing the HTML templates",
    )

    # What: Name bound into the greeting when no path segment is given
    default_name: str = Field(default="micmine", min_length=1)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1024, le=65535)

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
        "case_sensitive": False,  # TEMPLATES_DIR and templates_dir both work
    }


# Singleton instance — imported throughout the application
settings = Settings()
