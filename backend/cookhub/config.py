"""
CookHub Backend — Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and exposes a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before the app starts.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# backend/, where index.html and static/ ship next to the package
BACKEND_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Attributes are grouped by concern.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # What: Location of the single SQLite file holding all six tables
    # Created (and seeded) on first start if it does not exist
    database_path: str = Field(
        default="./cooking_platform.db",
        description="Path to the SQLite database file",
    )

    # What: Echo every SQL statement through the sqlalchemy.engine logger
    db_echo: bool = Field(default=False)

    # What: Issue `PRAGMA foreign_keys=ON` on every new connection
    # Off by default: SQLite ships with foreign keys unenforced, and recipes,
    # subscriptions and enrollments referencing unknown rows are accepted
    enforce_foreign_keys: bool = Field(default=False)

    # What: Delete and recreate the database file when the integrity check fails
    # WARNING: destructive, every row in a corrupted file is lost.
    # Set to false to make a failed check fatal instead.
    recover_corrupt_database: bool = Field(default=True)

    # What: Insert the fixed demo dataset when the chefs table is empty
    seed_on_startup: bool = Field(default=True)

    # ── Business Rules ────────────────────────────────────────────────────
    # What: How an enrollment for a master class id with no row is answered
    # True:  404 Not Found
    # False: 409 Conflict (an unknown class has zero capacity)
    enroll_unknown_class_as_not_found: bool = Field(default=True)

    # What: Maximum number of master classes returned by /api/recommendations
    recommendation_limit: int = Field(default=10, ge=1, le=100)

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_allow_origin: str = Field(default="*")
    cors_allow_methods: str = Field(default="GET, POST, PUT, DELETE, OPTIONS")
    cors_allow_headers: str = Field(default="Content-Type, Authorization")

    # What: Allowed headers on the landing page and search endpoint
    cors_narrow_allow_headers: str = Field(default="Content-Type")
    cors_max_age: int = Field(default=3600, ge=0, le=86400)

    # ── Static Content ────────────────────────────────────────────────────
    # Defaults resolve against backend/, not the working directory
    index_file: str = Field(default=str(BACKEND_DIR / "index.html"))
    static_dir: str = Field(default=str(BACKEND_DIR / "static"))

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1, le=65535)

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

    @property
    def index_path(self) -> Path:
        return Path(self.index_file)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_PATH and database_path both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
