"""
Job Board — Application Configuration
======================================

What:  Immutable configuration loaded from environment variables with Pydantic Settings.
How:   `Settings()` reads the environment (or a .env file) once, validates types
       and ranges, and freezes. The instance is built at process start and handed
       to `create_app()`; components receive it explicitly instead of importing a
       module-level singleton.
Who:   Built by `jobboard.__main__` (production) and by tests (explicit kwargs).

Environment variables:
    DATABASE_URL   Path or URL of the SQLite database file
    SECRET_KEY     Token-signing key (held, not used yet)
    HOST / PORT    Bind address for uvicorn
    LOG_LEVEL      DEBUG, INFO, WARNING, ERROR or CRITICAL
    CORS_ORIGINS   Comma-separated allowed origins ("*" for any)
    API_KEY        Expected value of the X-API-Key header
    API_KEY_MODE   off | log | require
"""

from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import make_url

SQLITE_ASYNC_SCHEME = "sqlite+aiosqlite"
API_KEY_MODES = {"off", "log", "require"}


def normalize_database_url(value: str) -> str:
    """
    Turn a DATABASE_URL value into an async SQLAlchemy URL for SQLite.

    Accepted forms:
        /data/jobboard.db                   → sqlite+aiosqlite:////data/jobboard.db
        ./jobboard.db                       → sqlite+aiosqlite:///./jobboard.db
        sqlite:///jobboard.db               → sqlite+aiosqlite:///jobboard.db
        sqlite+aiosqlite:///jobboard.db     → unchanged

    Raises:
        ValueError: empty value or a URL for a non-SQLite backend.
    """
    value = value.strip()
    if not value:
        raise ValueError("DATABASE_URL must not be empty")

    if "://" not in value:
        return f"{SQLITE_ASYNC_SCHEME}:///{value}"

    scheme, _, rest = value.partition("://")
    if scheme == SQLITE_ASYNC_SCHEME:
        return value
    if scheme == "sqlite" or scheme.startswith("sqlite+"):
        return f"{SQLITE_ASYNC_SCHEME}://{rest}"
    raise ValueError(
        f"Unsupported DATABASE_URL scheme '{scheme}'. "
        "Only an embedded SQLite database file is supported."
    )


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. The container image sets
    DATABASE_URL to a file inside the /data volume.
    """

    # ── Database ──────────────────────────────────────────────────────────
    database_url: str = Field(
        default="./data/jobboard.db",
        description="Filesystem path or sqlite URL of the database file",
    )

    # ── Security ──────────────────────────────────────────────────────────
    secret_key: str = Field(
        default="",
        description="Key reserved for token signing",
    )
    api_key: str = Field(default="", description="Expected X-API-Key header value")
    api_key_mode: str = Field(default="off", description="off, log or require")

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "frozen": True,
    }

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        return normalize_database_url(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("api_key_mode")
    @classmethod
    def validate_api_key_mode(cls, v: str) -> str:
        lower = v.lower()
        if lower not in API_KEY_MODES:
            raise ValueError(f"Invalid api_key_mode '{v}'. Must be one of: {API_KEY_MODES}")
        return lower

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def database_path(self) -> Optional[Path]:
        """
        Filesystem location of the database file.

        None for in-memory databases, which have no file to create.
        """
        database = make_url(self.database_url).database
        if not database or database == ":memory:":
            return None
        return Path(database)

    def validate_for_startup(self) -> List[str]:
        """
        Checks settings combinations that a single field validator cannot see.

        Returns:
            Warnings that do not prevent startup.

        Raises:
            ValueError: The configuration cannot be served.
        """
        errors = []
        warnings = []
        if self.api_key_mode == "require" and not self.api_key:
            errors.append("API_KEY_MODE=require but API_KEY is not set.")
        if self.api_key_mode != "off" and not self.api_key:
            warnings.append("API_KEY is empty; every key will be treated as invalid.")
        if not self.secret_key:
            warnings.append("SECRET_KEY is not set. Token signing is unavailable.")
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )
        return warnings
