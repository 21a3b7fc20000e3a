"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started locally without any setup.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "PackPal API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "packpal.db")

    # Name of the cookie carrying the opaque session token.
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "PACKPAL_SESSION")

    # Sessions not used for this many minutes are discarded.
    session_idle_minutes: int = int(os.getenv("SESSION_IDLE_MINUTES", "30"))

    # How many live sessions a single account may hold.  Logging in once
    # more evicts the oldest session of that account.
    max_sessions_per_identity: int = int(os.getenv("MAX_SESSIONS_PER_IDENTITY", "1"))

    # Comma-separated list of browser origins allowed to call the API
    # with credentials (the session cookie).
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")

    password_hash_iterations: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "100000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
