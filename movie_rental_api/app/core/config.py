"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  In a
production deployment you should override these via environment
variables or a dedicated configuration service.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Movie Rental API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Where users and movies live: ``memory`` keeps them in process
    # dictionaries, ``sqlite`` persists them in ``database_url``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "memory")

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "movie_rental.db")

    # The email suffix decides the role at registration time.
    user_email_domain: str = os.getenv("USER_EMAIL_DOMAIN", "@gmail.com")
    admin_email_domain: str = os.getenv("ADMIN_EMAIL_DOMAIN", "@admin.com")

    password_hash_iterations: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "100000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
