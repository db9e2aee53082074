"""Construct a ``RentalService`` from application settings."""

import logging
from typing import Optional

from ..core.config import Settings, settings as default_settings
from ..core.db import get_database_path, init_db
from ..core.security import Pbkdf2PasswordHasher
from ..repositories import (
    InMemoryMovieRepository,
    InMemoryUserRepository,
    SqliteMovieRepository,
    SqliteUserRepository,
)
from .rental_service import RentalService

logger = logging.getLogger(__name__)


def build_rental_service(config: Optional[Settings] = None) -> RentalService:
    """Return a service backed by the configured storage.

    ``memory`` keeps everything in process; ``sqlite`` applies pending
    migrations to ``config.database_url`` first.  Any other backend name
    is a configuration error.
    """
    config = config or default_settings
    backend = config.storage_backend.lower()
    if backend == "memory":
        users, movies = InMemoryUserRepository(), InMemoryMovieRepository()
    elif backend == "sqlite":
        db_path = get_database_path(config.database_url)
        init_db(db_path)
        users, movies = SqliteUserRepository(db_path), SqliteMovieRepository(db_path)
    else:
        raise ValueError(f"Unknown storage backend: {config.storage_backend}")
    logger.info("Using %s storage", backend)
    return RentalService(
        users,
        movies,
        Pbkdf2PasswordHasher(config.password_hash_iterations),
        user_email_domain=config.user_email_domain,
        admin_email_domain=config.admin_email_domain,
    )
