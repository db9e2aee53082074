"""
Storage for users and movies.

Both collections are plain keyed maps: users by email, movies by
title.  ``memory`` keeps them in process dictionaries and ``sqlite``
persists them through ``core.db``.  The rental service only depends on
the interfaces in ``base``.
"""

from .base import MovieRepository, UserRepository  # noqa: F401
from .memory import InMemoryMovieRepository, InMemoryUserRepository  # noqa: F401
from .sqlite import SqliteMovieRepository, SqliteUserRepository  # noqa: F401
