"""
Application package initializer.

The project is split into small pieces: ``core`` holds configuration,
logging, security and the SQLite helpers, ``repositories`` stores users
and movies, ``services`` holds the rental business logic and ``api``
exposes it over HTTP.  Versioning is handled by grouping routers under
the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
