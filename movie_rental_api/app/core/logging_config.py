"""
Logging configuration for the Movie Rental API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it runs.  Every module logs
through ``logging.getLogger(__name__)``, so all service messages end up
under the ``movie_rental_api`` logger, whose level always follows
``LOG_LEVEL`` even when something else (uvicorn, pytest) configured the
root logger first.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "movie_rental_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the application.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  Only used when the root
        logger has no handlers yet.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
