"""
Main entrypoint for the Movie Rental API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn, e.g.::

    uvicorn movie_rental_api.app.main:app --reload

or with ``python run.py`` from the project root.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services import RentalService, build_rental_service


def create_app(service: Optional[RentalService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[RentalService]
        Service the endpoints operate on.  When omitted one is built
        from the settings, which also applies SQLite migrations when
        the ``sqlite`` backend is selected.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that service
    # construction can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.rental_service = service or build_rental_service(settings)

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
