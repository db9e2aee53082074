"""
Service layer.

``RentalService`` holds the business rules; ``build_rental_service``
wires it to the storage backend chosen in the settings.
"""

from .rental_service import RentalService  # noqa: F401
from .factory import build_rental_service  # noqa: F401
