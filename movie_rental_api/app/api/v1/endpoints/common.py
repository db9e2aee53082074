"""
Helpers shared by the v1 endpoints.

``get_rental_service`` hands out the service instance stored on the
application, and ``to_response`` turns a service ``Result`` into either
an ``OperationResponse`` or an ``HTTPException``.
"""

from fastapi import HTTPException, Request, status

from movie_rental_api.app.core.results import RentalError, Result
from movie_rental_api.app.schemas.response import OperationResponse
from movie_rental_api.app.services.rental_service import RentalService


ERROR_STATUS = {
    RentalError.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    RentalError.DUPLICATE_TITLE: status.HTTP_409_CONFLICT,
    RentalError.ALREADY_PURCHASED: status.HTTP_409_CONFLICT,
    RentalError.INVALID_EMAIL_FORMAT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    RentalError.INVALID_ADMIN_EMAIL_FORMAT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    RentalError.INVALID_RATING: status.HTTP_422_UNPROCESSABLE_ENTITY,
    RentalError.INVALID_PRICE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    RentalError.INVALID_DURATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    RentalError.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    RentalError.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    RentalError.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def get_rental_service(request: Request) -> RentalService:
    return request.app.state.rental_service


def raise_for_failure(result: Result) -> None:
    """Raise an HTTP error for any failure other than ``Empty``."""
    if result.ok or result.error is RentalError.EMPTY:
        return
    raise HTTPException(
        status_code=ERROR_STATUS[result.error],
        detail={"error": result.error.value, "message": result.message},
    )


def to_response(result: Result) -> OperationResponse:
    """Convert a service result into the response envelope.

    ``Empty`` is an ordinary answer for the list endpoints and is
    returned with ``ok=False``; every other failure is raised as an
    HTTP error whose detail carries the error tag and message.
    """
    raise_for_failure(result)
    if result.ok:
        return OperationResponse(message=result.message, data=result.value)
    return OperationResponse(ok=False, message=result.message, error=result.error.value, data=[])
