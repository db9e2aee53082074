"""
User endpoints for API v1.

Provide user and admin registration, login and listing of users.
Login returns a bearer token whose subject identifies the caller for
the movie endpoints.
"""

from fastapi import APIRouter, Depends, status

from movie_rental_api.app.core.security import create_access_token
from movie_rental_api.app.schemas.response import OperationResponse
from movie_rental_api.app.schemas.user import TokenRead, UserCreate
from movie_rental_api.app.services.rental_service import RentalService
from .common import get_rental_service, raise_for_failure, to_response


router = APIRouter()


@router.post("/", response_model=OperationResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user: UserCreate,
    service: RentalService = Depends(get_rental_service),
) -> OperationResponse:
    """Register a regular user.  The email must end with the user domain."""
    return to_response(service.register_user(user.email, user.password))


@router.post("/admins", response_model=OperationResponse, status_code=status.HTTP_201_CREATED)
async def register_admin(
    user: UserCreate,
    service: RentalService = Depends(get_rental_service),
) -> OperationResponse:
    """Register an administrator.  The email must end with the admin domain."""
    return to_response(service.register_admin(user.email, user.password))


@router.post("/login", response_model=TokenRead)
async def login_user(
    user: UserCreate,
    service: RentalService = Depends(get_rental_service),
) -> TokenRead:
    """Authenticate a user and return an access token.

    Wrong passwords and unknown emails are both answered with 401.
    """
    result = service.login(user.email, user.password)
    raise_for_failure(result)
    token = create_access_token({"sub": result.value.email})
    return TokenRead(message=result.message, access_token=token, user=result.value)


@router.get("/", response_model=OperationResponse)
async def list_users(service: RentalService = Depends(get_rental_service)) -> OperationResponse:
    """List registered users without their password hashes."""
    return to_response(service.list_users())
