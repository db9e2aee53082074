"""
Movie endpoints for API v1.

Listing and reading movies is public.  Adding, editing and removing
need a logged‑in admin; renting and buying need any logged‑in user.
The caller is identified by the bearer token issued at login, and the
rental service decides whether the caller may act.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from movie_rental_api.app.core.security import get_caller
from movie_rental_api.app.schemas.movie import MovieCreate, MovieUpdate, RentRequest
from movie_rental_api.app.schemas.response import OperationResponse
from movie_rental_api.app.services.rental_service import RentalService
from .common import get_rental_service, to_response


router = APIRouter()


@router.get("/", response_model=OperationResponse)
async def list_movies(service: RentalService = Depends(get_rental_service)) -> OperationResponse:
    return to_response(service.list_movies())


@router.get("/{title}", response_model=OperationResponse)
async def get_movie(title: str, service: RentalService = Depends(get_rental_service)) -> OperationResponse:
    return to_response(service.get_movie(title))


@router.post("/", response_model=OperationResponse, status_code=status.HTTP_201_CREATED)
async def add_movie(
    movie: MovieCreate,
    caller: Optional[str] = Depends(get_caller),
    service: RentalService = Depends(get_rental_service),
) -> OperationResponse:
    """Add a movie.  Requires a logged‑in admin."""
    return to_response(service.add_movie(caller, movie.title, movie.price, movie.rating))


@router.put("/{title}", response_model=OperationResponse)
async def edit_movie(
    title: str,
    movie: MovieUpdate,
    caller: Optional[str] = Depends(get_caller),
    service: RentalService = Depends(get_rental_service),
) -> OperationResponse:
    """Overwrite a movie's price and rating.  Requires a logged‑in admin."""
    return to_response(service.edit_movie(caller, title, movie.price, movie.rating))


@router.delete("/{title}", response_model=OperationResponse)
async def remove_movie(
    title: str,
    caller: Optional[str] = Depends(get_caller),
    service: RentalService = Depends(get_rental_service),
) -> OperationResponse:
    """Remove a movie.  Requires a logged‑in admin."""
    return to_response(service.remove_movie(caller, title))


@router.post("/{title}/rent", response_model=OperationResponse)
async def rent_movie(
    title: str,
    rental: RentRequest,
    caller: Optional[str] = Depends(get_caller),
    service: RentalService = Depends(get_rental_service),
) -> OperationResponse:
    """Return the total cost of renting a movie for a number of days.

    Rentals are not recorded; the movie is left unchanged.
    """
    return to_response(service.rent_movie(caller, title, rental.days))


@router.post("/{title}/buy", response_model=OperationResponse)
async def buy_movie(
    title: str,
    caller: Optional[str] = Depends(get_caller),
    service: RentalService = Depends(get_rental_service),
) -> OperationResponse:
    """Buy a movie.  A movie can only be bought once."""
    return to_response(service.buy_movie(caller, title))
