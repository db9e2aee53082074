"""
Pydantic models for movie data.

Rating and price bounds are not declared on the request schemas: the
rental service checks authorization first and only then validates them,
reporting ``InvalidRating`` or ``InvalidPrice`` itself.  Type errors are
still pydantic's job, so a non‑integer rating or price (e.g. ``11.5``)
gets a 422 before authorization is checked, whoever the caller is.

Titles are used as path segments, so they must be non‑empty and may not
contain ``/``.
"""

from pydantic import BaseModel, Field


class MovieCreate(BaseModel):
    """Schema for adding a movie."""

    title: str = Field(..., min_length=1, pattern=r"^[^/]+$", example="Inception")
    price: int = Field(..., example=5)
    rating: int = Field(..., example=9)


class MovieUpdate(BaseModel):
    """Schema for editing a movie.  Both fields are overwritten."""

    price: int = Field(..., example=7)
    rating: int = Field(..., example=8)


class MovieRead(BaseModel):
    """Schema for reading a movie from the API."""

    title: str
    price: int
    rating: int
    purchased: bool = False

    model_config = {
        "from_attributes": True,
    }


class RentRequest(BaseModel):
    days: int = Field(..., example=3)


class RentalQuote(BaseModel):
    """Outcome of a rental: nothing is stored, only the cost is returned."""

    title: str
    days: int
    total_cost: int


class PurchaseRead(BaseModel):
    title: str
    price: int
