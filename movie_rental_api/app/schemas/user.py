"""
Pydantic models for user data.

``UserCreate`` is used for both user and admin registration as well as
login.  ``UserRead`` is the public view of a user and deliberately has
no password field.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering or logging in a user.

    The email is kept as a plain string: the suffix rules that decide
    the role are checked by the rental service, not here.
    """

    email: str = Field(..., example="viewer@gmail.com")
    password: str = Field(..., example="strongpassword")


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    email: str
    is_admin: bool = False
    logged_in: bool = False

    model_config = {
        "from_attributes": True,
    }


class TokenRead(BaseModel):
    """Login response carrying the bearer token for later calls."""

    message: str
    access_token: str
    token_type: str = "bearer"
    user: UserRead
