"""
Domain records held by the repositories.

These are internal records: ``User`` carries the password hash and
must never be returned to API clients directly.  Use the pydantic
schemas in ``schemas`` for anything leaving the service.
"""

from dataclasses import dataclass


@dataclass
class User:
    email: str
    password_hash: str
    logged_in: bool = False
    # Fixed at registration from the email suffix.
    is_admin: bool = False


@dataclass
class Movie:
    title: str
    price: int
    rating: int
    purchased: bool = False
