"""
Top‑level router for version 1 of the API.

This router aggregates the user and movie routers under a unified
prefix.
"""

from fastapi import APIRouter

from .endpoints import movies, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(movies.router, prefix="/movies", tags=["movies"])
