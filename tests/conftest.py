import os

# Settings are read at import time, so configure the environment first.
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from movie_rental_api.app.core.security import Pbkdf2PasswordHasher  # noqa: E402
from movie_rental_api.app.main import create_app  # noqa: E402
from movie_rental_api.app.repositories import InMemoryMovieRepository, InMemoryUserRepository  # noqa: E402
from movie_rental_api.app.services.rental_service import RentalService  # noqa: E402

from .constants import ADMIN_EMAIL, PASSWORD, USER_EMAIL  # noqa: E402


@pytest.fixture
def service() -> RentalService:
    return RentalService(
        InMemoryUserRepository(),
        InMemoryMovieRepository(),
        Pbkdf2PasswordHasher(iterations=1000),
    )


@pytest.fixture
def admin(service: RentalService) -> str:
    service.register_admin(ADMIN_EMAIL, PASSWORD)
    service.login(ADMIN_EMAIL, PASSWORD)
    return ADMIN_EMAIL


@pytest.fixture
def viewer(service: RentalService) -> str:
    service.register_user(USER_EMAIL, PASSWORD)
    service.login(USER_EMAIL, PASSWORD)
    return USER_EMAIL


@pytest.fixture
def client(service: RentalService) -> TestClient:
    return TestClient(create_app(service))
