"""Repository interfaces used by the rental service."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Movie, User


class UserRepository(ABC):
    """Users keyed by email (exact, case‑sensitive match)."""

    @abstractmethod
    def get(self, email: str) -> Optional[User]:
        """Return the user or ``None`` when no such email is registered."""

    @abstractmethod
    def add(self, user: User) -> None:
        ...

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist changes to an existing user."""

    @abstractmethod
    def list(self) -> List[User]:
        """Return all users in registration order."""


class MovieRepository(ABC):
    """Movies keyed by title (exact, case‑sensitive match)."""

    @abstractmethod
    def get(self, title: str) -> Optional[Movie]:
        """Return the movie or ``None`` when no such title exists."""

    @abstractmethod
    def add(self, movie: Movie) -> None:
        ...

    @abstractmethod
    def save(self, movie: Movie) -> None:
        """Persist changes to an existing movie."""

    @abstractmethod
    def delete(self, title: str) -> bool:
        """Delete a movie.  Returns ``False`` if it did not exist."""

    @abstractmethod
    def list(self) -> List[Movie]:
        """Return all movies in insertion order."""
