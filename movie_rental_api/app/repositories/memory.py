"""
In‑memory repositories.

Records are copied on the way in and out so that callers cannot
mutate stored state without going through ``save``, which keeps the
behaviour identical to the SQLite repositories.
"""

from dataclasses import replace
from typing import Dict, List, Optional

from ..models import Movie, User
from .base import MovieRepository, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    def get(self, email: str) -> Optional[User]:
        user = self._users.get(email)
        return replace(user) if user is not None else None

    def add(self, user: User) -> None:
        if user.email in self._users:
            raise ValueError(f"User {user.email} already exists")
        self._users[user.email] = replace(user)

    def save(self, user: User) -> None:
        if user.email not in self._users:
            raise ValueError(f"User {user.email} not found")
        self._users[user.email] = replace(user)

    def list(self) -> List[User]:
        return [replace(user) for user in self._users.values()]


class InMemoryMovieRepository(MovieRepository):
    def __init__(self) -> None:
        self._movies: Dict[str, Movie] = {}

    def get(self, title: str) -> Optional[Movie]:
        movie = self._movies.get(title)
        return replace(movie) if movie is not None else None

    def add(self, movie: Movie) -> None:
        if movie.title in self._movies:
            raise ValueError(f"Movie {movie.title} already exists")
        self._movies[movie.title] = replace(movie)

    def save(self, movie: Movie) -> None:
        if movie.title not in self._movies:
            raise ValueError(f"Movie {movie.title} not found")
        self._movies[movie.title] = replace(movie)

    def delete(self, title: str) -> bool:
        return self._movies.pop(title, None) is not None

    def list(self) -> List[Movie]:
        return [replace(movie) for movie in self._movies.values()]
