"""
SQLite repositories.

Each call opens a short‑lived connection through ``core.db.get_cursor``
in the same way the rest of the application talks to SQLite.  Call
``core.db.init_db`` with the same path before using them.
"""

import sqlite3
from typing import List, Optional

from ..core.db import get_cursor
from ..models import Movie, User
from .base import MovieRepository, UserRepository


def _row_to_user(row: sqlite3.Row) -> User:
    return User(
        email=row["email"],
        password_hash=row["password_hash"],
        logged_in=bool(row["logged_in"]),
        is_admin=bool(row["is_admin"]),
    )


def _row_to_movie(row: sqlite3.Row) -> Movie:
    return Movie(
        title=row["title"],
        price=row["price"],
        rating=row["rating"],
        purchased=bool(row["purchased"]),
    )


class SqliteUserRepository(UserRepository):
    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def get(self, email: str) -> Optional[User]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT email, password_hash, logged_in, is_admin FROM users WHERE email = ?",
                (email,),
            ).fetchone()
        return _row_to_user(row) if row else None

    def add(self, user: User) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "INSERT INTO users (email, password_hash, logged_in, is_admin) VALUES (?, ?, ?, ?)",
                (user.email, user.password_hash, int(user.logged_in), int(user.is_admin)),
            )

    def save(self, user: User) -> None:
        # is_admin is never updated: the role is fixed at registration.
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "UPDATE users SET password_hash = ?, logged_in = ? WHERE email = ?",
                (user.password_hash, int(user.logged_in), user.email),
            )
            if cursor.rowcount == 0:
                raise ValueError(f"User {user.email} not found")

    def list(self) -> List[User]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                "SELECT email, password_hash, logged_in, is_admin FROM users ORDER BY rowid"
            ).fetchall()
        return [_row_to_user(row) for row in rows]


class SqliteMovieRepository(MovieRepository):
    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def get(self, title: str) -> Optional[Movie]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT title, price, rating, purchased FROM movies WHERE title = ?",
                (title,),
            ).fetchone()
        return _row_to_movie(row) if row else None

    def add(self, movie: Movie) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "INSERT INTO movies (title, price, rating, purchased) VALUES (?, ?, ?, ?)",
                (movie.title, movie.price, movie.rating, int(movie.purchased)),
            )

    def save(self, movie: Movie) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "UPDATE movies SET price = ?, rating = ?, purchased = ?, "
                "updated_at = CURRENT_TIMESTAMP WHERE title = ?",
                (movie.price, movie.rating, int(movie.purchased), movie.title),
            )
            if cursor.rowcount == 0:
                raise ValueError(f"Movie {movie.title} not found")

    def delete(self, title: str) -> bool:
        with get_cursor(self.db_path) as cursor:
            cursor.execute("DELETE FROM movies WHERE title = ?", (title,))
            return cursor.rowcount > 0

    def list(self) -> List[Movie]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                "SELECT title, price, rating, purchased FROM movies ORDER BY rowid"
            ).fetchall()
        return [_row_to_movie(row) for row in rows]
