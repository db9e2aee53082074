"""
Business logic for the movie rental service.

``RentalService`` owns the user and movie repositories and implements
registration, login and the movie operations.  Every operation returns
a ``Result``: rejected requests are reported as tagged failures and
never raised.

There is no shared "current user".  Operations that need a logged‑in
caller take the caller's email explicitly and look that user up; the
HTTP layer takes the email from the caller's verified access token.
"""

import logging
from typing import List, Optional

from ..core.results import RentalError, Result
from ..core.security import PasswordHasher
from ..models import Movie, User
from ..repositories.base import MovieRepository, UserRepository
from ..schemas.movie import MovieRead, PurchaseRead, RentalQuote
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 10
# Prices are stored as 32-bit integers.
MAX_PRICE = 2**31 - 1

INVALID_RATING_MESSAGE = f"Invalid rating. Please provide a rating between {MIN_RATING} and {MAX_RATING}."
INVALID_PRICE_MESSAGE = f"Invalid price. Please provide a price between $0 and ${MAX_PRICE}."


def _not_found(title: str) -> Result:
    return Result.fail(RentalError.NOT_FOUND, f'Movie "{title}" not found in the list.')


class RentalService:
    """Users, movies and the rules that gate changes to them."""

    def __init__(
        self,
        users: UserRepository,
        movies: MovieRepository,
        hasher: PasswordHasher,
        user_email_domain: str = "@gmail.com",
        admin_email_domain: str = "@admin.com",
    ) -> None:
        self.users = users
        self.movies = movies
        self.hasher = hasher
        self.user_email_domain = user_email_domain
        self.admin_email_domain = admin_email_domain

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def register_user(self, email: str, password: str) -> Result:
        """Register a regular user.  The email must end with the user domain."""
        return self._register(email, password, is_admin=False)

    def register_admin(self, email: str, password: str) -> Result:
        """Register an administrator.  The email must end with the admin domain."""
        return self._register(email, password, is_admin=True)

    def _register(self, email: str, password: str, is_admin: bool) -> Result:
        if self.users.get(email) is not None:
            logger.warning("Registration rejected: %s is already registered", email)
            return Result.fail(
                RentalError.DUPLICATE_EMAIL,
                "Email is already registered. Please use a different email.",
            )

        if is_admin and not email.endswith(self.admin_email_domain):
            return Result.fail(
                RentalError.INVALID_ADMIN_EMAIL_FORMAT,
                "Invalid email format for admin. Please use an email ending with "
                f'"{self.admin_email_domain}".',
            )
        if not is_admin and not email.endswith(self.user_email_domain):
            return Result.fail(
                RentalError.INVALID_EMAIL_FORMAT,
                f'Invalid email format. Please use an email ending with "{self.user_email_domain}".',
            )

        user = User(email=email, password_hash=self.hasher.hash(password), is_admin=is_admin)
        self.users.add(user)
        logger.info("Registered %s %s", "admin" if is_admin else "user", email)
        role = "Admin" if is_admin else "User"
        return Result.success(f"{role} registration successful.", UserRead.model_validate(user))

    def login(self, email: str, password: str) -> Result:
        """Verify credentials and mark the user as logged in.

        Unknown emails and wrong passwords produce the same failure so
        that callers cannot probe which emails are registered.
        """
        user = self.users.get(email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning("Failed login for %s", email)
            return Result.fail(
                RentalError.INVALID_CREDENTIALS,
                "Invalid email or password. Please try again.",
            )
        if not user.logged_in:
            user.logged_in = True
            self.users.save(user)
        logger.info("User %s logged in", email)
        role = "Admin" if user.is_admin else "User"
        return Result.success(f"Login successful. Welcome, {role}.", UserRead.model_validate(user))

    def list_users(self) -> Result:
        users = self.users.list()
        if not users:
            return Result.fail(RentalError.EMPTY, "No registered users yet.")
        return Result.success(
            "List of registered users.",
            [UserRead.model_validate(user) for user in users],
        )

    def _session(self, caller: Optional[str], admin: bool = False) -> Optional[User]:
        """Return the caller's user record if they may act, else ``None``."""
        if caller is None:
            return None
        user = self.users.get(caller)
        if user is None or not user.logged_in:
            return None
        if admin and not user.is_admin:
            return None
        return user

    def _deny(self, caller: Optional[str], action: str, admin: bool) -> Result:
        logger.warning("Caller %s is not allowed to %s", caller or "<anonymous>", action)
        who = "as an admin " if admin else ""
        return Result.fail(RentalError.NOT_AUTHORIZED, f"Please login {who}to {action}.")

    # ------------------------------------------------------------------
    # Movies
    # ------------------------------------------------------------------

    def add_movie(self, caller: Optional[str], title: str, price: int, rating: int) -> Result:
        if self._session(caller, admin=True) is None:
            return self._deny(caller, "add a movie", admin=True)
        if self.movies.get(title) is not None:
            return Result.fail(
                RentalError.DUPLICATE_TITLE,
                "Movie with this title already exists. Please use a different title.",
            )
        if not MIN_RATING <= rating <= MAX_RATING:
            return Result.fail(RentalError.INVALID_RATING, INVALID_RATING_MESSAGE)
        if not 0 <= price <= MAX_PRICE:
            return Result.fail(RentalError.INVALID_PRICE, INVALID_PRICE_MESSAGE)

        movie = Movie(title=title, price=price, rating=rating)
        self.movies.add(movie)
        logger.info("Admin %s added movie '%s'", caller, title)
        return Result.success(
            f'Movie "{title}" added successfully with a rental price of ${price} and a rating of {rating}.',
            MovieRead.model_validate(movie),
        )

    def rent_movie(self, caller: Optional[str], title: str, days: int) -> Result:
        """Quote a rental.  Nothing about the rental is recorded."""
        if self._session(caller) is None:
            return self._deny(caller, "rent a movie", admin=False)
        movie = self.movies.get(title)
        if movie is None:
            return _not_found(title)
        if days < 1:
            return Result.fail(
                RentalError.INVALID_DURATION,
                "Invalid rental duration. Please rent for at least 1 day.",
            )

        total_cost = movie.price * days
        logger.info("User %s rented '%s' for %s days", caller, title, days)
        return Result.success(
            f'You have successfully rented "{title}" for {days} days. Total cost : ${total_cost}.',
            RentalQuote(title=title, days=days, total_cost=total_cost),
        )

    def buy_movie(self, caller: Optional[str], title: str) -> Result:
        if self._session(caller) is None:
            return self._deny(caller, "buy a movie", admin=False)
        movie = self.movies.get(title)
        if movie is None:
            return _not_found(title)
        if movie.purchased:
            return Result.fail(
                RentalError.ALREADY_PURCHASED,
                f'Movie "{title}" is already purchased by you.',
            )

        movie.purchased = True
        self.movies.save(movie)
        logger.info("User %s bought '%s' for $%s", caller, title, movie.price)
        return Result.success(
            f'You have successfully purchased "{title}" for ${movie.price}.',
            PurchaseRead(title=title, price=movie.price),
        )

    def remove_movie(self, caller: Optional[str], title: str) -> Result:
        if self._session(caller, admin=True) is None:
            return self._deny(caller, "remove a movie", admin=True)
        if not self.movies.delete(title):
            return _not_found(title)
        logger.info("Admin %s removed movie '%s'", caller, title)
        return Result.success(f'Movie "{title}" removed successfully.')

    def edit_movie(self, caller: Optional[str], title: str, new_price: int, new_rating: int) -> Result:
        if self._session(caller, admin=True) is None:
            return self._deny(caller, "edit a movie", admin=True)
        movie = self.movies.get(title)
        if movie is None:
            return _not_found(title)
        if not MIN_RATING <= new_rating <= MAX_RATING:
            return Result.fail(RentalError.INVALID_RATING, INVALID_RATING_MESSAGE)
        if not 0 <= new_price <= MAX_PRICE:
            return Result.fail(RentalError.INVALID_PRICE, INVALID_PRICE_MESSAGE)

        movie.price = new_price
        movie.rating = new_rating
        self.movies.save(movie)
        logger.info("Admin %s edited movie '%s'", caller, title)
        return Result.success(
            f'Movie "{title}" updated successfully. Price : ${new_price}, Rating : {new_rating}.',
            MovieRead.model_validate(movie),
        )

    def get_movie(self, title: str) -> Result:
        movie = self.movies.get(title)
        if movie is None:
            return _not_found(title)
        return Result.success(f'Movie "{title}".', MovieRead.model_validate(movie))

    def list_movies(self) -> Result:
        movies: List[Movie] = self.movies.list()
        if not movies:
            return Result.fail(RentalError.EMPTY, "No movies available yet.")
        return Result.success(
            "List of available movies.",
            [MovieRead.model_validate(movie) for movie in movies],
        )
