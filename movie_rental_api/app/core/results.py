"""
Outcome values returned by the rental service.

Service operations never raise for a rejected request.  They return a
``Result`` which is either a success carrying a value, or a failure
tagged with a ``RentalError``.  Both carry a human readable message.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class RentalError(str, Enum):
    """Reasons an operation can be rejected."""

    DUPLICATE_EMAIL = "DuplicateEmail"
    INVALID_EMAIL_FORMAT = "InvalidEmailFormat"
    INVALID_ADMIN_EMAIL_FORMAT = "InvalidAdminEmailFormat"
    INVALID_CREDENTIALS = "InvalidCredentials"
    NOT_AUTHORIZED = "NotAuthorized"
    NOT_FOUND = "NotFound"
    DUPLICATE_TITLE = "DuplicateTitle"
    INVALID_RATING = "InvalidRating"
    INVALID_PRICE = "InvalidPrice"
    INVALID_DURATION = "InvalidDuration"
    ALREADY_PURCHASED = "AlreadyPurchased"
    EMPTY = "Empty"


@dataclass(frozen=True)
class Result:
    """Tagged outcome of a service operation."""

    message: str
    value: Any = None
    error: Optional[RentalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, message: str, value: Any = None) -> "Result":
        return cls(message=message, value=value)

    @classmethod
    def fail(cls, error: RentalError, message: str) -> "Result":
        return cls(message=message, error=error)
