"""
Security helpers for password hashing and caller authentication.

Passwords are hashed with PBKDF2‑HMAC using SHA‑256 behind the small
``PasswordHasher`` interface, so the rental service only ever calls
``hash`` and ``verify`` and never sees the algorithm.

Caller identity travels as a lightweight JSON Web Token (JWT) signed
with HMAC‑SHA256 and base64url encoded.  The token's ``sub`` claim is
the caller's email and ``exp`` is the expiration timestamp.  The
secret key from the application settings signs and verifies tokens.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Dict, Optional, Protocol

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings


class PasswordHasher(Protocol):
    """One‑way password transformation with a compare operation."""

    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, digest: str) -> bool:
        ...


def hash_password(password: str, iterations: int = 100_000) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the iteration count, salt and hash
    separated by ``$`` (salt and hash in hex).  This format allows
    verifying the password later even if the default iteration count
    changes.

    Parameters
    ----------
    password : str
        The plain text password to hash.
    iterations : int
        PBKDF2 iteration count.

    Returns
    -------
    str
        ``iterations$salt$hash``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, iterations)
    return f"{iterations}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored ``iterations$salt$hash`` string.

    Recomputes the PBKDF2‑HMAC digest with the stored salt and
    iteration count and compares it using constant‑time comparison.
    Malformed stored values never verify.
    """
    try:
        iterations_str, salt_hex, hash_hex = hashed_password.split('$', 2)
        iterations = int(iterations_str)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except (AttributeError, ValueError):
        return False
    dk = hashlib.pbkdf2_hmac('sha256', plain_password.encode('utf-8'), salt, iterations)
    return hmac.compare_digest(dk, stored_hash)


class Pbkdf2PasswordHasher:
    """``PasswordHasher`` backed by :func:`hash_password` / :func:`verify_password`."""

    def __init__(self, iterations: int = 100_000) -> None:
        self.iterations = iterations

    def hash(self, password: str) -> str:
        return hash_password(password, self.iterations)

    def verify(self, password: str, digest: str) -> bool:
        return verify_password(password, digest)


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, str], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field holding the
    expiration time as a UNIX timestamp.  The token is a string of the
    form ``header.payload.signature``, each part base64url encoded.
    Clients send it in the ``Authorization`` header as
    ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. {"sub": "user@gmail.com"}).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, str]]:
    """Verify and decode a JWT token.

    Checks the HMAC signature and the ``exp`` field.  Returns the
    payload dictionary if the token is valid, otherwise ``None``.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
    except ValueError:
        return None
    # Constant‑time comparison to prevent timing attacks
    if not hmac.compare_digest(expected_sig, actual_sig):
        return None
    try:
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    if data.get("exp") is None or int(data["exp"]) < int(time.time()):
        return None
    return data


security = HTTPBearer(auto_error=False)


def get_caller(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> Optional[str]:
    """Dependency returning the caller's email, or ``None`` for anonymous callers.

    A missing, malformed or expired token does not raise here: the
    rental service decides whether the operation needs a logged‑in
    caller and answers with its own ``NotAuthorized`` result.
    """
    if credentials is None:
        return None
    payload = decode_access_token(credentials.credentials)
    if not payload:
        return None
    return payload.get("sub")
