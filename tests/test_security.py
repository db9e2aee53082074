import time

from movie_rental_api.app.core import security
from movie_rental_api.app.core.security import (
    Pbkdf2PasswordHasher,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_hash_is_salted_and_verifies():
    first = hash_password("pw", iterations=1000)
    second = hash_password("pw", iterations=1000)

    assert first != second
    assert first.startswith("1000$")
    assert verify_password("pw", first)
    assert verify_password("pw", second)
    assert not verify_password("PW", first)


def test_verify_rejects_malformed_digest():
    assert not verify_password("pw", "")
    assert not verify_password("pw", "not-a-hash")
    assert not verify_password("pw", "abc$zz$zz")


def test_hasher_interface():
    hasher = Pbkdf2PasswordHasher(iterations=1000)
    digest = hasher.hash("pw")

    assert "pw" not in digest.split("$")
    assert hasher.verify("pw", digest)
    assert not hasher.verify("other", digest)


def test_token_round_trip():
    token = create_access_token({"sub": "viewer@gmail.com"})

    payload = decode_access_token(token)
    assert payload["sub"] == "viewer@gmail.com"
    assert payload["exp"] > time.time()


def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token({"sub": "viewer@gmail.com"}).split(".")
    forged = create_access_token({"sub": "boss@admin.com"}).split(".")[1]

    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token(f"{header}.{payload}") is None
    assert decode_access_token("garbage") is None


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "viewer@gmail.com"}, expires_delta=-10)

    assert decode_access_token(token) is None


def test_token_signed_with_other_key_is_rejected(monkeypatch):
    token = create_access_token({"sub": "viewer@gmail.com"})
    monkeypatch.setattr(security.settings, "secret_key", "another-secret")

    assert decode_access_token(token) is None
