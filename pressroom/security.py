"""
Credential and token helpers.

Passwords are hashed with bcrypt at a fixed work factor
(``settings.BCRYPT_ROUNDS``).  Tokens are HS256 JWTs carrying the user id
in a ``userId`` claim; they carry no ``exp`` claim unless
``settings.TOKEN_TTL_MINUTES`` is set.
"""
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from pressroom.config import settings


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------

# bcrypt only reads the first 72 bytes of a password; newer releases raise
# instead of ignoring the rest.
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

def create_access_token(user_id: int, ttl_minutes: int | None = None) -> str:
    """
    Return a signed bearer token for *user_id*.

    *ttl_minutes* falls back to ``settings.TOKEN_TTL_MINUTES``; when both
    are None the token never expires.
    """
    now = datetime.now(timezone.utc)
    claims = {"userId": user_id, "iat": now}

    ttl = ttl_minutes if ttl_minutes is not None else settings.TOKEN_TTL_MINUTES
    if ttl is not None:
        claims["exp"] = now + timedelta(minutes=ttl)

    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Verify *token* and return its claims.

    Raises ``jwt.InvalidTokenError`` (or a subclass such as
    ``jwt.ExpiredSignatureError``) when the signature or expiry is invalid.
    """
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
