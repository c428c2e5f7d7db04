# File: app/core/security.py

"""
Security helpers for the Headhunter API.

  - Password hashing (bcrypt), behind a small PasswordHasher protocol so
    the user service can be handed any implementation.
  - Signed access tokens (PyJWT, HS256 by default).
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Protocol

import bcrypt
import jwt

from app.core.config import settings


ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
SECRET_KEY = settings.secret_key


class PasswordHasher(Protocol):
    def hash(self, raw_password: str) -> str: ...

    def verify(self, raw_password: str, hashed_password: str) -> bool: ...


class BcryptPasswordHasher:
    """One-way bcrypt transform. Hashes are stored as utf-8 text."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, raw_password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(raw_password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(
                raw_password.encode("utf-8"),
                hashed_password.encode("utf-8"),
            )
        except ValueError:
            # malformed stored hash or over-long password
            return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Build a signed JWT from `data` with an `exp` claim.

    `data["sub"]` should hold the principal's email.
    """
    to_encode: dict[str, Any] = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a token. Raises jwt.InvalidTokenError (or a subclass
    such as jwt.ExpiredSignatureError) when the token is not acceptable.
    """
    return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])


def verify_token(token: str) -> bool:
    try:
        decode_access_token(token)
    except jwt.InvalidTokenError:
        return False
    return True
