# File: app/services/auth_service.py

"""
Authentication service.

  - Map a stored User onto the Principal the security layer works with
  - Look a principal up by email
  - Verify a password against the stored hash
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from app.core.exceptions import UnknownPrincipalError
from app.core.security import PasswordHasher
from app.db.repositories import UserRepository
from app.models.user import User

logger = logging.getLogger("headhunter.auth")


@dataclass(frozen=True)
class Principal:
    username: str  # the user's email
    password: str  # bcrypt hash
    authorities: List[str] = field(default_factory=list)
    user: Optional[User] = field(default=None, compare=False, repr=False)


def to_principal(user: User) -> Principal:
    """Roles "admin user" become authorities ["ROLE_admin", "ROLE_user"]."""
    authorities = [f"ROLE_{role}" for role in (user.roles or "").split()]
    return Principal(
        username=user.email,
        password=user.password,
        authorities=authorities,
        user=user,
    )


def load_user_by_username(repository: UserRepository, email: str) -> Principal:
    user = repository.find_by_email(email)
    if user is None:
        raise UnknownPrincipalError(email)
    return to_principal(user)


def authenticate_user(
    repository: UserRepository,
    password_hasher: PasswordHasher,
    *,
    email: str,
    password: str,
) -> Optional[Principal]:
    """
    Returns the principal when `password` matches the stored hash, None on a
    wrong password. An unknown email raises UnknownPrincipalError.
    """
    principal = load_user_by_username(repository, email)
    if not password_hasher.verify(password, principal.password):
        logger.info("Bad credentials for %s", email)
        return None
    return principal
