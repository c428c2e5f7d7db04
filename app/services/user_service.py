# File: app/services/user_service.py

"""
User business rules: find, save (with hashing), update, delete.

The repository and the password hasher are handed in by the caller (see
app/api/deps.py); the service keeps no state between calls.

Update policies
---------------
merge    Email, username and roles are applied only when present and
         non-empty. A new email must not belong to another user.
overlay  Username and roles are always overwritten from the payload and
         double quotes are stripped from roles. Email is left as is.
"""

import logging
from typing import List, Optional

from app.core.exceptions import EmailAlreadyExistsError, ObjectNotFoundError
from app.core.security import PasswordHasher
from app.db.repositories import UserRepository
from app.models.user import User

logger = logging.getLogger("headhunter.users.service")

MERGE = "merge"
OVERLAY = "overlay"


class UserService:
    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasher,
        update_policy: str = MERGE,
    ):
        if update_policy not in (MERGE, OVERLAY):
            raise ValueError(f"Unknown update policy: {update_policy!r}")
        self.repository = repository
        self.password_hasher = password_hasher
        self.update_policy = update_policy

    def find_all(self) -> List[User]:
        return self.repository.find_all()

    def find_by_user_email(self, email: str) -> User:
        return self._get_or_raise(email)

    def save(self, new_user: User) -> User:
        """Hash the cleartext password, then persist."""
        new_user.password = self.password_hasher.hash(new_user.password)
        saved = self.repository.save(new_user)
        logger.info("Saved user %s with roles %r", saved.email, saved.roles)
        return saved

    def update(self, email: str, update: User) -> User:
        found = self._get_or_raise(email)

        if self.update_policy == OVERLAY:
            self._overlay(found, update)
        else:
            self._merge(email, found, update)

        logger.debug("Updating user %s using %s policy", email, self.update_policy)
        return self.repository.save(found)

    def delete(self, email: str) -> None:
        found = self._get_or_raise(email)
        self.repository.delete(found)
        logger.info("Deleted user %s", email)

    def _get_or_raise(self, email: str) -> User:
        user = self.repository.find_by_email(email)
        if user is None:
            logger.warning("User %s not found", email)
            raise ObjectNotFoundError("user", email)
        return user

    def _merge(self, email: str, found: User, update: User) -> None:
        if _present(update.email) and update.email != email:
            if self.repository.find_by_email(update.email) is not None:
                logger.warning("Cannot move %s to %s: email taken", email, update.email)
                raise EmailAlreadyExistsError(update.email)
            found.email = update.email

        if _present(update.username):
            found.username = update.username

        if _present(update.roles):
            found.roles = update.roles

    @staticmethod
    def _overlay(found: User, update: User) -> None:
        # username is NOT NULL, an absent one is stored as ""
        found.username = update.username if update.username is not None else ""
        found.roles = strip_quotes(update.roles)


def strip_quotes(roles: Optional[str]) -> Optional[str]:
    """Remove every double-quote character, e.g. '"admin"' -> 'admin'."""
    if roles is None:
        return None
    return roles.replace('"', "")


def _present(value: Optional[str]) -> bool:
    return value is not None and value != ""
