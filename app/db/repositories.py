# File: app/db/repositories.py

"""
Persistence access for User rows.

The repository owns commit/rollback: `save` and `delete` are the only
methods that write, and each commits exactly once. Reads never commit.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import EmailAlreadyExistsError
from app.models.user import User

logger = logging.getLogger("headhunter.db")


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[User]:
        return list(self.db.scalars(select(User)).all())

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.get(User, email)

    def save(self, user: User) -> User:
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Integrity error while saving user %s", user.email)
            raise EmailAlreadyExistsError(user.email)
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()
