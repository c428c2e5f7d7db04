"""
Database initialization helpers.

We only wire up the metadata here. Models will be imported so their
tables get registered on Base.metadata.
"""

import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import BcryptPasswordHasher
from app.db.repositories import UserRepository
from app.db.session import engine
from app.models.base import Base
from app.models import user  # noqa: F401
from app.models.user import User
from app.services.user_service import UserService

logger = logging.getLogger("headhunter.db")


def init_db() -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)


def seed_initial_data(db: Session) -> bool:
    """
    Create the configured admin account when the users table is empty.

    Returns True if a user was inserted.
    """
    if not settings.seed_admin_email or not settings.seed_admin_password:
        logger.info("No seed admin configured, skipping")
        return False

    repository = UserRepository(db)
    if repository.find_all():
        logger.info("Users table is not empty, skipping seed")
        return False

    service = UserService(repository, BcryptPasswordHasher())
    service.save(
        User(
            email=settings.seed_admin_email,
            username="admin",
            password=settings.seed_admin_password,
            roles="admin user",
        )
    )
    logger.info("Seeded admin user %s", settings.seed_admin_email)
    return True
