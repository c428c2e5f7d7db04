"""
Create the tables and seed the admin account.

Run this from the backend root:

    (.venv) SEED_ADMIN_EMAIL=admin@example.com SEED_ADMIN_PASSWORD=secret python seed_users.py

Nothing is inserted when the users table already has rows.
"""

import logging

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.init_db import init_db, seed_initial_data
from app.db.session import SessionLocal

logger = logging.getLogger("headhunter.seed")


def main() -> None:
    configure_logging(settings.log_level)
    init_db()

    db = SessionLocal()
    try:
        if seed_initial_data(db):
            logger.info("Done.")
        else:
            logger.info("Nothing to seed.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
