# File: app/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Models must be imported (see app/db/init_db.py) before create_all so
    their tables are registered on Base.metadata.
    """
    pass
