# File: app/models/user.py

"""
User model.

Email is the natural key: every lookup, update and delete goes through it.
`password` only ever holds a bcrypt hash once persisted, and `roles` is a
space-separated list of role names (e.g. "admin user").
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class User(Base):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    roles: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"User(email={self.email!r}, username={self.username!r}, roles={self.roles!r})"
