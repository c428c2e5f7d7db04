# File: app/schemas/user.py

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email

from app.models.user import User

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _checked_email(v: str) -> str:
    """
    Validate like EmailStr but keep the address exactly as submitted, since
    it is the lookup key used by the /{email} paths.
    """
    _, normalized = validate_email(v)
    if normalized.lower() != v.lower():
        raise ValueError("value is not a plain email address")
    return v


class UserBase(BaseModel):
    email: str
    username: str = Field(min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return _checked_email(v)


class UserCreate(UserBase):
    """Body of /register and /addUser. `roles` is ignored by /register."""
    password: str = Field(min_length=1)
    roles: Optional[str] = None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
        return v


class UserForm(BaseModel):
    """Partial update payload: every field may be left out or sent empty."""
    email: Optional[str] = None
    username: Optional[str] = None
    roles: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def empty_email_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return _checked_email(v)


class UserView(BaseModel):
    email: str
    username: str
    roles: Optional[str] = None

    class Config:
        from_attributes = True  # Pydantic v2: replaces orm_mode


# -----------------------------
# Converters
# -----------------------------

def user_create_to_user(payload: UserCreate) -> User:
    return User(
        email=payload.email,
        username=payload.username,
        password=payload.password,
        roles=payload.roles,
    )


def user_form_to_user(form: UserForm) -> User:
    # Transient, never added to a session: only carries the update fields.
    return User(
        email=form.email,
        username=form.username,
        roles=form.roles,
    )


def user_to_view(user: User) -> UserView:
    return UserView.model_validate(user)
