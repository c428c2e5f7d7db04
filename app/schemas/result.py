# File: app/schemas/result.py

from typing import Any, Optional

from pydantic import BaseModel


class StatusCode:
    SUCCESS = 200
    INVALID_ARGUMENT = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_SERVER_ERROR = 500


class Result(BaseModel):
    """Envelope wrapped around every response body."""
    flag: bool
    code: int
    message: str
    data: Optional[Any] = None
