# File: app/api/v1/routes_auth.py

"""
Auth API routes.

/login takes HTTP Basic credentials (email as the username), checks them
against the stored hash and hands back the user view plus a signed JWT.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.api.deps import get_password_hasher, get_user_repository
from app.core.security import PasswordHasher, create_access_token
from app.db.repositories import UserRepository
from app.schemas.result import Result, StatusCode
from app.schemas.user import user_to_view
from app.services.auth_service import authenticate_user

router = APIRouter()

basic_auth = HTTPBasic()


@router.post("/login", response_model=Result, summary="User login")
def login(
    credentials: HTTPBasicCredentials = Depends(basic_auth),
    repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    principal = authenticate_user(
        repository,
        password_hasher,
        email=credentials.username,
        password=credentials.password,
    )
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="username or password is incorrect.",
            headers={"WWW-Authenticate": "Basic"},
        )

    token = create_access_token(
        {"sub": principal.username, "authorities": " ".join(principal.authorities)}
    )
    return Result(
        flag=True,
        code=StatusCode.SUCCESS,
        message="User Info and JSON Web Token",
        data={"userInfo": user_to_view(principal.user), "token": token},
    )
