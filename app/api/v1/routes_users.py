# File: app/api/v1/routes_users.py

"""
User API routes.

Every endpoint answers with a Result envelope. Failures are raised by the
service as domain exceptions and rendered by the handlers in app/main.py.
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_user_service
from app.schemas.result import Result, StatusCode
from app.schemas.user import (
    UserCreate,
    UserForm,
    user_create_to_user,
    user_form_to_user,
    user_to_view,
)
from app.services.user_service import UserService

router = APIRouter()


@router.get("/findAll", response_model=Result, summary="List all users")
def find_all_users(service: UserService = Depends(get_user_service)):
    found_users = [user_to_view(u) for u in service.find_all()]
    return Result(flag=True, code=StatusCode.SUCCESS, message="Find All User Success", data=found_users)


@router.get("/findUser/{email}", response_model=Result, summary="Get one user by email")
def find_user_by_email(email: str, service: UserService = Depends(get_user_service)):
    found_user = service.find_by_user_email(email)
    return Result(
        flag=True,
        code=StatusCode.SUCCESS,
        message="Find One User Success",
        data=user_to_view(found_user),
    )


@router.post("/register", response_model=Result, summary="Self-registration, role is always 'user'")
def register_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    user = user_create_to_user(payload)
    user.roles = "user"
    added_user = service.save(user)
    return Result(flag=True, code=StatusCode.SUCCESS, message="Add User Success", data=user_to_view(added_user))


@router.post("/addUser", response_model=Result, summary="Add a user with caller-supplied roles")
def add_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    added_user = service.save(user_create_to_user(payload))
    return Result(flag=True, code=StatusCode.SUCCESS, message="Add Success", data=user_to_view(added_user))


@router.put("/update/{email}", response_model=Result, summary="Update a user")
def update_user(
    email: str,
    payload: UserForm,
    service: UserService = Depends(get_user_service),
):
    updated_user = service.update(email, user_form_to_user(payload))
    return Result(
        flag=True,
        code=StatusCode.SUCCESS,
        message="Update User Success",
        data=user_to_view(updated_user),
    )


@router.delete("/delete/{email}", response_model=Result, summary="Delete a user")
def delete_user(email: str, service: UserService = Depends(get_user_service)):
    service.delete(email)
    return Result(flag=True, code=StatusCode.SUCCESS, message="Delete User Success")
