"""
Users API Backend - Users Route Handlers
=========================================

What:  CRUD endpoints over the in-memory user collection.
How:   Each handler pulls the app's UserService from a dependency, calls it,
       and wraps the result in an APIResponse envelope. Errors are raised by
       the service and turned into error envelopes by the global handlers.

Route Inventory:
    GET    /api/v1/users              list users
    GET    /api/v1/users/{id}         get user
    POST   /api/v1/users              create user (201)
    DELETE /api/v1/users/{id}         delete user

The `{user_id:digits}` segment only matches decimal digits, so a request like
GET /api/v1/users/abc never reaches these handlers and gets the framework's
plain 404 instead of the "User not found" envelope.
"""

from fastapi import APIRouter, Depends, Request

from userapi.routes import convertors  # noqa: F401  registers the "digits" convertor
from userapi.schemas.user import (
    APIResponse,
    ErrorResponse,
    UserCreate,
    UserListResponse,
    UserResponse,
)
from userapi.services.user_service import UserService
from userapi.store import get_user_service

router = APIRouter(prefix="/api/v1", tags=["Users"])


@router.get(
    "/users",
    response_model=UserListResponse,
    response_model_exclude_none=True,
    summary="List all users",
)
async def list_users(
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """Every user in insertion order. No pagination."""
    return UserListResponse.success("Users retrieved successfully", service.list_users())


@router.get(
    "/users/{user_id:digits}",
    response_model=UserResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Get a user by id",
)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return UserResponse.success("User found", service.get_user(user_id))


async def read_user_create(request: Request) -> UserCreate:
    """
    Dependency decoding the create payload from the raw body.

    The body is parsed as JSON whatever Content-Type the client sent, so
    `curl -d '{"name": ...}'` (form-urlencoded) works like a JSON client.
    """
    return UserCreate.from_json(await request.body())


@router.post(
    "/users",
    status_code=201,
    response_model=UserResponse,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid payload or missing fields", "model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(
    payload: UserCreate = Depends(read_user_create),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create a user from `{"name": ..., "email": ...}`.

    Malformed or incomplete bodies raise ValidationError inside
    read_user_create, so the store is only ever touched with a complete payload.
    """
    user = service.create_user(payload)
    return UserResponse.success("User created successfully", user)


@router.delete(
    "/users/{user_id:digits}",
    response_model=APIResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Delete a user by id",
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> APIResponse:
    service.delete_user(user_id)
    return APIResponse.success("User deleted successfully")
