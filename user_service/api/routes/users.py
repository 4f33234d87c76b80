"""User Routes — create, read, list, and delete user records.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - Handlers delegate to UserStore; store errors propagate to the global handlers
    - Listing always returns 200, including when empty

Design Decisions:
    - Store injected via Depends(get_user_store): tests swap in a fresh store per app
"""

from fastapi import APIRouter, Depends, status

from user_service.api.dependencies import get_user_store, parse_user_id
from user_service.core.user_store import UserStore
from user_service.schemas.user import (
    CreateUserResponse,
    ErrorResponse,
    MessageResponse,
    UserCreate,
    UserListResponse,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "", response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def create_user(
    body: UserCreate, store: UserStore = Depends(get_user_store),
):
    """Create a new user."""
    user = store.create(
        username=body.username,
        email=body.email,
        first_name=body.first_name,
        last_name=body.last_name,
        age=body.age,
    )
    return CreateUserResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
    )


@router.get("", response_model=UserListResponse)
async def list_users(store: UserStore = Depends(get_user_store)):
    """List all users in creation order."""
    users = store.list_all()
    return UserListResponse(
        users=[UserResponse.model_validate(u) for u in users],
        count=len(users),
    )


@router.get(
    "/{user_id}", response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)):
    """Get a single user."""
    return UserResponse.model_validate(store.get_by_id(parse_user_id(user_id)))


@router.delete(
    "/{user_id}", response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def delete_user(
    user_id: str, store: UserStore = Depends(get_user_store),
):
    """Delete a user."""
    store.delete_by_id(parse_user_id(user_id))
    return MessageResponse(message="User deleted successfully")
