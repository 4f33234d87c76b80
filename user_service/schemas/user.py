"""User Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - UserCreate.username: 3-50 chars
    - UserCreate.email: basic local@domain.tld shape, at most 254 chars
    - UserCreate.first_name / last_name: 1-100 chars
    - UserCreate.age: integer 1-120
    - Shape only: uniqueness is checked by the store at write time

Design Decisions:
    - Bounds imported from core.domain_types: single source of truth
    - strict=True: "30" is not an age and true is not an integer
    - Response models read straight from core User dataclasses (from_attributes)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from user_service.core.domain_types import (
    AGE_MAX,
    AGE_MIN,
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
)


class UserCreate(BaseModel):
    """User creation request — validated before the store is invoked."""

    model_config = ConfigDict(strict=True)

    username: str = Field(
        min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH,
    )
    email: str = Field(max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN)
    first_name: str = Field(
        min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH,
    )
    last_name: str = Field(
        min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH,
    )
    age: int = Field(ge=AGE_MIN, le=AGE_MAX)


class UserResponse(BaseModel):
    """User record — public-facing shape."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    age: int
    created_at: datetime
    updated_at: datetime


class CreateUserResponse(BaseModel):
    message: str
    user: UserResponse


class UserListResponse(BaseModel):
    users: list[UserResponse]
    count: int


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Error envelope shared by every failing endpoint."""
    error: str
    message: str
