"""Authentication-related Pydantic schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Schema for user registration."""

    username: Annotated[str, Field(min_length=1)]
    email: Annotated[str, Field(min_length=1)]
    password: Annotated[str, Field(min_length=1)]


class LoginRequest(BaseModel):
    """Schema for login request."""

    username: Annotated[str, Field(min_length=1)]
    password: Annotated[str, Field(min_length=1)]


class UserResponse(BaseModel):
    """Public view of a user; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str


class LoginResponse(BaseModel):
    """Schema for login response."""

    token: str
    user: UserResponse
