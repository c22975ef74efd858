"""Pydantic schemas for user accounts and tokens."""

from pydantic import BaseModel, EmailStr, Field


class UserRegisterRequest(BaseModel):
    """Schema for registering a new account."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)


class UserDetailsResponse(BaseModel):
    """Schema for the current user's profile."""

    id: int
    email: str


class TokenWithRefresh(BaseModel):
    """Token pair with access and refresh tokens."""

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int
