import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette import status

from flashycardy.database import DatabaseSession
from flashycardy.schemas import TokenWithRefresh
from flashycardy.services.auth_service import (
    authenticate_user,
    create_token_pair,
    verify_refresh_token,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])
limiter = Limiter(key_func=get_remote_address)


class RefreshTokenRequest(BaseModel):
    """Request body for exchanging a refresh token."""

    refresh_token: str


@router.post("/login")
@limiter.limit("5/minute")  # type: ignore[misc]
async def login(
    request: Request,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: DatabaseSession,
) -> TokenWithRefresh:
    # OAuth2PasswordRequestForm uses 'username' field, but we use it for email
    user = authenticate_user(form_data.username, form_data.password, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return create_token_pair(user.id)


@router.post("/refresh")
@limiter.limit("10/minute")  # type: ignore[misc]
async def refresh(request: Request, body: RefreshTokenRequest) -> TokenWithRefresh:
    """Exchange a refresh token for a new token pair."""
    user_id = verify_refresh_token(body.refresh_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        )
    return create_token_pair(user_id)
