"""Token, password and current-user helpers."""

from datetime import UTC, datetime, timedelta
from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jwt import InvalidTokenError
from pwdlib import PasswordHash

from flashycardy.config import get_settings
from flashycardy.database import DatabaseSession
from flashycardy.exceptions import CredentialsException
from flashycardy.models import User
from flashycardy.repositories import UserRepository
from flashycardy.schemas import TokenWithRefresh

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
REFRESH_TOKEN_SECRET_KEY = settings.REFRESH_TOKEN_SECRET_KEY or SECRET_KEY
PASSWORD_PEPPER = settings.PASSWORD_PEPPER
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES
REFRESH_TOKEN_EXPIRE_DAYS = settings.REFRESH_TOKEN_EXPIRE_DAYS

password_hash = PasswordHash.recommended()
# Constant-time dummy for unknown emails so login timing does not leak accounts
DUMMY_HASH = password_hash.hash("flashycardy-dummy-password")

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def hash_password(plain_password: str) -> str:
    """Hash a plain password for storage with pepper."""
    return password_hash.hash(plain_password + PASSWORD_PEPPER)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    return password_hash.verify(plain_password + PASSWORD_PEPPER, hashed_password)


def authenticate_user(email: str, password: str, db: DatabaseSession) -> User | None:
    user = UserRepository(db).get_by_email(email)
    if not user:
        verify_password(password, DUMMY_HASH)
        return None
    if not user.hashed_password or not verify_password(password, user.hashed_password):
        return None
    return user


def create_access_token(user_id: int) -> str:
    expire = datetime.now(UTC) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": str(user_id), "exp": expire, "type": "access"}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def create_refresh_token(user_id: int) -> str:
    expire = datetime.now(UTC) + timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)
    to_encode = {"sub": str(user_id), "exp": expire, "type": "refresh"}
    return jwt.encode(to_encode, REFRESH_TOKEN_SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> int | None:
    """Verify an access token and return the user_id if valid."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        # Refresh tokens are only accepted at the refresh endpoint
        if payload.get("type") == "refresh":
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        return int(user_id)
    except (InvalidTokenError, ValueError):
        return None


def verify_refresh_token(token: str) -> int | None:
    """Verify a refresh token and return the user_id if valid."""
    try:
        payload = jwt.decode(token, REFRESH_TOKEN_SECRET_KEY, algorithms=[ALGORITHM])
        if payload.get("type") != "refresh":
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        return int(user_id)
    except (InvalidTokenError, ValueError):
        return None


def create_token_pair(user_id: int) -> TokenWithRefresh:
    return TokenWithRefresh(
        access_token=create_access_token(user_id),
        refresh_token=create_refresh_token(user_id),
        token_type="bearer",  # noqa: S106
        expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession
) -> User:
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException
    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise CredentialsException
    return user


async def get_optional_user_id(
    token: Annotated[str | None, Depends(optional_oauth2_scheme)], db: DatabaseSession
) -> int | None:
    """Identity for read paths: None when the caller is anonymous or the token is bad."""
    if not token:
        return None
    user_id = verify_access_token(token)
    if user_id is None or UserRepository(db).get_by_id(user_id) is None:
        return None
    return user_id


async def get_current_user_id(
    current_user: Annotated[User, Depends(get_current_user)],
) -> int:
    return current_user.id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
OptionalUserId = Annotated[int | None, Depends(get_optional_user_id)]
