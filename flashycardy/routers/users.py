import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from flashycardy.core import container
from flashycardy.di import inject_service
from flashycardy.exceptions import FlashyCardyError
from flashycardy.models import User
from flashycardy.schemas import TokenWithRefresh, UserDetailsResponse, UserRegisterRequest
from flashycardy.services import UserService
from flashycardy.services.auth_service import get_current_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])
limiter = Limiter(key_func=get_remote_address)


@router.post("/register")
@limiter.limit("5/minute")  # type: ignore[misc]
async def register(
    request: Request,
    register_data: UserRegisterRequest,
    service: Annotated[UserService, Depends(inject_service(container.user_service))],
) -> TokenWithRefresh:
    """
    Register a new user account.

    Creates a new user with the provided email and password.
    Returns token pair for immediate login after registration.
    """
    try:
        _, token_pair = service.register_user(register_data)
        return token_pair
    except FlashyCardyError:
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/me")
async def get_me(current_user: Annotated[User, Depends(get_current_user)]) -> UserDetailsResponse:
    """Get the current user's profile information."""
    return UserDetailsResponse(email=current_user.email, id=current_user.id)
