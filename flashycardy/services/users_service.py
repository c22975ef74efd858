"""Service layer for user-related business logic."""

import logging

from sqlalchemy.orm import Session

from flashycardy import models, schemas
from flashycardy.config import get_settings
from flashycardy.exceptions import FlashyCardyError
from flashycardy.repositories import UserRepository
from flashycardy.services.auth_service import create_token_pair, hash_password

logger = logging.getLogger(__name__)


class RegistrationDisabledError(FlashyCardyError):
    """Self-service registration is switched off."""

    error_code = "registration_disabled"

    def __init__(self) -> None:
        super().__init__("User registration is currently disabled", status_code=403)


class EmailAlreadyExistsError(FlashyCardyError):
    """An account with this email already exists."""

    error_code = "email_already_registered"

    def __init__(self) -> None:
        super().__init__("Email already registered", status_code=400)


class UserService:
    """Service for handling user-related operations."""

    def __init__(self, db: Session) -> None:
        """Initialize service with database session."""
        self.db = db
        self.user_repo = UserRepository(db)

    def register_user(
        self, register_data: schemas.UserRegisterRequest
    ) -> tuple[models.User, schemas.TokenWithRefresh]:
        """
        Register a new user account and log it in.

        Raises:
            RegistrationDisabledError: If registrations are turned off
            EmailAlreadyExistsError: If the email is taken
        """
        if not get_settings().ALLOW_USER_REGISTRATIONS:
            raise RegistrationDisabledError

        if self.user_repo.get_by_email(register_data.email):
            raise EmailAlreadyExistsError

        user = self.user_repo.create_with_password(
            email=register_data.email, hashed_password=hash_password(register_data.password)
        )
        self.db.commit()

        logger.info(f"Successfully registered user {user.id}")
        return user, create_token_pair(user.id)
