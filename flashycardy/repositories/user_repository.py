"""User repository for database operations."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashycardy import models

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, user_id: int) -> models.User | None:
        """Get a user by ID."""
        return self.db.get(models.User, user_id)

    def get_by_email(self, email: str) -> models.User | None:
        """Get a user by email, case-insensitively."""
        stmt = select(models.User).where(models.User.email == email.strip().lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def create_with_password(self, email: str, hashed_password: str) -> models.User:
        """Create a user with a hashed password."""
        user = models.User(email=email.strip().lower(), hashed_password=hashed_password)
        self.db.add(user)
        self.db.flush()
        self.db.refresh(user)
        logger.info(f"Created user: id={user.id}")
        return user
