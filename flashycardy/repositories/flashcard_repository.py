"""Flashcard repository for database operations."""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flashycardy import models

logger = logging.getLogger(__name__)


class FlashcardRepository:
    """Repository for Flashcard database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(
        self, flashcard_id: str, user_id: int, *, for_update: bool = False
    ) -> models.Flashcard | None:
        """Get a flashcard by its ID, verifying ownership through its deck."""
        stmt = (
            select(models.Flashcard)
            .join(models.Deck, models.Flashcard.deck_id == models.Deck.id)
            .where(
                models.Flashcard.id == flashcard_id,
                models.Deck.user_id == user_id,
            )
        )
        if for_update:
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_deck_id(self, deck_id: str) -> list[models.Flashcard]:
        """Get all flashcards for a deck.

        No ownership filter here; callers gate on the deck first.
        """
        stmt = (
            select(models.Flashcard)
            .where(models.Flashcard.deck_id == deck_id)
            .order_by(models.Flashcard.created_at, models.Flashcard.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create(self, deck_id: str, front: str, back: str) -> models.Flashcard:
        """Create a new flashcard."""
        flashcard = models.Flashcard(deck_id=deck_id, front=front, back=back)
        self.db.add(flashcard)
        self.db.flush()
        self.db.refresh(flashcard)
        logger.info(f"Created flashcard: id={flashcard.id}, deck_id={deck_id}")
        return flashcard

    def update(self, flashcard: models.Flashcard, front: str, back: str) -> models.Flashcard:
        """Overwrite a flashcard's front and back text."""
        flashcard.front = front
        flashcard.back = back
        flashcard.updated_at = func.now()
        self.db.flush()
        self.db.refresh(flashcard)
        logger.info(f"Updated flashcard: id={flashcard.id}")
        return flashcard

    def delete(self, flashcard: models.Flashcard) -> None:
        """Delete a flashcard."""
        flashcard_id = flashcard.id
        self.db.delete(flashcard)
        self.db.flush()
        logger.info(f"Deleted flashcard: id={flashcard_id}")
