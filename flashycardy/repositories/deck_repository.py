"""Deck repository for database operations."""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flashycardy import models

logger = logging.getLogger(__name__)


class DeckRepository:
    """Repository for Deck database operations.

    Every lookup is filtered by the owning user id, so a deck that exists
    but belongs to someone else reads exactly like a missing deck.
    """

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(
        self, deck_id: str, user_id: int, *, for_update: bool = False
    ) -> models.Deck | None:
        """Get a deck by its ID, verifying user ownership.

        With ``for_update`` the row stays locked until the transaction ends.
        """
        stmt = select(models.Deck).where(
            models.Deck.id == deck_id,
            models.Deck.user_id == user_id,
        )
        if for_update:
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_user(self, user_id: int) -> list[models.Deck]:
        """Get all decks owned by a user, newest first."""
        stmt = (
            select(models.Deck)
            .where(models.Deck.user_id == user_id)
            .order_by(models.Deck.created_at.desc(), models.Deck.title)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: int, title: str, description: str | None) -> models.Deck:
        """Create a new, empty deck."""
        deck = models.Deck(
            user_id=user_id,
            title=title,
            description=description,
            card_count=0,
        )
        self.db.add(deck)
        self.db.flush()
        self.db.refresh(deck)
        logger.info(f"Created deck: id={deck.id}, user_id={user_id}")
        return deck

    def update(
        self, deck: models.Deck, title: str, description: str | None
    ) -> models.Deck:
        """Overwrite a deck's title and description."""
        deck.title = title
        deck.description = description
        deck.updated_at = func.now()
        self.db.flush()
        self.db.refresh(deck)
        logger.info(f"Updated deck: id={deck.id}")
        return deck

    def delete(self, deck: models.Deck) -> None:
        """Hard delete a deck; flashcards go with it via the foreign key cascade."""
        deck_id = deck.id
        self.db.delete(deck)
        self.db.flush()
        logger.info(f"Deleted deck: id={deck_id}")

    def recount_cards(self, deck_id: str) -> int:
        """Recompute ``card_count`` from the live flashcard rows."""
        live_count = self.db.execute(
            select(func.count())
            .select_from(models.Flashcard)
            .where(models.Flashcard.deck_id == deck_id)
        ).scalar_one()

        deck = self.db.get(models.Deck, deck_id)
        if deck is not None:
            deck.card_count = live_count
            self.db.flush()
        logger.debug(f"Recounted deck cards: id={deck_id}, card_count={live_count}")
        return live_count
