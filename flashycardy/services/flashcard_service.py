"""Service layer for flashcard-related business logic."""

import logging

import structlog
from sqlalchemy.orm import Session

from flashycardy import models, repositories
from flashycardy.exceptions import DeckNotFoundError, UnauthenticatedError
from flashycardy.services.validation import require_text

logger = logging.getLogger(__name__)
structlog_logger = structlog.get_logger(__name__)


class FlashcardService:
    """Service for flashcards, which are only reachable through an owned deck.

    Creating or deleting a card recounts the parent deck in the same
    transaction, so ``Deck.card_count`` always matches the live rows.
    """

    def __init__(self, db: Session) -> None:
        """Initialize service with database session."""
        self.db = db
        self.flashcard_repo = repositories.FlashcardRepository(db)
        self.deck_repo = repositories.DeckRepository(db)

    def list_flashcards(self, user_id: int | None, deck_id: str) -> list[models.Flashcard]:
        """List a deck's flashcards, or nothing if the deck is not visible to the caller."""
        if user_id is None:
            return []
        deck = self.deck_repo.get_by_id(deck_id, user_id)
        if deck is None:
            return []
        return self.flashcard_repo.get_by_deck_id(deck.id)

    def create_flashcard(
        self, user_id: int | None, deck_id: str, front: str, back: str
    ) -> models.Flashcard:
        """
        Create a new flashcard in a deck.

        Args:
            user_id: Identity of the caller
            deck_id: ID of the deck to add the card to
            front: Front text, 1-1000 characters
            back: Back text, 1-1000 characters

        Returns:
            Created flashcard

        Raises:
            UnauthenticatedError: If no identity is supplied
            ValidationError: If front or back is out of bounds
            DeckNotFoundError: If the deck is missing or not owned by the caller
        """
        if user_id is None:
            raise UnauthenticatedError("create flashcard")
        front, back = self._validate(front, back)

        deck = self.deck_repo.get_by_id(deck_id, user_id, for_update=True)
        if deck is None:
            self.db.rollback()
            raise DeckNotFoundError(deck_id)

        flashcard = self.flashcard_repo.create(deck_id=deck.id, front=front, back=back)
        card_count = self.deck_repo.recount_cards(deck.id)
        self.db.commit()

        structlog_logger.info(
            "flashcard_created",
            flashcard_id=flashcard.id,
            deck_id=deck_id,
            card_count=card_count,
        )
        return flashcard

    def update_flashcard(
        self, user_id: int | None, flashcard_id: str, front: str, back: str
    ) -> models.Flashcard | None:
        """
        Update a flashcard's front and back text.

        Returns:
            Updated flashcard (its ``deck_id`` tells callers which deck page
            changed), or None if the card is not visible to the caller

        Raises:
            UnauthenticatedError: If no identity is supplied
            ValidationError: If front or back is out of bounds
        """
        if user_id is None:
            raise UnauthenticatedError("update flashcard")
        front, back = self._validate(front, back)

        flashcard = self.flashcard_repo.get_by_id(flashcard_id, user_id, for_update=True)
        if flashcard is None:
            self.db.rollback()
            return None

        flashcard = self.flashcard_repo.update(flashcard, front=front, back=back)
        self.db.commit()

        logger.info(f"Updated flashcard {flashcard_id}")
        return flashcard

    def delete_flashcard(self, user_id: int | None, flashcard_id: str) -> str | None:
        """
        Delete a flashcard and recount its deck.

        Returns:
            ID of the deck the card was removed from, or None if the card is
            not visible to the caller

        Raises:
            UnauthenticatedError: If no identity is supplied
        """
        if user_id is None:
            raise UnauthenticatedError("delete flashcard")

        flashcard = self.flashcard_repo.get_by_id(flashcard_id, user_id, for_update=True)
        if flashcard is None:
            self.db.rollback()
            return None

        deck_id = flashcard.deck_id
        self.flashcard_repo.delete(flashcard)
        card_count = self.deck_repo.recount_cards(deck_id)
        self.db.commit()

        structlog_logger.info(
            "flashcard_deleted",
            flashcard_id=flashcard_id,
            deck_id=deck_id,
            card_count=card_count,
        )
        return deck_id

    def _validate(self, front: str, back: str) -> tuple[str, str]:
        return (
            require_text(front, "front", models.FLASHCARD_TEXT_MAX_LENGTH),
            require_text(back, "back", models.FLASHCARD_TEXT_MAX_LENGTH),
        )
