"""Service layer for deck-related business logic."""

import logging

import structlog
from sqlalchemy.orm import Session

from flashycardy import models, repositories
from flashycardy.exceptions import UnauthenticatedError
from flashycardy.services.validation import optional_text, require_text

logger = logging.getLogger(__name__)
structlog_logger = structlog.get_logger(__name__)


class DeckService:
    """Ownership-scoped operations on decks.

    Read paths treat a missing identity as "no data" and return empty
    results. Write paths raise ``UnauthenticatedError``. A deck owned by
    someone else is reported exactly as a missing one.
    """

    def __init__(self, db: Session) -> None:
        """Initialize service with database session."""
        self.db = db
        self.deck_repo = repositories.DeckRepository(db)

    def list_decks(self, user_id: int | None) -> list[models.Deck]:
        """List the decks owned by ``user_id``; empty for anonymous callers."""
        if user_id is None:
            return []
        return self.deck_repo.list_by_user(user_id)

    def get_deck(self, user_id: int | None, deck_id: str) -> models.Deck | None:
        """Get a deck if it exists and is owned by ``user_id``."""
        if user_id is None:
            return None
        return self.deck_repo.get_by_id(deck_id, user_id)

    def create_deck(
        self, user_id: int | None, title: str, description: str | None = None
    ) -> models.Deck:
        """
        Create a new empty deck.

        Args:
            user_id: Identity of the caller
            title: Deck title, 1-255 characters after stripping
            description: Optional description, up to 1000 characters

        Returns:
            Created deck with a card count of zero

        Raises:
            UnauthenticatedError: If no identity is supplied
            ValidationError: If title or description is out of bounds
        """
        if user_id is None:
            raise UnauthenticatedError("create deck")
        clean_title, clean_description = self._validate(title, description)

        deck = self.deck_repo.create(
            user_id=user_id, title=clean_title, description=clean_description
        )
        self.db.commit()

        structlog_logger.info("deck_created", deck_id=deck.id, user_id=user_id)
        return deck

    def update_deck(
        self,
        user_id: int | None,
        deck_id: str,
        title: str,
        description: str | None = None,
    ) -> models.Deck | None:
        """
        Update a deck's title and description.

        Returns:
            Updated deck, or None if no deck with this id is owned by the caller

        Raises:
            UnauthenticatedError: If no identity is supplied
            ValidationError: If title or description is out of bounds
        """
        if user_id is None:
            raise UnauthenticatedError("update deck")
        clean_title, clean_description = self._validate(title, description)

        deck = self.deck_repo.get_by_id(deck_id, user_id, for_update=True)
        if deck is None:
            self.db.rollback()
            return None

        deck = self.deck_repo.update(deck, title=clean_title, description=clean_description)
        self.db.commit()

        logger.info(f"Updated deck {deck_id}")
        return deck

    def delete_deck(self, user_id: int | None, deck_id: str) -> bool:
        """
        Delete a deck and, by cascade, all of its flashcards.

        Returns:
            True if a deck was removed, False if none was owned by the caller

        Raises:
            UnauthenticatedError: If no identity is supplied
        """
        if user_id is None:
            raise UnauthenticatedError("delete deck")

        deck = self.deck_repo.get_by_id(deck_id, user_id, for_update=True)
        if deck is None:
            self.db.rollback()
            return False

        self.deck_repo.delete(deck)
        self.db.commit()

        structlog_logger.info("deck_deleted", deck_id=deck_id, user_id=user_id)
        return True

    def _validate(self, title: str, description: str | None) -> tuple[str, str | None]:
        # Titles are stored stripped, so the length bound applies to the stripped value
        clean_title = require_text(
            title.strip() if title else title, "title", models.DECK_TITLE_MAX_LENGTH
        )
        clean_description = optional_text(
            description, "description", models.DECK_DESCRIPTION_MAX_LENGTH
        )
        return clean_title, clean_description
