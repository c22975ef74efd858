"""Repository layer for database operations using repository pattern."""

from flashycardy.repositories.deck_repository import DeckRepository
from flashycardy.repositories.flashcard_repository import FlashcardRepository
from flashycardy.repositories.user_repository import UserRepository

__all__ = [
    "DeckRepository",
    "FlashcardRepository",
    "UserRepository",
]
