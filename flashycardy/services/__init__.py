"""Service layer for business logic."""

from flashycardy.services import auth_service
from flashycardy.services.deck_service import DeckService
from flashycardy.services.flashcard_service import FlashcardService
from flashycardy.services.revalidation import LoggingRevalidator, Revalidator
from flashycardy.services.translation_service import MyMemoryClient, TranslationService
from flashycardy.services.users_service import UserService

__all__ = [
    "DeckService",
    "FlashcardService",
    "LoggingRevalidator",
    "MyMemoryClient",
    "Revalidator",
    "TranslationService",
    "UserService",
    "auth_service",
]
