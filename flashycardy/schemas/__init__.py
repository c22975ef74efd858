"""Pydantic schemas for request/response validation."""

from flashycardy.schemas.deck_schemas import (
    Deck,
    DeckCreateRequest,
    DeckCreateResponse,
    DeckDeleteResponse,
    DecksListResponse,
    DeckUpdateRequest,
    DeckUpdateResponse,
)
from flashycardy.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardCreateRequest,
    FlashcardCreateResponse,
    FlashcardDeleteResponse,
    FlashcardsListResponse,
    FlashcardUpdateRequest,
    FlashcardUpdateResponse,
)
from flashycardy.schemas.lookup_schemas import (
    HistoryAnswerResponse,
    HistoryQuestionRequest,
    HistoryServiceInfo,
    SupportedLanguagesResponse,
    TranslationRequest,
    TranslationResponse,
)
from flashycardy.schemas.user_schemas import (
    TokenWithRefresh,
    UserDetailsResponse,
    UserRegisterRequest,
)

__all__ = [
    "Deck",
    "DeckCreateRequest",
    "DeckCreateResponse",
    "DeckDeleteResponse",
    "DeckUpdateRequest",
    "DeckUpdateResponse",
    "DecksListResponse",
    "Flashcard",
    "FlashcardCreateRequest",
    "FlashcardCreateResponse",
    "FlashcardDeleteResponse",
    "FlashcardUpdateRequest",
    "FlashcardUpdateResponse",
    "FlashcardsListResponse",
    "HistoryAnswerResponse",
    "HistoryQuestionRequest",
    "HistoryServiceInfo",
    "SupportedLanguagesResponse",
    "TokenWithRefresh",
    "TranslationRequest",
    "TranslationResponse",
    "UserDetailsResponse",
    "UserRegisterRequest",
]
