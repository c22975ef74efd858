"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime as dt

from pydantic import BaseModel, Field

from flashycardy.models import FLASHCARD_TEXT_MAX_LENGTH


class FlashcardBase(BaseModel):
    """Base schema for Flashcard."""

    front: str = Field(
        ...,
        min_length=1,
        max_length=FLASHCARD_TEXT_MAX_LENGTH,
        description="Front (prompt) text for the flashcard",
    )
    back: str = Field(
        ...,
        min_length=1,
        max_length=FLASHCARD_TEXT_MAX_LENGTH,
        description="Back (answer) text for the flashcard",
    )


class FlashcardCreateRequest(FlashcardBase):
    """Schema for creating a new flashcard."""


class FlashcardUpdateRequest(FlashcardBase):
    """Schema for updating a flashcard."""


class Flashcard(FlashcardBase):
    """Schema for Flashcard response."""

    id: str
    deck_id: str
    created_at: dt
    updated_at: dt

    model_config = {"from_attributes": True}


class FlashcardCreateResponse(BaseModel):
    """Schema for flashcard creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Created flashcard")


class FlashcardUpdateResponse(BaseModel):
    """Schema for flashcard update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Updated flashcard")


class FlashcardDeleteResponse(BaseModel):
    """Schema for flashcard deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class FlashcardsListResponse(BaseModel):
    """Schema for list of flashcards response."""

    flashcards: list[Flashcard] = Field(default_factory=list, description="List of flashcards")
