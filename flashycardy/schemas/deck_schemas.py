"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime as dt

from pydantic import BaseModel, Field, field_validator

from flashycardy.models import DECK_DESCRIPTION_MAX_LENGTH, DECK_TITLE_MAX_LENGTH


class DeckBase(BaseModel):
    """Base schema for Deck."""

    title: str = Field(..., max_length=DECK_TITLE_MAX_LENGTH, description="Deck title")
    description: str | None = Field(
        None, max_length=DECK_DESCRIPTION_MAX_LENGTH, description="Optional deck description"
    )

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value: object) -> object:
        """Strip the title before its length is checked; blank titles fail in the service."""
        return value.strip() if isinstance(value, str) else value


class DeckCreateRequest(DeckBase):
    """Schema for creating a new deck."""


class DeckUpdateRequest(DeckBase):
    """Schema for updating a deck's title and description."""


class Deck(DeckBase):
    """Schema for Deck response."""

    id: str
    user_id: int
    card_count: int = Field(..., ge=0)
    created_at: dt
    updated_at: dt

    model_config = {"from_attributes": True}


class DeckCreateResponse(BaseModel):
    """Schema for deck creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="Created deck")


class DeckUpdateResponse(BaseModel):
    """Schema for deck update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="Updated deck")


class DeckDeleteResponse(BaseModel):
    """Schema for deck deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class DecksListResponse(BaseModel):
    """Schema for list of decks response."""

    decks: list[Deck] = Field(default_factory=list, description="List of decks")
    total_cards: int = Field(0, ge=0, description="Sum of card counts across the listed decks")
