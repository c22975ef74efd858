"""API routes for deck management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from flashycardy import schemas
from flashycardy.core import container
from flashycardy.di import get_revalidator, inject_service
from flashycardy.exceptions import DeckNotFoundError, FlashyCardyError
from flashycardy.services import DeckService, FlashcardService
from flashycardy.services.auth_service import OptionalUserId
from flashycardy.services.revalidation import Revalidator, revalidate_dashboard, revalidate_deck

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])

DeckServiceDep = Annotated[DeckService, Depends(inject_service(container.deck_service))]
FlashcardServiceDep = Annotated[
    FlashcardService, Depends(inject_service(container.flashcard_service))
]
RevalidatorDep = Annotated[Revalidator, Depends(get_revalidator)]


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("", response_model=schemas.DecksListResponse, status_code=status.HTTP_200_OK)
def list_decks(user_id: OptionalUserId, service: DeckServiceDep) -> schemas.DecksListResponse:
    """
    List the caller's decks, newest first.

    Anonymous callers get an empty list rather than an error.
    """
    try:
        decks = service.list_decks(user_id)
        return schemas.DecksListResponse(
            decks=[schemas.Deck.model_validate(deck) for deck in decks],
            total_cards=sum(deck.card_count for deck in decks),
        )
    except FlashyCardyError:
        raise
    except Exception as e:
        raise _unexpected("list decks", e) from e


@router.post("", response_model=schemas.DeckCreateResponse, status_code=status.HTTP_201_CREATED)
def create_deck(
    request: schemas.DeckCreateRequest,
    user_id: OptionalUserId,
    service: DeckServiceDep,
    revalidator: RevalidatorDep,
) -> schemas.DeckCreateResponse:
    """
    Create a new empty deck.

    Raises:
        UnauthenticatedError: If the caller is anonymous
        ValidationError: If the title or description is out of bounds
    """
    try:
        deck = service.create_deck(user_id, request.title, request.description)
        revalidate_dashboard(revalidator)
        return schemas.DeckCreateResponse(
            success=True,
            message="Deck created successfully",
            deck=schemas.Deck.model_validate(deck),
        )
    except FlashyCardyError:
        raise
    except Exception as e:
        raise _unexpected("create deck", e) from e


@router.get("/{deck_id}", response_model=schemas.Deck, status_code=status.HTTP_200_OK)
def get_deck(deck_id: str, user_id: OptionalUserId, service: DeckServiceDep) -> schemas.Deck:
    """Get a single deck owned by the caller."""
    deck = service.get_deck(user_id, deck_id)
    if deck is None:
        raise DeckNotFoundError(deck_id)
    return schemas.Deck.model_validate(deck)


@router.put(
    "/{deck_id}", response_model=schemas.DeckUpdateResponse, status_code=status.HTTP_200_OK
)
def update_deck(
    deck_id: str,
    request: schemas.DeckUpdateRequest,
    user_id: OptionalUserId,
    service: DeckServiceDep,
    revalidator: RevalidatorDep,
) -> schemas.DeckUpdateResponse:
    """
    Update a deck's title and description.

    Args:
        deck_id: ID of the deck to update
        request: New title and description

    Returns:
        Updated deck

    Raises:
        DeckNotFoundError: If no deck with this id is owned by the caller
    """
    try:
        deck = service.update_deck(user_id, deck_id, request.title, request.description)
        if deck is None:
            raise DeckNotFoundError(deck_id)
        revalidate_deck(revalidator, deck_id)
        return schemas.DeckUpdateResponse(
            success=True,
            message="Deck updated successfully",
            deck=schemas.Deck.model_validate(deck),
        )
    except FlashyCardyError:
        raise
    except Exception as e:
        raise _unexpected(f"update deck {deck_id}", e) from e


@router.delete(
    "/{deck_id}", response_model=schemas.DeckDeleteResponse, status_code=status.HTTP_200_OK
)
def delete_deck(
    deck_id: str,
    user_id: OptionalUserId,
    service: DeckServiceDep,
    revalidator: RevalidatorDep,
) -> schemas.DeckDeleteResponse:
    """Delete a deck together with all of its flashcards."""
    try:
        if not service.delete_deck(user_id, deck_id):
            raise DeckNotFoundError(deck_id)
        revalidate_dashboard(revalidator)
        return schemas.DeckDeleteResponse(success=True, message="Deck deleted successfully")
    except FlashyCardyError:
        raise
    except Exception as e:
        raise _unexpected(f"delete deck {deck_id}", e) from e


@router.get(
    "/{deck_id}/flashcards",
    response_model=schemas.FlashcardsListResponse,
    status_code=status.HTTP_200_OK,
)
def list_deck_flashcards(
    deck_id: str, user_id: OptionalUserId, service: FlashcardServiceDep
) -> schemas.FlashcardsListResponse:
    """List the flashcards of a deck; empty when the deck is not visible to the caller."""
    try:
        flashcards = service.list_flashcards(user_id, deck_id)
        return schemas.FlashcardsListResponse(
            flashcards=[schemas.Flashcard.model_validate(card) for card in flashcards]
        )
    except FlashyCardyError:
        raise
    except Exception as e:
        raise _unexpected(f"list flashcards for deck {deck_id}", e) from e


@router.post(
    "/{deck_id}/flashcards",
    response_model=schemas.FlashcardCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_deck_flashcard(
    deck_id: str,
    request: schemas.FlashcardCreateRequest,
    user_id: OptionalUserId,
    service: FlashcardServiceDep,
    revalidator: RevalidatorDep,
) -> schemas.FlashcardCreateResponse:
    """
    Add a flashcard to a deck.

    Raises:
        UnauthenticatedError: If the caller is anonymous
        DeckNotFoundError: If the deck is missing or owned by someone else
        ValidationError: If front or back is out of bounds
    """
    try:
        flashcard = service.create_flashcard(user_id, deck_id, request.front, request.back)
        revalidate_deck(revalidator, deck_id)
        return schemas.FlashcardCreateResponse(
            success=True,
            message="Flashcard created successfully",
            flashcard=schemas.Flashcard.model_validate(flashcard),
        )
    except FlashyCardyError:
        raise
    except Exception as e:
        raise _unexpected(f"create flashcard for deck {deck_id}", e) from e
