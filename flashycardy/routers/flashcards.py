"""API routes for flashcard management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from flashycardy import schemas
from flashycardy.core import container
from flashycardy.di import get_revalidator, inject_service
from flashycardy.exceptions import FlashcardNotFoundError, FlashyCardyError
from flashycardy.services import FlashcardService
from flashycardy.services.auth_service import OptionalUserId
from flashycardy.services.revalidation import Revalidator, revalidate_deck

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])

FlashcardServiceDep = Annotated[
    FlashcardService, Depends(inject_service(container.flashcard_service))
]


@router.put(
    "/{flashcard_id}",
    response_model=schemas.FlashcardUpdateResponse,
    status_code=status.HTTP_200_OK,
)
def update_flashcard(
    flashcard_id: str,
    request: schemas.FlashcardUpdateRequest,
    user_id: OptionalUserId,
    service: FlashcardServiceDep,
    revalidator: Annotated[Revalidator, Depends(get_revalidator)],
) -> schemas.FlashcardUpdateResponse:
    """
    Update a flashcard's front and back.

    Args:
        flashcard_id: ID of the flashcard to update
        request: Request containing the new front and back

    Returns:
        Updated flashcard

    Raises:
        HTTPException: If flashcard not found or update fails
    """
    try:
        flashcard = service.update_flashcard(user_id, flashcard_id, request.front, request.back)
        if flashcard is None:
            raise FlashcardNotFoundError(flashcard_id)
        revalidate_deck(revalidator, flashcard.deck_id)
        return schemas.FlashcardUpdateResponse(
            success=True,
            message="Flashcard updated successfully",
            flashcard=schemas.Flashcard.model_validate(flashcard),
        )
    except FlashyCardyError:
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{flashcard_id}",
    response_model=schemas.FlashcardDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_flashcard(
    flashcard_id: str,
    user_id: OptionalUserId,
    service: FlashcardServiceDep,
    revalidator: Annotated[Revalidator, Depends(get_revalidator)],
) -> schemas.FlashcardDeleteResponse:
    """
    Delete a flashcard.

    Raises:
        HTTPException: If flashcard not found or deletion fails
    """
    try:
        deck_id = service.delete_flashcard(user_id, flashcard_id)
        if deck_id is None:
            raise FlashcardNotFoundError(flashcard_id)
        revalidate_deck(revalidator, deck_id)
        return schemas.FlashcardDeleteResponse(
            success=True,
            message="Flashcard deleted successfully",
        )
    except FlashyCardyError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
