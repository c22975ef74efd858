"""API routes for text translation."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from flashycardy import schemas
from flashycardy.di import get_translation_service
from flashycardy.services import TranslationService
from flashycardy.services.auth_service import CurrentUserId
from flashycardy.services.translation_service import PROVIDER_NAME

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translate", tags=["translate"])


@router.post("", response_model=schemas.TranslationResponse, status_code=status.HTTP_200_OK)
async def translate_text(
    request: schemas.TranslationRequest,
    user_id: CurrentUserId,
    service: Annotated[TranslationService, Depends(get_translation_service)],
) -> schemas.TranslationResponse:
    """
    Translate flashcard text between two supported languages.

    Raises:
        UnsupportedLanguageError: If either language code is unknown (400)
        TranslationTimeoutError: If the provider does not answer in time (504)
        TranslationUnavailableError: If the provider fails (503)
    """
    logger.info(
        f"Translation request from user {user_id}: "
        f"{request.from_language} -> {request.to_language}"
    )
    translation, service_name = await service.translate(
        request.text, request.from_language, request.to_language
    )
    if service_name == PROVIDER_NAME:
        message = f"Translation completed successfully using {service_name}"
    else:
        message = "Source and target languages are the same"
    return schemas.TranslationResponse(
        translation=translation,
        from_language=request.from_language,
        to_language=request.to_language,
        original_text=request.text,
        service=service_name,
        message=message,
    )


@router.get(
    "", response_model=schemas.SupportedLanguagesResponse, status_code=status.HTTP_200_OK
)
async def get_supported_languages() -> schemas.SupportedLanguagesResponse:
    """List the language codes the translator accepts."""
    languages = TranslationService.supported_languages()
    return schemas.SupportedLanguagesResponse(
        supported_languages=languages,
        service=PROVIDER_NAME,
        language_count=len(languages),
    )
