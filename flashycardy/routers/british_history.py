"""API routes for the British history question lookup."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from flashycardy import schemas
from flashycardy.di import get_history_answer_resolver
from flashycardy.domain.history import HistoryAnswerResolver, QuestionIntent
from flashycardy.domain.history.knowledge_base import supported_events, supported_figures
from flashycardy.services.auth_service import CurrentUserId

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/british-history", tags=["british-history"])

SERVICE_NAME = "British History Answer Generator v2.0"
SERVICE_INFO = (
    "Question-answering over a curated British history table "
    "with WHO/WHAT/WHEN/WHERE detection"
)
EXAMPLE_QUESTIONS = [
    "When was Churchill born?",
    "Where was Shakespeare born?",
    "What was Darwin famous for?",
    "Who defeated Napoleon at Waterloo?",
    "When did the Battle of Hastings happen?",
    "Who was the Iron Lady?",
]


@router.post("", response_model=schemas.HistoryAnswerResponse, status_code=status.HTTP_200_OK)
def answer_question(
    request: schemas.HistoryQuestionRequest,
    user_id: CurrentUserId,
    resolver: Annotated[HistoryAnswerResolver, Depends(get_history_answer_resolver)],
) -> schemas.HistoryAnswerResponse:
    """
    Answer a British history question.

    Raises:
        NoAnswerFoundError: If nothing in the table answers the question (404)
    """
    logger.info(f"British history question from user {user_id}")
    result = resolver.resolve(request.question)
    return schemas.HistoryAnswerResponse(
        answer=result.answer,
        question=request.question,
        intent=result.intent.value,
        matched=result.matched,
    )


@router.get("", response_model=schemas.HistoryServiceInfo, status_code=status.HTTP_200_OK)
def get_service_info() -> schemas.HistoryServiceInfo:
    """Describe what the lookup can answer."""
    return schemas.HistoryServiceInfo(
        service=SERVICE_NAME,
        info=SERVICE_INFO,
        supported_figures=supported_figures(),
        supported_events=supported_events(),
        question_types=[intent.value for intent in QuestionIntent],
        examples=list(EXAMPLE_QUESTIONS),
    )
