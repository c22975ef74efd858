"""Pydantic schemas for the translation and British history lookups."""

from pydantic import BaseModel, ConfigDict, Field

from flashycardy.models import FLASHCARD_TEXT_MAX_LENGTH

HISTORY_QUESTION_MAX_LENGTH = 500


class HistoryQuestionRequest(BaseModel):
    """A free-text British history question."""

    question: str = Field(..., min_length=1, max_length=HISTORY_QUESTION_MAX_LENGTH)
    context: str | None = Field(None, description="Optional caller context, ignored by lookup")


class HistoryAnswerResponse(BaseModel):
    """Answer resolved from the knowledge table."""

    answer: str
    question: str
    intent: str
    matched: str = Field(..., description="Knowledge entry key or special case that answered")
    service: str = "British History Knowledge Base"
    message: str = "Answer generated from curated British History database"


class HistoryServiceInfo(BaseModel):
    """Capabilities of the British history lookup."""

    service: str
    info: str
    supported_figures: list[str]
    supported_events: list[str]
    question_types: list[str]
    examples: list[str]
    status: str = "active"


class TranslationRequest(BaseModel):
    """Text to translate between two supported language codes."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., min_length=1, max_length=FLASHCARD_TEXT_MAX_LENGTH)
    from_language: str = Field(..., min_length=1, alias="fromLanguage")
    to_language: str = Field(..., min_length=1, alias="toLanguage")
    context: str | None = None


class TranslationResponse(BaseModel):
    """Result of a translation lookup."""

    translation: str
    from_language: str
    to_language: str
    original_text: str
    service: str
    message: str


class SupportedLanguagesResponse(BaseModel):
    """Supported language codes and their display names."""

    supported_languages: dict[str, str]
    service: str
    language_count: int
    status: str = "active"
