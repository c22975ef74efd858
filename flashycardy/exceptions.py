"""Custom exception hierarchy for the FlashyCardy application."""

from fastapi import HTTPException
from starlette import status


class FlashyCardyError(Exception):
    """Base exception for all FlashyCardy errors."""

    error_code = "internal_error"

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_payload(self) -> dict[str, object]:
        """Machine-checkable classification plus human-readable message."""
        return {"error": self.error_code, "detail": self.message}


class UnauthenticatedError(FlashyCardyError):
    """A write was attempted without a caller identity."""

    error_code = "unauthenticated"

    def __init__(self, action: str | None = None) -> None:
        """Initialize with the action that required authentication."""
        self.action = action
        if action:
            message = f"Authentication required to {action}"
        else:
            message = "Authentication required"
        super().__init__(message, status_code=401)


class NotFoundError(FlashyCardyError):
    """Resource not found error."""

    error_code = "not_found"

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class DeckNotFoundError(NotFoundError):
    """Deck is missing or not owned by the caller.

    The two cases share one message so a caller cannot probe for decks
    belonging to other users.
    """

    def __init__(self, deck_id: str | None = None) -> None:
        """Initialize with deck ID."""
        self.deck_id = deck_id
        if deck_id is not None:
            super().__init__(f"Deck with id {deck_id} not found")
        else:
            super().__init__("Deck not found")


class FlashcardNotFoundError(NotFoundError):
    """Flashcard is missing or sits in a deck the caller does not own."""

    def __init__(self, flashcard_id: str) -> None:
        """Initialize with flashcard ID."""
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with id {flashcard_id} not found")


class ValidationError(FlashyCardyError):
    """Validation error with optional field-level detail."""

    error_code = "validation_error"

    def __init__(self, message: str, field: str | None = None, status_code: int = 422) -> None:
        """Initialize with message and the offending field."""
        self.field = field
        super().__init__(message, status_code=status_code)

    def to_payload(self) -> dict[str, object]:
        payload = super().to_payload()
        if self.field is not None:
            payload["field"] = self.field
        return payload


class UnsupportedLanguageError(ValidationError):
    """Language code outside the supported translation set."""

    error_code = "unsupported_language"

    def __init__(self, code: str, role: str) -> None:
        """Initialize with the rejected code and whether it was source or target."""
        self.code = code
        self.role = role
        super().__init__(
            f"Unsupported {role} language: {code}",
            field=f"{role}_language",
            status_code=400,
        )


class NoAnswerFoundError(FlashyCardyError):
    """Knowledge lookup exhausted every entry without a match."""

    error_code = "no_answer_found"

    def __init__(self, message: str, suggestions: list[str] | None = None) -> None:
        """Initialize with a hint message and suggested question topics."""
        self.suggestions = suggestions or []
        super().__init__(message, status_code=404)

    def to_payload(self) -> dict[str, object]:
        payload = super().to_payload()
        payload["suggestions"] = self.suggestions
        return payload


class TranslationUnavailableError(FlashyCardyError):
    """Third-party translation failed or returned a degenerate result."""

    error_code = "translation_unavailable"

    def __init__(self, reason: str, status_code: int = 503) -> None:
        """Initialize with the provider failure reason."""
        self.reason = reason
        super().__init__(f"Translation failed: {reason}", status_code=status_code)


class TranslationTimeoutError(TranslationUnavailableError):
    """Translation provider did not answer within the configured timeout."""

    error_code = "translation_timeout"

    def __init__(self, timeout_seconds: float) -> None:
        """Initialize with the timeout that elapsed."""
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"translation timed out after {timeout_seconds:g} seconds, please try again",
            status_code=504,
        )


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
