"""Translation lookups through the free MyMemory HTTP API."""

import asyncio
import logging
from typing import Final

import httpx
import structlog

from flashycardy.config import Settings, get_settings
from flashycardy.exceptions import (
    TranslationTimeoutError,
    TranslationUnavailableError,
    UnsupportedLanguageError,
    ValidationError,
)
from flashycardy.models import FLASHCARD_TEXT_MAX_LENGTH

logger = logging.getLogger(__name__)
structlog_logger = structlog.get_logger(__name__)

SUPPORTED_LANGUAGES: Final[dict[str, str]] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese (Mandarin)",
    "ar": "Arabic",
    "ru": "Russian",
    "hi": "Hindi",
    "nl": "Dutch",
    "sv": "Swedish",
    "no": "Norwegian",
    "da": "Danish",
    "pl": "Polish",
    "tr": "Turkish",
    "th": "Thai",
    "vi": "Vietnamese",
}

# Codes MyMemory spells differently from ours
PROVIDER_LANGUAGE_CODES: Final[dict[str, str]] = {
    "zh": "zh-CN",
    "no": "nb",
}

PROVIDER_NAME = "MyMemory"


class MyMemoryClient:
    """HTTP client for the MyMemory translation endpoint.

    One request per call, bounded by ``timeout`` seconds, no retries. The
    call is a coroutine, so cancelling the awaiting task aborts the request.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float,
        user_agent: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    async def translate(self, text: str, source: str, target: str) -> str:
        """Translate ``text`` and return the provider's result.

        Raises:
            TranslationTimeoutError: If the provider does not answer in time
            TranslationUnavailableError: On HTTP errors or a degenerate result
        """
        langpair = (
            f"{PROVIDER_LANGUAGE_CODES.get(source, source)}|"
            f"{PROVIDER_LANGUAGE_CODES.get(target, target)}"
        )
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            # httpx timeouts are per phase; the deadline covers the whole exchange
            async with asyncio.timeout(self.timeout):
                async with httpx.AsyncClient(
                    timeout=self.timeout, transport=self._transport, headers=headers
                ) as client:
                    response = await client.get(
                        self.base_url, params={"q": text, "langpair": langpair}
                    )
        except (TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"{PROVIDER_NAME} translation timed out for {langpair}")
            raise TranslationTimeoutError(self.timeout) from e
        except httpx.HTTPError as e:
            logger.error(f"{PROVIDER_NAME} request failed: {e!s}")
            raise TranslationUnavailableError(f"{PROVIDER_NAME} request failed") from e

        if not response.is_success:
            raise TranslationUnavailableError(
                f"{PROVIDER_NAME} API error: HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TranslationUnavailableError(f"{PROVIDER_NAME} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise TranslationUnavailableError(f"{PROVIDER_NAME} returned an unexpected payload")

        # responseStatus arrives as either an int or a string
        if str(data.get("responseStatus")) != "200":
            details = data.get("responseDetails") or "Translation failed"
            raise TranslationUnavailableError(f"{PROVIDER_NAME} error: {details}")

        response_data = data.get("responseData")
        translated = (
            response_data.get("translatedText") if isinstance(response_data, dict) else None
        )
        if not isinstance(translated, str):
            raise TranslationUnavailableError(f"{PROVIDER_NAME} returned an unexpected payload")

        translated = translated.strip()
        if not translated:
            raise TranslationUnavailableError(f"{PROVIDER_NAME} returned empty translation")

        if translated.lower() == text.strip().lower():
            raise TranslationUnavailableError(
                f"{PROVIDER_NAME} returned identical text - may not support this language pair"
            )

        structlog_logger.info(
            "translation_succeeded", langpair=langpair, provider=PROVIDER_NAME
        )
        return translated


class TranslationService:
    """Validate a translation request and delegate to the provider client."""

    def __init__(self, client: MyMemoryClient) -> None:
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "TranslationService":
        settings = settings or get_settings()
        return cls(
            MyMemoryClient(
                base_url=settings.TRANSLATION_API_URL,
                timeout=settings.TRANSLATION_TIMEOUT_SECONDS,
                user_agent=settings.TRANSLATION_USER_AGENT,
            )
        )

    @staticmethod
    def supported_languages() -> dict[str, str]:
        return dict(SUPPORTED_LANGUAGES)

    async def translate(self, text: str, source: str, target: str) -> tuple[str, str]:
        """
        Translate text between two supported languages.

        Returns:
            Tuple of (translation, service name); the service is "none" when
            source and target match and no request was made

        Raises:
            ValidationError: If the text is blank or too long
            UnsupportedLanguageError: If either code is not supported
            TranslationUnavailableError: If the provider call fails
        """
        if not text or not text.strip():
            raise ValidationError("Text is required", field="text")
        if len(text) > FLASHCARD_TEXT_MAX_LENGTH:
            raise ValidationError("Text is too long", field="text")
        if source not in SUPPORTED_LANGUAGES:
            raise UnsupportedLanguageError(source, "source")
        if target not in SUPPORTED_LANGUAGES:
            raise UnsupportedLanguageError(target, "target")

        if source == target:
            logger.debug("Same language pair, returning original text")
            return text, "none"

        translation = await self.client.translate(text.strip(), source, target)
        return translation, PROVIDER_NAME
