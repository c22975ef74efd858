"""Tests for TranslationService and the MyMemory client."""

import asyncio
import time
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from flashycardy.exceptions import (
    TranslationTimeoutError,
    TranslationUnavailableError,
    UnsupportedLanguageError,
    ValidationError,
)
from flashycardy.services.translation_service import (
    SUPPORTED_LANGUAGES,
    MyMemoryClient,
    TranslationService,
)

API_URL = "https://translate.example.test/get"


def _service(handler: Callable[[httpx.Request], httpx.Response]) -> TranslationService:
    client = MyMemoryClient(
        base_url=API_URL,
        timeout=2.0,
        user_agent="FlashyCardy-tests",
        transport=httpx.MockTransport(handler),
    )
    return TranslationService(client)


def _reply(translated: str, status: Any = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"responseData": {"translatedText": translated}, "responseStatus": status},
        )

    return handler


class TestTranslate:
    @pytest.mark.asyncio
    async def test_translates_through_provider(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"responseData": {"translatedText": "hola"}, "responseStatus": 200},
            )

        translation, service = await _service(handler).translate("hello", "en", "es")

        assert (translation, service) == ("hola", "MyMemory")
        assert len(seen) == 1
        assert seen[0].url.params["q"] == "hello"
        assert seen[0].url.params["langpair"] == "en|es"
        assert seen[0].headers["User-Agent"] == "FlashyCardy-tests"

    @pytest.mark.asyncio
    async def test_maps_provider_language_codes(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.params["langpair"])
            return httpx.Response(
                200,
                json={"responseData": {"translatedText": "hei"}, "responseStatus": "200"},
            )

        await _service(handler).translate("hello", "zh", "no")

        assert seen == ["zh-CN|nb"]

    @pytest.mark.asyncio
    async def test_same_language_makes_no_request(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        translation, service = await _service(handler).translate("Bonjour", "fr", "fr")

        assert (translation, service) == ("Bonjour", "none")

    @pytest.mark.asyncio
    async def test_identical_text_is_a_failure(self) -> None:
        with pytest.raises(TranslationUnavailableError, match="identical text"):
            await _service(_reply("Hello")).translate("hello", "en", "de")

    @pytest.mark.asyncio
    async def test_empty_translation_is_a_failure(self) -> None:
        with pytest.raises(TranslationUnavailableError, match="empty translation"):
            await _service(_reply("   ")).translate("hello", "en", "de")

    @pytest.mark.asyncio
    async def test_provider_status_error(self) -> None:
        with pytest.raises(TranslationUnavailableError):
            await _service(_reply("hallo", status=403)).translate("hello", "en", "de")

    @pytest.mark.asyncio
    async def test_http_error_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(TranslationUnavailableError, match="HTTP 502") as exc_info:
            await _service(handler).translate("hello", "en", "de")

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TranslationTimeoutError) as exc_info:
            await _service(handler).translate("hello", "en", "de")

        assert exc_info.value.status_code == 504
        assert exc_info.value.to_payload()["error"] == "translation_timeout"

    @pytest.mark.asyncio
    async def test_trickling_response_hits_overall_deadline(self) -> None:
        """Test that a body arriving in slow chunks cannot outlast the timeout."""

        async def trickle() -> AsyncIterator[bytes]:
            body = b'{"responseData": {"translatedText": "hola"}, "responseStatus": 200}'
            for byte in body:
                await asyncio.sleep(0.02)
                yield bytes([byte])

        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=trickle())

        client = MyMemoryClient(
            base_url=API_URL,
            timeout=0.2,
            user_agent="FlashyCardy-tests",
            transport=httpx.MockTransport(handler),
        )

        started = time.monotonic()
        with pytest.raises(TranslationTimeoutError):
            await client.translate("hello", "en", "es")

        assert time.monotonic() - started < 1.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            [],
            None,
            {"responseData": "x", "responseStatus": 200},
            {"responseData": {"translatedText": 5}, "responseStatus": 200},
            {"responseStatus": 200},
        ],
    )
    async def test_unexpected_payload_is_unavailable(self, payload: Any) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=payload)

        with pytest.raises(TranslationUnavailableError) as exc_info:
            await _service(handler).translate("hello", "en", "de")

        assert exc_info.value.to_payload()["error"] == "translation_unavailable"

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(TranslationUnavailableError):
            await _service(handler).translate("hello", "en", "de")

    @pytest.mark.asyncio
    async def test_unsupported_source_language(self) -> None:
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            await _service(_reply("x")).translate("hello", "xx", "en")

        assert exc_info.value.field == "source_language"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_unsupported_target_language(self) -> None:
        with pytest.raises(UnsupportedLanguageError, match="target"):
            await _service(_reply("x")).translate("hello", "en", "klingon")

    @pytest.mark.asyncio
    async def test_blank_text(self) -> None:
        with pytest.raises(ValidationError):
            await _service(_reply("x")).translate("   ", "en", "es")

    @pytest.mark.asyncio
    async def test_text_too_long(self) -> None:
        with pytest.raises(ValidationError):
            await _service(_reply("x")).translate("a" * 1001, "en", "es")


def test_supported_languages() -> None:
    languages = TranslationService.supported_languages()

    assert len(languages) == 20
    assert languages == SUPPORTED_LANGUAGES
    assert languages is not SUPPORTED_LANGUAGES
