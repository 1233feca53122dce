"""Unit tests for the translation providers."""

import json

import httpx
import pytest

from markdown_translator.core.models import Direction, ErrorKind
from markdown_translator.core.error_classifier import classify
from markdown_translator.core.providers import (
    GoogleTranslateProvider,
    IdentityProvider,
    OpenAIProvider,
    extract_error_message,
    strip_language_prefixes,
)


def chat_completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class TestExtractErrorMessage:

    def test_nested_error_message(self):
        response = httpx.Response(429, json={"error": {"message": "Rate limit reached"}})
        assert extract_error_message(response) == "Rate limit reached"

    def test_malformed_json_body(self):
        response = httpx.Response(502, text="<html>Bad Gateway</html>")
        assert extract_error_message(response) is None

    def test_json_without_message(self):
        response = httpx.Response(500, json={"error": {"code": 500}})
        assert extract_error_message(response) is None

    def test_error_as_string(self):
        response = httpx.Response(400, json={"error": "bad input"})
        assert extract_error_message(response) == "bad input"


class TestOpenAIProvider:

    @pytest.mark.asyncio
    async def test_successful_translation(self, mock_transport):
        transport, seen = mock_transport(lambda request: httpx.Response(200, json=chat_completion("<p>Hello</p>")))
        provider = OpenAIProvider(api_endpoint="https://api.test/v1/chat/completions", transport=transport)

        result = await provider.translate("<p>こんにちは</p>", Direction.JA_TO_EN, "sk-test")
        await provider.close()

        assert result.is_ok()
        assert result.unwrap().translated_content == "<p>Hello</p>"
        assert result.unwrap().provider == "openai"
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_request_shape(self, mock_transport):
        transport, seen = mock_transport(lambda request: httpx.Response(200, json=chat_completion("<p>x</p>")))
        provider = OpenAIProvider(api_endpoint="https://api.test/v1/chat/completions",
                                  model="gpt-test", transport=transport)

        await provider.translate("<p>こんにちは</p>", Direction.JA_TO_EN, "sk-test")
        await provider.close()

        request = seen[0]
        body = json.loads(request.content)
        assert request.method == "POST"
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert body["model"] == "gpt-test"
        assert body["temperature"] == 0.3
        assert body["max_tokens"] == 4000
        assert body["messages"][0]["role"] == "system"
        assert "[EN]" in body["messages"][0]["content"]
        user_prompt = body["messages"][1]["content"]
        assert "from Japanese to English" in user_prompt
        assert "Keep all HTML tags" in user_prompt
        assert user_prompt.endswith("<p>こんにちは</p>")

    @pytest.mark.asyncio
    async def test_en_to_ja_prompt(self, mock_transport):
        transport, seen = mock_transport(lambda request: httpx.Response(200, json=chat_completion("<p>x</p>")))
        provider = OpenAIProvider(transport=transport)

        await provider.translate("<p>Hello</p>", Direction.EN_TO_JA, "sk-test")
        await provider.close()

        assert "from English to Japanese" in json.loads(seen[0].content)["messages"][1]["content"]

    @pytest.mark.asyncio
    async def test_http_error_carries_status_and_message(self, mock_transport):
        transport, _ = mock_transport(
            lambda request: httpx.Response(429, json={"error": {"message": "You exceeded your current quota"}})
        )
        provider = OpenAIProvider(transport=transport)

        result = await provider.translate("<p>x</p>", Direction.JA_TO_EN, "sk-test")
        await provider.close()

        failure = result.unwrap_err()
        assert failure.provider == "openai"
        assert failure.status == 429
        assert failure.message == "You exceeded your current quota"

    @pytest.mark.asyncio
    async def test_http_error_with_malformed_body(self, mock_transport):
        transport, _ = mock_transport(lambda request: httpx.Response(503, text="Service Unavailable"))
        provider = OpenAIProvider(transport=transport)

        result = await provider.translate("<p>x</p>", Direction.JA_TO_EN, "sk-test")
        await provider.close()

        failure = result.unwrap_err()
        assert failure.status == 503
        assert failure.message is None
        assert classify(failure).kind == ErrorKind.UPSTREAM_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_empty_content_is_unknown_failure(self, mock_transport):
        transport, _ = mock_transport(lambda request: httpx.Response(200, json={"choices": []}))
        provider = OpenAIProvider(transport=transport)

        result = await provider.translate("<p>x</p>", Direction.JA_TO_EN, "sk-test")
        await provider.close()

        failure = result.unwrap_err()
        assert failure.status is None
        assert classify(failure).kind == ErrorKind.UNKNOWN

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"choices": {}},
        {"choices": "none"},
        {"choices": [{"message": "oops"}]},
        {"choices": ["oops"]},
        {"choices": [{"message": {"content": None}}]},
        ["not", "an", "object"],
    ])
    async def test_malformed_success_body_is_unknown_failure(self, mock_transport, body):
        transport, _ = mock_transport(lambda request: httpx.Response(200, json=body))
        provider = OpenAIProvider(transport=transport)

        result = await provider.translate("<p>x</p>", Direction.JA_TO_EN, "sk-test")
        await provider.close()

        failure = result.unwrap_err()
        assert failure.provider == "openai"
        assert "No translation content received from OpenAI" in failure.message
        assert classify(failure).kind == ErrorKind.UNKNOWN

    @pytest.mark.asyncio
    async def test_non_json_success_is_unknown_failure(self, mock_transport):
        transport, _ = mock_transport(lambda request: httpx.Response(200, text="not json"))
        provider = OpenAIProvider(transport=transport)

        result = await provider.translate("<p>x</p>", Direction.JA_TO_EN, "sk-test")
        await provider.close()

        assert classify(result.unwrap_err()).kind == ErrorKind.UNKNOWN

    @pytest.mark.asyncio
    async def test_timeout_becomes_failure(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        provider = OpenAIProvider(timeout=5, transport=httpx.MockTransport(handler))

        result = await provider.translate("<p>x</p>", Direction.JA_TO_EN, "sk-test")
        await provider.close()

        failure = result.unwrap_err()
        assert failure.timed_out is True
        assert classify(failure).kind == ErrorKind.UPSTREAM_TIMEOUT

    @pytest.mark.asyncio
    async def test_connection_error_propagates(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        provider = OpenAIProvider(transport=httpx.MockTransport(handler))

        with pytest.raises(httpx.ConnectError):
            await provider.translate("<p>x</p>", Direction.JA_TO_EN, "sk-test")
        await provider.close()


class TestGoogleTranslateProvider:

    @pytest.mark.asyncio
    async def test_successful_translation(self, mock_transport):
        transport, seen = mock_transport(lambda request: httpx.Response(
            200, json={"data": {"translations": [{"translatedText": "<p>こんにちは</p>"}]}}
        ))
        provider = GoogleTranslateProvider(api_endpoint="https://translate.test/v2", transport=transport)

        result = await provider.translate("<p>Hello</p>", Direction.EN_TO_JA, "g-key")
        await provider.close()

        assert result.unwrap().translated_content == "<p>こんにちは</p>"
        request = seen[0]
        body = json.loads(request.content)
        assert request.url.params["key"] == "g-key"
        assert body == {"q": "<p>Hello</p>", "source": "en", "target": "ja", "format": "html"}

    @pytest.mark.asyncio
    async def test_http_error(self, mock_transport):
        transport, _ = mock_transport(lambda request: httpx.Response(
            403, json={"error": {"code": 403, "message": "API key not valid"}}
        ))
        provider = GoogleTranslateProvider(transport=transport)

        result = await provider.translate("<p>Hello</p>", Direction.EN_TO_JA, "g-key")
        await provider.close()

        failure = result.unwrap_err()
        assert failure.provider == "googleTranslate"
        assert failure.status == 403
        assert failure.message == "API key not valid"

    @pytest.mark.asyncio
    async def test_missing_translations(self, mock_transport):
        transport, _ = mock_transport(lambda request: httpx.Response(200, json={"data": {"translations": []}}))
        provider = GoogleTranslateProvider(transport=transport)

        result = await provider.translate("<p>Hello</p>", Direction.EN_TO_JA, "g-key")
        await provider.close()

        assert result.is_err()
        assert result.unwrap_err().status is None


class TestIdentityProvider:

    @pytest.mark.asyncio
    async def test_returns_content_unchanged(self):
        result = await IdentityProvider().translate("<p>こんにちは</p>", Direction.JA_TO_EN)

        assert result.unwrap().translated_content == "<p>こんにちは</p>"
        assert result.unwrap().provider == "identity"

    @pytest.mark.asyncio
    async def test_strips_language_prefixes(self):
        result = await IdentityProvider().translate("<p>[EN] Hello</p><p>[JP] こんにちは</p>", Direction.JA_TO_EN)

        assert result.unwrap().translated_content == "<p>Hello</p><p>こんにちは</p>"

    @pytest.mark.asyncio
    async def test_is_idempotent(self):
        provider = IdentityProvider()
        content = "<h1>[EN] Title</h1><p>[JP]本文</p>"

        first = await provider.translate(content, Direction.EN_TO_JA)
        second = await provider.translate(content, Direction.EN_TO_JA)
        again = await provider.translate(first.unwrap().translated_content, Direction.EN_TO_JA)

        assert first.unwrap().translated_content == second.unwrap().translated_content
        assert again.unwrap().translated_content == first.unwrap().translated_content

    def test_strip_leaves_other_brackets(self):
        assert strip_language_prefixes("[FR] [link](x) [EN]ok") == "[FR] [link](x) ok"
