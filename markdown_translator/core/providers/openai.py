"""
OpenAI chat-completion provider (primary tier).

Sends the whole HTML document in one request with instructions to translate
only the human-readable text and keep every tag and attribute verbatim.
"""

from typing import Optional
import httpx

from markdown_translator.config import (
    OPENAI_API_ENDPOINT,
    OPENAI_MODEL,
    OPENAI_TEMPERATURE,
    OPENAI_MAX_TOKENS,
    REQUEST_TIMEOUT
)
from markdown_translator.utils.provider_logger import log_provider_interaction
from .base import HttpTranslationProvider
from ..models import Direction, OPENAI, ProviderResult
from ..prompts import SYSTEM_PROMPT, build_translation_prompt
from ..result import Ok, Result


class OpenAIProvider(HttpTranslationProvider):
    """
    Provider for the OpenAI chat completions API.

    Configuration:
        endpoint: OPENAI_API_ENDPOINT (any OpenAI-compatible endpoint works)
        model: OPENAI_MODEL
        api_key: supplied per request by the caller

    Example:
        >>> provider = OpenAIProvider()
        >>> result = await provider.translate("<p>こんにちは</p>", Direction.JA_TO_EN, "sk-...")
        >>> result.unwrap().translated_content
        '<p>Hello</p>'
    """

    name = OPENAI
    display_name = "OpenAI"

    def __init__(self, api_endpoint: str = OPENAI_API_ENDPOINT, model: str = OPENAI_MODEL,
                 temperature: float = OPENAI_TEMPERATURE, max_tokens: int = OPENAI_MAX_TOKENS,
                 timeout: float = REQUEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(api_endpoint, timeout=timeout, transport=transport)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def build_payload(self, content: str, direction: Direction) -> dict:
        """Request body for a chat completion translating ``content``."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_translation_prompt(content, direction)},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def translate(self, content: str, direction: Direction,
                        credential: Optional[str] = None) -> Result:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {credential}",
        }
        payload = self.build_payload(content, direction)

        outcome = await self._post(payload, headers=headers)
        if outcome.is_err():
            return outcome

        try:
            response_json = outcome.unwrap().json()
        except ValueError as e:
            return self._empty_payload(f"invalid JSON ({e})")

        translated = None
        try:
            translated = response_json["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            pass

        log_provider_interaction(self.name, payload["messages"][1]["content"], translated or "",
                                 system_prompt=SYSTEM_PROMPT)

        if not isinstance(translated, str) or not translated:
            return self._empty_payload("missing choices[0].message.content")

        return Ok(ProviderResult(translated_content=translated, provider=self.name))
