"""
Google Cloud Translation (v2) provider (secondary tier).
"""

from typing import Optional
import httpx

from markdown_translator.config import GOOGLE_TRANSLATE_ENDPOINT, REQUEST_TIMEOUT
from markdown_translator.utils.provider_logger import log_provider_interaction
from .base import HttpTranslationProvider
from ..models import Direction, GOOGLE_TRANSLATE, ProviderResult
from ..result import Ok, Result


class GoogleTranslateProvider(HttpTranslationProvider):
    """
    Provider for the Google Translate v2 REST API.

    The markup is sent as-is with ``format: html`` so the service leaves
    tags and attributes untouched. The API key travels as the ``key`` query
    parameter.
    """

    name = GOOGLE_TRANSLATE
    display_name = "Google Translate"

    def __init__(self, api_endpoint: str = GOOGLE_TRANSLATE_ENDPOINT,
                 timeout: float = REQUEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(api_endpoint, timeout=timeout, transport=transport)

    @staticmethod
    def build_payload(content: str, direction: Direction) -> dict:
        return {
            "q": content,
            "source": direction.source_code,
            "target": direction.target_code,
            "format": "html",
        }

    async def translate(self, content: str, direction: Direction,
                        credential: Optional[str] = None) -> Result:
        outcome = await self._post(
            self.build_payload(content, direction),
            headers={"Content-Type": "application/json"},
            params={"key": credential or ""}
        )
        if outcome.is_err():
            return outcome

        try:
            response_json = outcome.unwrap().json()
        except ValueError as e:
            return self._empty_payload(f"invalid JSON ({e})")

        translated = None
        try:
            translated = response_json["data"]["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError):
            pass

        log_provider_interaction(self.name, content, translated or "")

        if not isinstance(translated, str) or not translated:
            return self._empty_payload("missing data.translations[0].translatedText")

        return Ok(ProviderResult(translated_content=translated, provider=self.name))
