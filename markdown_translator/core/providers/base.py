"""
Base classes for translation providers.

Every provider exposes the same contract::

    await provider.translate(content, direction, credential)
        -> Ok(ProviderResult) | Err(AdapterFailure)

HTTP failures and timeouts come back as ``Err``. Any other exception
(connection refused, DNS failure, bugs) propagates so the orchestrator can
treat it as unexpected and move on to the next tier.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from markdown_translator.config import REQUEST_TIMEOUT
from ..models import AdapterFailure, Direction
from ..result import Err, Ok, Result

logger = logging.getLogger(__name__)


def extract_error_message(response: httpx.Response) -> Optional[str]:
    """
    Pull ``error.message`` out of an upstream error body.

    Both OpenAI and Google report errors as ``{"error": {"message": ...}}``.
    Returns None when the body is not JSON or has no message.
    """
    try:
        data = response.json()
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return message if isinstance(message, str) and message else None
    if isinstance(error, str) and error:
        return error
    return None


class TranslationProvider(ABC):
    """Abstract base class for translation providers"""

    #: Identifier used in the caller's ``apiKeys`` object
    name: str = ""
    #: Human-readable name for logs and messages
    display_name: str = ""

    @abstractmethod
    async def translate(self, content: str, direction: Direction,
                        credential: Optional[str] = None) -> Result:
        """
        Translate ``content`` in ``direction``.

        Args:
            content: HTML markup to translate
            direction: Translation direction
            credential: API key for this provider (None for keyless providers)

        Returns:
            Ok(ProviderResult) or Err(AdapterFailure)
        """
        pass

    async def close(self):
        """Release any resources held by the provider"""
        pass


class HttpTranslationProvider(TranslationProvider):
    """Provider backed by one HTTPS endpoint, called once per request."""

    def __init__(self, api_endpoint: str, timeout: float = REQUEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            api_endpoint: Endpoint URL
            timeout: Upper bound in seconds for the whole call
            transport: Optional httpx transport (used by tests to stub the upstream)
        """
        self.api_endpoint = api_endpoint
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client for this provider instance"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _post(self, json: Dict[str, Any], headers: Optional[Dict[str, str]] = None,
                    params: Optional[Dict[str, str]] = None) -> Result:
        """
        POST ``json`` to the endpoint.

        Returns:
            Ok(httpx.Response) for 2xx responses, Err(AdapterFailure) for
            other statuses or when the timeout expires
        """
        client = await self._get_client()
        try:
            response = await client.post(
                self.api_endpoint,
                json=json,
                headers=headers,
                params=params,
                timeout=self.timeout
            )
        except httpx.TimeoutException as e:
            logger.error(f"{self.display_name} API timeout after {self.timeout}s: {e}")
            return Err(AdapterFailure(
                provider=self.name,
                message=f"{self.display_name} API request timed out after {self.timeout} seconds",
                timed_out=True,
                cause=e
            ))

        if response.is_success:
            return Ok(response)

        logger.error(f"{self.display_name} API error: {response.status_code} - {response.text[:500]}")
        return Err(AdapterFailure(
            provider=self.name,
            status=response.status_code,
            message=extract_error_message(response)
        ))

    def _empty_payload(self, reason: str) -> Err:
        """Failure for a 2xx response that carries no usable translation."""
        logger.error(f"{self.display_name} returned no usable translation: {reason}")
        return Err(AdapterFailure(
            provider=self.name,
            message=f"No translation content received from {self.display_name}"
        ))
