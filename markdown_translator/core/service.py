"""
Entry point used by the HTTP API and the CLI: validate, then orchestrate.
"""

import logging
from typing import Any, Optional

from .exceptions import ClassifiedTranslationError
from .models import ProviderResult, TranslationRequest
from .orchestrator import TranslationOrchestrator
from .result import Result
from .validator import RequestValidator, parse_request

logger = logging.getLogger(__name__)


class TranslationService:
    """Validates a request and runs it through the provider chain."""

    def __init__(self, validator: Optional[RequestValidator] = None,
                 orchestrator: Optional[TranslationOrchestrator] = None):
        self.validator = validator or RequestValidator()
        self.orchestrator = orchestrator or TranslationOrchestrator()

    async def translate(self, request: TranslationRequest) -> Result:
        """
        Returns:
            Ok(ProviderResult) or Err(ClassifiedError). Local errors
            (InvalidRequest, MissingCredential) never reach a provider.
        """
        validated = self.validator.validate(request)
        if validated.is_err():
            logger.info(f"Rejected translation request: {validated.unwrap_err().kind.value}")
            return validated

        logger.info(
            f"Translating {len(request.content)} chars ({request.direction.value}) "
            f"with keys for: {', '.join(request.credentials.providers())}"
        )
        return await self.orchestrator.orchestrate(validated.unwrap())

    async def translate_payload(self, payload: Any) -> Result:
        """Same as ``translate`` for a raw ``POST /api/translate`` body."""
        parsed = parse_request(payload)
        if parsed.is_err():
            return parsed
        return await self.translate(parsed.unwrap())

    async def translate_or_raise(self, request: TranslationRequest) -> ProviderResult:
        """
        Raises:
            ClassifiedTranslationError: carrying the classified error
        """
        result = await self.translate(request)
        if result.is_err():
            raise ClassifiedTranslationError(result.unwrap_err())
        return result.unwrap()
