"""
Tiered provider selection with fallback.

The chain is fixed: OpenAI (primary) → Google Translate (secondary) →
Identity. A tier is tried only when the caller supplied its API key, and at
most once per request. What happens after each attempt is looked up in
``DECISION_TABLE``:

    ============  ==============================================
    outcome       action
    ============  ==============================================
    SKIPPED       no credential for this tier → next tier
    SUCCEEDED     return the provider result
    FAILED        AdapterFailure → classify and return the error
    RAISED        unexpected exception → next tier
    ============  ==============================================

A configured tier that answers with an HTTP error is authoritative: its error
is reported as-is rather than silently downgraded to a cheaper provider.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .error_classifier import classify
from .exceptions import ProviderError
from .models import GOOGLE_TRANSLATE, IDENTITY, OPENAI, TranslationRequest
from .providers import GoogleTranslateProvider, IdentityProvider, OpenAIProvider, TranslationProvider
from .result import Err, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tier:
    """One step of the fallback chain."""
    label: str
    provider: str
    # Key in the caller's CredentialSet; None for keyless tiers
    credential: Optional[str]


ADAPTER_CHAIN: Tuple[Tier, ...] = (
    Tier("primary", OPENAI, OPENAI),
    Tier("secondary", GOOGLE_TRANSLATE, GOOGLE_TRANSLATE),
    Tier("identity", IDENTITY, None),
)


class Outcome(Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    RAISED = "raised"


class Action(Enum):
    NEXT_TIER = "next_tier"
    RETURN_RESULT = "return_result"
    RETURN_ERROR = "return_error"


DECISION_TABLE = {
    Outcome.SKIPPED: Action.NEXT_TIER,
    Outcome.SUCCEEDED: Action.RETURN_RESULT,
    Outcome.FAILED: Action.RETURN_ERROR,
    Outcome.RAISED: Action.NEXT_TIER,
}


def create_provider(name: str) -> TranslationProvider:
    """Build a fresh provider instance for one request"""
    if name == OPENAI:
        return OpenAIProvider()
    if name == GOOGLE_TRANSLATE:
        return GoogleTranslateProvider()
    if name == IDENTITY:
        return IdentityProvider()
    raise ProviderError(f"Unknown translation provider: {name}", {"provider": name})


ProviderFactory = Callable[[str], TranslationProvider]


class TranslationOrchestrator:
    """Runs a validated request through the adapter chain."""

    def __init__(self, provider_factory: ProviderFactory = create_provider,
                 chain: Tuple[Tier, ...] = ADAPTER_CHAIN):
        """
        Args:
            provider_factory: Builds a provider from its identifier. Called
                per request so no client or credential outlives the request.
            chain: Ordered tiers; the last one must be keyless and infallible
        """
        self._provider_factory = provider_factory
        self._chain = chain

    async def orchestrate(self, request: TranslationRequest) -> Result:
        """
        Translate a validated request.

        Returns:
            Ok(ProviderResult) from the first tier that succeeds, or
            Err(ClassifiedError) from the first configured tier that fails
        """
        for tier in self._chain:
            credential = None
            if tier.credential is not None:
                credential = request.credentials.get(tier.credential)

            if tier.credential is not None and credential is None:
                outcome, result = Outcome.SKIPPED, None
                logger.info(f"{tier.provider} API key not provided, skipping {tier.label} tier")
            else:
                outcome, result = await self._attempt(tier, request, credential)

            action = DECISION_TABLE[outcome]
            if action is Action.RETURN_RESULT:
                logger.info(f"Translation completed by {tier.label} tier ({tier.provider})")
                return result
            if action is Action.RETURN_ERROR:
                error = classify(result.unwrap_err())
                logger.warning(f"{tier.label} tier ({tier.provider}) failed: {error.kind.value} - {error.title}")
                return Err(error)

        raise ProviderError("Adapter chain ended without a result", {"tiers": len(self._chain)})

    async def _attempt(self, tier: Tier, request: TranslationRequest,
                       credential: Optional[str]) -> Tuple[Outcome, Optional[Result]]:
        provider = self._provider_factory(tier.provider)
        try:
            result = await provider.translate(request.content, request.direction, credential)
        except Exception as e:
            logger.error(f"{tier.provider} translation error, falling back: {type(e).__name__}: {e}")
            return Outcome.RAISED, None
        finally:
            await self._close(tier, provider)

        if result.is_ok():
            return Outcome.SUCCEEDED, result
        return Outcome.FAILED, result

    @staticmethod
    async def _close(tier: Tier, provider: TranslationProvider):
        try:
            await provider.close()
        except Exception as e:
            logger.error(f"Error closing {tier.provider} provider: {type(e).__name__}: {e}")
