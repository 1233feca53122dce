"""
Request validation performed before any provider is contacted.
"""

from typing import Any

from .error_classifier import local_error
from .models import CredentialSet, Direction, ErrorKind, TranslationRequest
from .orchestrator import ADAPTER_CHAIN
from .result import Err, Ok, Result


class RequestValidator:
    """Rejects structurally invalid translation requests. Has no side effects."""

    def __init__(self, chain=ADAPTER_CHAIN):
        # Only keys for a tier in the chain count; unknown names are ignored
        self.credential_names = tuple(tier.credential for tier in chain if tier.credential)

    def validate(self, request: TranslationRequest) -> Result:
        """
        Check the preconditions of a translation request.

        Returns:
            Ok(request) unchanged, or Err(ClassifiedError) with kind
            InvalidRequest (no content) or MissingCredential (no API key)
        """
        if not isinstance(request.content, str) or not request.content.strip():
            return Err(local_error(ErrorKind.INVALID_REQUEST, "Content is required"))

        if not request.credentials.has_any(self.credential_names):
            return Err(local_error(ErrorKind.MISSING_CREDENTIAL))

        return Ok(request)


def parse_request(payload: Any) -> Result:
    """
    Build a TranslationRequest from the JSON body of ``POST /api/translate``.

    Expected shape: ``{"content": str, "direction": "ja-to-en" | "en-to-ja",
    "apiKeys": {"openai": str, "googleTranslate": str}}``. Content and
    credentials are checked later by ``RequestValidator``.
    """
    if not isinstance(payload, dict):
        return Err(local_error(ErrorKind.INVALID_REQUEST, "Request body must be a JSON object"))

    direction = Direction.parse(payload.get("direction", Direction.JA_TO_EN.value))
    if direction is None:
        return Err(local_error(
            ErrorKind.INVALID_REQUEST,
            f"Unknown direction: {payload.get('direction')!r} (expected 'ja-to-en' or 'en-to-ja')"
        ))

    api_keys = payload.get("apiKeys")
    if not isinstance(api_keys, dict):
        api_keys = {}

    return Ok(TranslationRequest(
        content=payload.get("content"),
        direction=direction,
        credentials=CredentialSet(api_keys),
    ))
