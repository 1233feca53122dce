"""
Classification of provider failures into caller-facing errors.

Each upstream HTTP status maps to one ErrorKind with a title and remediation
guidance. Failures without a status are classified from the transport
exception when one is attached, and from the message text only as a last
resort.
"""

import logging
from typing import Dict, Optional, Tuple

import httpx

from .models import AdapterFailure, ClassifiedError, ErrorKind

logger = logging.getLogger(__name__)


STATUS_TABLE: Dict[int, Tuple[ErrorKind, str, str]] = {
    400: (
        ErrorKind.UPSTREAM_REQUEST,
        "Request Error (400)",
        "The translation request was rejected as invalid. Please check the content.",
    ),
    401: (
        ErrorKind.UPSTREAM_AUTH,
        "Authentication Error (401)",
        "The API key is invalid or has expired. Please check the API key in the settings.",
    ),
    403: (
        ErrorKind.UPSTREAM_FORBIDDEN,
        "Access Denied (403)",
        "The API key does not have permission for this operation. Please check the API key's permissions.",
    ),
    429: (
        ErrorKind.UPSTREAM_RATE_LIMIT,
        "Rate Limit Exceeded (429)",
        "The API usage limit has been reached. Try the following:\n\n"
        "• Wait a while and try again\n"
        "• Check your API usage\n"
        "• Consider upgrading your plan",
    ),
    500: (
        ErrorKind.UPSTREAM_SERVER,
        "Server Error (500)",
        "The translation service reported a server error. Please wait a while and try again.",
    ),
    502: (
        ErrorKind.UPSTREAM_GATEWAY,
        "Gateway Error (502)",
        "Communication with the translation service failed. Please wait a while and try again.",
    ),
    503: (
        ErrorKind.UPSTREAM_UNAVAILABLE,
        "Service Unavailable (503)",
        "The translation service is temporarily unavailable and may be under maintenance. "
        "Please wait a while and try again.",
    ),
    504: (
        ErrorKind.UPSTREAM_TIMEOUT,
        "Timeout Error (504)",
        "The translation timed out. The content may be too large; "
        "split it into smaller sections and translate them separately.",
    ),
}

NETWORK_TITLE = "Network Error"
NETWORK_GUIDANCE = (
    "Please check your internet connection.\n\n"
    "• Check your Wi-Fi connection\n"
    "• Check your proxy settings\n"
    "• Check your firewall settings"
)

TIMEOUT_TITLE = "Timeout Error"
TIMEOUT_GUIDANCE = (
    "The translation timed out. Reduce the size of the content "
    "or wait a while and try again."
)

UNKNOWN_TITLE = "Translation Error"
UNKNOWN_GUIDANCE = "An unexpected error occurred during translation."

NETWORK_INDICATORS = ("fetch", "network", "connect")
TIMEOUT_INDICATORS = ("timeout", "timed out")

LOCAL_ERRORS: Dict[ErrorKind, Tuple[str, str]] = {
    ErrorKind.INVALID_REQUEST: (
        "Translation Error",
        "There is no HTML content to translate.",
    ),
    ErrorKind.MISSING_CREDENTIAL: (
        "API Key Not Set",
        "An API key is required to translate.\n"
        "Please set your OpenAI or Google Translate API key in the settings.",
    ),
}


def _with_details(guidance: str, message: Optional[str]) -> str:
    """Append the upstream message to the guidance, never replacing it."""
    if message:
        return f"{guidance}\n\nDetails: {message}"
    return guidance


def _transport_kind(failure: AdapterFailure) -> Optional[ErrorKind]:
    """Kind implied by structured transport signals, if any."""
    if failure.timed_out or isinstance(failure.cause, httpx.TimeoutException):
        return ErrorKind.UPSTREAM_TIMEOUT
    if isinstance(failure.cause, httpx.NetworkError):
        return ErrorKind.NETWORK
    return None


def _message_kind(message: Optional[str]) -> Optional[ErrorKind]:
    """Kind guessed from the message text. Network indicators win over timeout ones."""
    text = (message or "").lower()
    if any(indicator in text for indicator in NETWORK_INDICATORS):
        return ErrorKind.NETWORK
    if any(indicator in text for indicator in TIMEOUT_INDICATORS):
        return ErrorKind.UPSTREAM_TIMEOUT
    return None


def classify(failure: AdapterFailure) -> ClassifiedError:
    """
    Map an adapter failure to a classified error.

    Args:
        failure: Failure reported by a provider adapter

    Returns:
        ClassifiedError with exactly one kind, a title and a detail message
    """
    if failure.status is not None:
        entry = STATUS_TABLE.get(failure.status)
        if entry is not None:
            kind, title, guidance = entry
        else:
            kind = ErrorKind.UNKNOWN
            title = f"HTTP Error ({failure.status})"
            guidance = f"The translation API returned an error. Status code: {failure.status}"
        error = ClassifiedError(kind, title, _with_details(guidance, failure.message), failure.status)
    else:
        kind = _transport_kind(failure) or _message_kind(failure.message)
        if kind is ErrorKind.UPSTREAM_TIMEOUT:
            error = ClassifiedError(kind, TIMEOUT_TITLE, _with_details(TIMEOUT_GUIDANCE, failure.message))
        elif kind is ErrorKind.NETWORK:
            error = ClassifiedError(kind, NETWORK_TITLE, _with_details(NETWORK_GUIDANCE, failure.message))
        elif failure.message:
            error = ClassifiedError(ErrorKind.UNKNOWN, UNKNOWN_TITLE, f"Error details: {failure.message}")
        else:
            error = ClassifiedError(ErrorKind.UNKNOWN, UNKNOWN_TITLE, UNKNOWN_GUIDANCE)

    logger.debug(f"Classified {failure.provider} failure (status={failure.status}) as {error.kind.value}")
    return error


def classify_exception(exc: BaseException, provider: str = "unknown") -> ClassifiedError:
    """Classify an exception that escaped every adapter."""
    return classify(AdapterFailure(provider=provider, message=str(exc) or type(exc).__name__, cause=exc))


def local_error(kind: ErrorKind, detail: Optional[str] = None) -> ClassifiedError:
    """Build an InvalidRequest or MissingCredential error."""
    if kind not in LOCAL_ERRORS:
        raise ValueError(f"{kind.value} is not a local error kind")
    title, guidance = LOCAL_ERRORS[kind]
    return ClassifiedError(kind, title, _with_details(guidance, detail))
