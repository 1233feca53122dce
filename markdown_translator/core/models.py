"""
Data model for translation requests, provider outcomes and classified errors.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Any, Mapping


class Direction(Enum):
    """Translation direction, serialized as on the wire."""
    JA_TO_EN = "ja-to-en"
    EN_TO_JA = "en-to-ja"

    @classmethod
    def parse(cls, value: Any) -> Optional["Direction"]:
        """Return the direction for a wire value, or None if unknown."""
        if isinstance(value, cls):
            return value
        for direction in cls:
            if direction.value == value:
                return direction
        return None

    @property
    def source_language(self) -> str:
        return "Japanese" if self is Direction.JA_TO_EN else "English"

    @property
    def target_language(self) -> str:
        return "English" if self is Direction.JA_TO_EN else "Japanese"

    @property
    def source_code(self) -> str:
        return "ja" if self is Direction.JA_TO_EN else "en"

    @property
    def target_code(self) -> str:
        return "en" if self is Direction.JA_TO_EN else "ja"


# Provider identifiers as they appear in the request's ``apiKeys`` object
OPENAI = "openai"
GOOGLE_TRANSLATE = "googleTranslate"
IDENTITY = "identity"


class CredentialSet:
    """
    Per-request API keys supplied by the caller.

    Keys are held only for the lifetime of one request and are never
    included in repr() or logs.
    """

    def __init__(self, secrets: Optional[Mapping[str, Any]] = None):
        self._secrets: Dict[str, str] = {}
        for name, value in (secrets or {}).items():
            if isinstance(value, str) and value.strip():
                self._secrets[name] = value.strip()

    def get(self, provider: str) -> Optional[str]:
        """Secret for ``provider``, or None when absent or blank."""
        return self._secrets.get(provider)

    def has(self, provider: str) -> bool:
        return provider in self._secrets

    def has_any(self, providers: Optional[Iterable[str]] = None) -> bool:
        """True if a secret is present, restricted to ``providers`` when given."""
        if providers is None:
            return bool(self._secrets)
        return any(name in self._secrets for name in providers)

    def providers(self) -> list:
        return sorted(self._secrets)

    def __repr__(self) -> str:
        return f"CredentialSet(providers={self.providers()})"


@dataclass
class TranslationRequest:
    """A single translation request as received from the caller."""
    content: Optional[str]
    direction: Direction
    credentials: CredentialSet = field(default_factory=CredentialSet)


@dataclass
class ProviderResult:
    """Successful adapter output."""
    translated_content: str
    provider: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"translatedContent": self.translated_content}


@dataclass
class AdapterFailure:
    """
    Failure reported by a provider adapter.

    Attributes:
        provider: Provider identifier that failed
        status: HTTP status from the upstream, None when no response was received
        message: Message extracted from the upstream error body, if any
        timed_out: True when the bounded request timeout expired
        cause: Underlying transport exception, if any
    """
    provider: str
    status: Optional[int] = None
    message: Optional[str] = None
    timed_out: bool = False
    cause: Optional[BaseException] = None


class ErrorKind(Enum):
    """Category of every error surfaced to a caller."""
    INVALID_REQUEST = "InvalidRequest"
    MISSING_CREDENTIAL = "MissingCredential"
    UPSTREAM_REQUEST = "UpstreamRequest"
    UPSTREAM_AUTH = "UpstreamAuth"
    UPSTREAM_FORBIDDEN = "UpstreamForbidden"
    UPSTREAM_RATE_LIMIT = "UpstreamRateLimit"
    UPSTREAM_SERVER = "UpstreamServer"
    UPSTREAM_GATEWAY = "UpstreamGateway"
    UPSTREAM_UNAVAILABLE = "UpstreamUnavailable"
    UPSTREAM_TIMEOUT = "UpstreamTimeout"
    NETWORK = "Network"
    UNKNOWN = "Unknown"

    @property
    def is_local(self) -> bool:
        """True for errors detected before any provider is contacted."""
        return self in (ErrorKind.INVALID_REQUEST, ErrorKind.MISSING_CREDENTIAL)


@dataclass(frozen=True)
class ClassifiedError:
    """Structured failure with a fixed category and user guidance."""
    kind: ErrorKind
    title: str
    detail: str
    source_status: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "error": self.detail,
            "title": self.title,
            "type": self.kind.value,
        }
        if self.source_status is not None:
            payload["status"] = self.source_status
        return payload
