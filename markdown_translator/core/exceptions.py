"""
Exception hierarchy for the converter and translation pipeline.

Inside the pipeline failures travel as ``Err`` values; these exceptions are
raised at the edges (CLI, Markdown fetching, provider construction).
"""

from typing import Optional, Dict, Any

from .models import ClassifiedError


class TranslationError(Exception):
    """Base exception for all translation-related errors.

    Attributes:
        message: Human-readable error message
        context: Additional context about the error
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        base = f"{self.__class__.__name__}: {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base += f" (context: {context_str})"
        return base


class ProviderError(TranslationError):
    """Raised when a provider cannot be built or used (e.g. unknown tier)."""
    pass


class ClassifiedTranslationError(TranslationError):
    """Raised when a caller asks for an exception instead of an ``Err``.

    Attributes:
        error: The classified error descriptor
    """

    def __init__(self, error: ClassifiedError):
        context = {"kind": error.kind.value}
        if error.source_status is not None:
            context["status"] = error.source_status
        super().__init__(error.title, context)
        self.error = error


class MarkdownFetchError(TranslationError):
    """Raised when Markdown cannot be downloaded from a URL.

    Attributes:
        url: The URL that failed
        status: HTTP status when the server answered, None otherwise
    """

    def __init__(self, message: str, url: str, status: Optional[int] = None):
        context = {"url": url}
        if status is not None:
            context["status"] = status
        super().__init__(message, context)
        self.url = url
        self.status = status
