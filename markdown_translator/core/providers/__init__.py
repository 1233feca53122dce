"""
Translation provider implementations.

Providers:
    - openai: OpenAI chat completions (primary tier)
    - google_translate: Google Translate v2 (secondary tier)
    - identity: no-op fallback (terminal tier)
"""

from .base import TranslationProvider, HttpTranslationProvider, extract_error_message
from .openai import OpenAIProvider
from .google_translate import GoogleTranslateProvider
from .identity import IdentityProvider, strip_language_prefixes

__all__ = [
    'TranslationProvider',
    'HttpTranslationProvider',
    'extract_error_message',
    'OpenAIProvider',
    'GoogleTranslateProvider',
    'IdentityProvider',
    'strip_language_prefixes',
]
