"""
Identity provider: the terminal, keyless fallback tier.
"""

import logging
import re
from typing import Optional

from markdown_translator.config import LANGUAGE_PREFIX_PATTERN
from .base import TranslationProvider
from ..models import Direction, IDENTITY, ProviderResult
from ..result import Ok, Result

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(LANGUAGE_PREFIX_PATTERN)


def strip_language_prefixes(content: str) -> str:
    """Remove every ``[EN]`` / ``[JP]`` marker and the whitespace after it."""
    return _PREFIX_RE.sub("", content)


class IdentityProvider(TranslationProvider):
    """Returns the content unchanged apart from leftover language prefixes. Never fails."""

    name = IDENTITY
    display_name = "Identity (no translation)"

    async def translate(self, content: str, direction: Direction,
                        credential: Optional[str] = None) -> Result:
        logger.info("No translation provider available, returning original content")
        return Ok(ProviderResult(translated_content=strip_language_prefixes(content), provider=self.name))
