"""
Prompts sent to the chat-completion provider.
"""

from .models import Direction


SYSTEM_PROMPT = (
    "You are a professional translator. Translate HTML content while preserving "
    "all HTML structure and formatting. Never add language prefixes like [EN] or "
    "[JP] to the translated text."
)


def build_translation_prompt(html_content: str, direction: Direction) -> str:
    """User prompt asking for a markup-preserving translation of ``html_content``."""
    return f"""Please translate the following HTML content from {direction.source_language} to {direction.target_language}.
Keep all HTML tags, attributes, and structure exactly the same. Only translate the text content between tags.
Preserve all formatting, links, and special characters.
Do not add any prefixes like [EN] or [JP] to the translated text.

HTML Content:
{html_content}"""
