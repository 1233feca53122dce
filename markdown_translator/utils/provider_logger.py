"""
Provider logging utilities for debugging and transparency

Dumps what is sent to and received from a translation provider when
DEBUG_MODE is enabled. API keys are never part of the dump.
"""
import os
from typing import Optional

from markdown_translator import config

# Longer payloads are cut in the dump
MAX_DUMP_CHARS = 2000
RULE_WIDTH = 80

_COLORS = {
    "title": '\033[1;93m',
    "request": '\033[38;5;214m',
    "response": '\033[92m',
    "rule": '\033[90m',
    "reset": '\033[0m',
}


def _color(role: str) -> str:
    return "" if os.environ.get('NO_COLOR') else _COLORS[role]


def _clip(text: str) -> str:
    if len(text) <= MAX_DUMP_CHARS:
        return text
    return f"{text[:MAX_DUMP_CHARS]}... [{len(text) - MAX_DUMP_CHARS} more chars]"


def _section(label: str, text: str, role: str) -> str:
    rule = f"{_color('rule')}{'-' * RULE_WIDTH}{_color('reset')}"
    return f"{_color(role)}[{label}]{_color('reset')}\n{rule}\n{_color(role)}{_clip(text)}{_color('reset')}\n{rule}"


def format_provider_interaction(provider: str, user_prompt: str, raw_response: str,
                                system_prompt: Optional[str] = None) -> str:
    """Build the dump printed by ``log_provider_interaction``."""
    header = f"{_color('title')}>>> {provider} exchange{_color('reset')}"
    parts = [header]
    if system_prompt:
        parts.append(_section("system", system_prompt, "request"))
    parts.append(_section("request", user_prompt, "request"))
    parts.append(_section("response", raw_response, "response"))
    return "\n".join(parts) + "\n"


def log_provider_interaction(
    provider: str,
    user_prompt: str,
    raw_response: str,
    system_prompt: Optional[str] = None,
):
    """
    Print a full provider interaction when DEBUG_MODE is enabled.

    Args:
        provider: Provider identifier (e.g., "openai", "googleTranslate")
        user_prompt: Content or prompt sent to the provider
        raw_response: Text returned by the provider before any cleanup
        system_prompt: System instructions, for chat-completion providers
    """
    if not config.DEBUG_MODE:
        return
    print(format_provider_interaction(provider, user_prompt, raw_response, system_prompt))
