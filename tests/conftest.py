"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides common fixtures
and configuration for all test modules.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import httpx
import pytest

from markdown_translator.core.models import AdapterFailure, ProviderResult
from markdown_translator.core.providers import IdentityProvider, TranslationProvider
from markdown_translator.core.result import Err, Ok


class FakeProvider(TranslationProvider):
    """Scripted provider recording every call into a shared log."""

    def __init__(self, name, call_log, result=None, exception=None):
        self.name = name
        self.display_name = name
        self._call_log = call_log
        self._result = result
        self._exception = exception
        self.closed = False

    async def translate(self, content, direction, credential=None):
        self._call_log.append((self.name, content, direction, credential))
        if self._exception is not None:
            raise self._exception
        return self._result

    async def close(self):
        self.closed = True


class ScriptedProviders:
    """
    Provider factory for the orchestrator.

    ``script`` maps a provider name to an Ok/Err result or to an exception
    instance. Unscripted names fall back to the real IdentityProvider.
    """

    def __init__(self, script=None):
        self.script = script or {}
        self.calls = []
        self.created = []

    def __call__(self, name):
        scripted = self.script.get(name)
        if scripted is None:
            provider = IdentityProvider()
            original = provider.translate

            async def recording_translate(content, direction, credential=None):
                self.calls.append((name, content, direction, credential))
                return await original(content, direction, credential)

            provider.translate = recording_translate
        elif isinstance(scripted, BaseException):
            provider = FakeProvider(name, self.calls, exception=scripted)
        else:
            provider = FakeProvider(name, self.calls, result=scripted)
        self.created.append(provider)
        return provider

    def called(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def scripted_providers():
    """Factory building a ScriptedProviders from a script dict."""
    return ScriptedProviders


@pytest.fixture
def ok_result():
    def _make(text, provider="openai"):
        return Ok(ProviderResult(translated_content=text, provider=provider))
    return _make


@pytest.fixture
def http_failure():
    def _make(status, message=None, provider="openai"):
        return Err(AdapterFailure(provider=provider, status=status, message=message))
    return _make


@pytest.fixture
def mock_transport():
    """
    Build an httpx.MockTransport from a handler and keep the requests it saw.

    Usage: ``transport, seen = mock_transport(handler)``
    """
    def _make(handler):
        seen = []

        def _record(request):
            seen.append(request)
            return handler(request)

        return httpx.MockTransport(_record), seen
    return _make


@pytest.fixture
def sample_html():
    """Sample HTML for testing."""
    return "<p>こんにちは</p>"
