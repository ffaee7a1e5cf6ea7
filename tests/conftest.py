"""
Pytest configuration and shared fixtures for AIO Translator tests.
"""
import sys
import pytest
from pathlib import Path
from typing import Any, List, Optional

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from core.language import Language
from translators.base import (
    AsyncTranslator,
    BlockingTranslator,
    Capability,
    TranslationListOutput,
    TranslationOutput,
    Translator,
)


# ============================================================================
# Fake backends
# ============================================================================

class ScriptedBlockingTranslator(Translator, BlockingTranslator):
    """Blocking backend that returns scripted results and records calls."""

    def __init__(self, response: str = "", batch_response: Optional[List[str]] = None,
                 error: Optional[Exception] = None):
        self.response = response
        self.batch_response = batch_response
        self.error = error
        self.calls = []

    def local(self) -> bool:
        return True

    def capability(self) -> Capability:
        return Capability.blocking(self)

    def translate(self, query: str, context: Optional[Any], from_lang, to_lang) -> str:
        self.calls.append(("translate", query, context, from_lang, to_lang))
        if self.error:
            raise self.error
        return self.response

    def translate_batch(self, queries: List[str], context: Optional[Any], from_lang, to_lang) -> List[str]:
        self.calls.append(("translate_batch", list(queries), context, from_lang, to_lang))
        if self.error:
            raise self.error
        return list(self.batch_response)


class ScriptedAsyncTranslator(Translator, AsyncTranslator):
    """Async backend that returns scripted results and records calls."""

    def __init__(self, response: str = "", batch_response: Optional[List[str]] = None,
                 detected: Optional[Language] = None, error: Optional[Exception] = None):
        self.response = response
        self.batch_response = batch_response
        self.detected = detected
        self.error = error
        self.calls = []

    def local(self) -> bool:
        return False

    def capability(self) -> Capability:
        return Capability.asynchronous(self)

    async def translate(self, query: str, context: Optional[Any], from_lang, to_lang) -> TranslationOutput:
        self.calls.append(("translate", query, context, from_lang, to_lang))
        if self.error:
            raise self.error
        return TranslationOutput(text=self.response, lang=self.detected)

    async def translate_batch(self, queries: List[str], context: Optional[Any], from_lang, to_lang) -> TranslationListOutput:
        self.calls.append(("translate_batch", list(queries), context, from_lang, to_lang))
        if self.error:
            raise self.error
        return TranslationListOutput(text=list(self.batch_response), lang=self.detected)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def test_settings():
    """Settings isolated from the environment and .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def blocking_backend():
    """Factory for scripted blocking backends."""
    return ScriptedBlockingTranslator


@pytest.fixture
def async_backend():
    """Factory for scripted async backends."""
    return ScriptedAsyncTranslator


@pytest.fixture
def sample_texts():
    """Sample translated texts with typical artifacts."""
    return {
        "clean": "Hello, world! How are you?",
        "glued_marks": "Hello,world!How are you?",
        "spaced_marks": "Hello , world ! How are you ?",
        "extra_whitespace": "  Hello,\tworld!\n\nHow   are you?  ",
        "babble": "cdcdcdcdcdcdcdcdcd",
        "no_content": "... 123 !?",
        "arabic": "مرحبا بالعالم",
    }
