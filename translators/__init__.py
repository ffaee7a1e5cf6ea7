"""
Translators Package
AIO Translator - Multi-Backend Support

Defines the capability contract every translation backend implements,
the backend error taxonomy, and dummy backends for local use.

Usage:
    from translators import OriginalTranslator
    from core import StyleTransfer, Language

    translator = StyleTransfer(OriginalTranslator())
    blocking = translator.capability_mut().as_blocking()
    text = blocking.translate("Hello,world!", None, Language.JAPANESE, Language.ENGLISH)
"""

from .base import (
    Translator,
    BlockingTranslator,
    AsyncTranslator,
    Capability,
    CapabilityKind,
    TranslationOutput,
    TranslationListOutput,
)

from .errors import (
    TranslatorError,
    RequestFailedError,
    NoResponseError,
    RequestTooLongError,
    UnknownLanguageError,
    UnsupportedLanguagePairError,
    ApiError,
    CapabilityError,
)

from .dummy import NoneTranslator, OriginalTranslator

__all__ = [
    # Contract
    "Translator",
    "BlockingTranslator",
    "AsyncTranslator",
    "Capability",
    "CapabilityKind",
    "TranslationOutput",
    "TranslationListOutput",

    # Errors
    "TranslatorError",
    "RequestFailedError",
    "NoResponseError",
    "RequestTooLongError",
    "UnknownLanguageError",
    "UnsupportedLanguagePairError",
    "ApiError",
    "CapabilityError",

    # Dummy backends
    "NoneTranslator",
    "OriginalTranslator",
]

__version__ = "1.0.0"
