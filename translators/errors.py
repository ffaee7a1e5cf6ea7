"""
Translator Errors

Errors raised by translation backends. The style-transfer layer
propagates these unchanged.
"""

from typing import Any, Optional


class TranslatorError(Exception):
    """Base exception for translator-related errors"""
    pass


class RequestFailedError(TranslatorError):
    """Backend request failed with an HTTP status code"""
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Request failed with status code {status_code}")


class NoResponseError(TranslatorError):
    """Backend did not return a response"""
    def __init__(self):
        super().__init__("API did not return a response")


class RequestTooLongError(TranslatorError):
    """Request exceeded the backend's size limit"""
    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Request was too long ({length} > {limit})")


class UnknownLanguageError(TranslatorError):
    """Language could not be converted to or from a backend code"""
    def __init__(self, language: Any):
        self.language = language
        super().__init__(f"Unknown language: {language!r}")


class UnsupportedLanguagePairError(TranslatorError):
    """Backend does not support this language pair"""
    def __init__(self, from_lang: Any, to_lang: Any):
        self.from_lang = from_lang
        self.to_lang = to_lang
        super().__init__(f"Translator does not support {from_lang} -> {to_lang}")


class ApiError(TranslatorError):
    """Backend returned an invalid or error response"""
    def __init__(self, provider: str, code: Optional[str] = None, message: str = ""):
        self.provider = provider
        self.code = code
        self.message = message
        super().__init__(f"{provider} API error {code or ''}: {message}".strip())


class CapabilityError(TranslatorError):
    """A translator does not honour the capability contract"""
    pass
