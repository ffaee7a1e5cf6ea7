#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Language Support - Language tags shared by all translators
"""

from typing import Dict
from dataclasses import dataclass
from enum import Enum

from translators.errors import UnknownLanguageError


class Language(str, Enum):
    """Supported languages, valued by ISO 639-1 code"""
    ENGLISH = "en"
    JAPANESE = "ja"
    CHINESE_SIMPLIFIED = "zh-Hans"
    CHINESE_TRADITIONAL = "zh-Hant"
    KOREAN = "ko"
    VIETNAMESE = "vi"
    FRENCH = "fr"
    GERMAN = "de"
    SPANISH = "es"
    ITALIAN = "it"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    UKRAINIAN = "uk"
    POLISH = "pl"
    DUTCH = "nl"
    TURKISH = "tr"
    ARABIC = "ar"
    PERSIAN = "fa"
    HEBREW = "he"
    HINDI = "hi"
    THAI = "th"
    INDONESIAN = "id"

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """
        Resolve a language from its code.

        Matching is case-insensitive and accepts "_" for "-".
        Bare "zh" resolves to Simplified Chinese.

        Raises:
            UnknownLanguageError: If no language has this code
        """
        normalized = code.strip().replace("_", "-").lower()
        if normalized == "zh":
            return cls.CHINESE_SIMPLIFIED
        for language in cls:
            if language.value.lower() == normalized:
                return language
        raise UnknownLanguageError(code)

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """Resolve a language from its English name, e.g. "Arabic"."""
        normalized = name.strip().lower()
        for language, info in LANGUAGES.items():
            if info.name.lower() == normalized:
                return language
        raise UnknownLanguageError(name)

    @property
    def info(self) -> "LanguageInfo":
        return LANGUAGES[self]

    @property
    def is_rtl(self) -> bool:
        """Whether the language is written right-to-left"""
        return self.info.direction == "rtl"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LanguageInfo:
    """Language information"""
    code: str
    name: str
    native_name: str
    direction: str = "ltr"  # ltr (left-to-right) or rtl (right-to-left)


# Language database
LANGUAGES: Dict[Language, LanguageInfo] = {
    Language.ENGLISH: LanguageInfo("en", "English", "English"),
    Language.JAPANESE: LanguageInfo("ja", "Japanese", "日本語"),
    Language.CHINESE_SIMPLIFIED: LanguageInfo("zh-Hans", "Chinese (Simplified)", "简体中文"),
    Language.CHINESE_TRADITIONAL: LanguageInfo("zh-Hant", "Chinese (Traditional)", "繁體中文"),
    Language.KOREAN: LanguageInfo("ko", "Korean", "한국어"),
    Language.VIETNAMESE: LanguageInfo("vi", "Vietnamese", "Tiếng Việt"),
    Language.FRENCH: LanguageInfo("fr", "French", "Français"),
    Language.GERMAN: LanguageInfo("de", "German", "Deutsch"),
    Language.SPANISH: LanguageInfo("es", "Spanish", "Español"),
    Language.ITALIAN: LanguageInfo("it", "Italian", "Italiano"),
    Language.PORTUGUESE: LanguageInfo("pt", "Portuguese", "Português"),
    Language.RUSSIAN: LanguageInfo("ru", "Russian", "Русский"),
    Language.UKRAINIAN: LanguageInfo("uk", "Ukrainian", "Українська"),
    Language.POLISH: LanguageInfo("pl", "Polish", "Polski"),
    Language.DUTCH: LanguageInfo("nl", "Dutch", "Nederlands"),
    Language.TURKISH: LanguageInfo("tr", "Turkish", "Türkçe"),
    Language.ARABIC: LanguageInfo("ar", "Arabic", "العربية", direction="rtl"),
    Language.PERSIAN: LanguageInfo("fa", "Persian", "فارسی", direction="rtl"),
    Language.HEBREW: LanguageInfo("he", "Hebrew", "עברית", direction="rtl"),
    Language.HINDI: LanguageInfo("hi", "Hindi", "हिन्दी"),
    Language.THAI: LanguageInfo("th", "Thai", "ไทย"),
    Language.INDONESIAN: LanguageInfo("id", "Indonesian", "Bahasa Indonesia"),
}
