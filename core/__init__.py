"""
Core - language tags, output repair and the style-transfer decorator.
"""

from .language import Language, LanguageInfo, LANGUAGES
from .style_transfer import StyleTransfer

__all__ = [
    'Language',
    'LanguageInfo',
    'LANGUAGES',
    'StyleTransfer',
]
