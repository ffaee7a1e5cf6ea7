"""
Character classification for translation output.

Classes are defined over Unicode general categories so they hold for
Arabic, CJK and other non-Latin scripts.
"""

import unicodedata

from config.constants import (
    ASCII_PUNCTUATION_RANGES,
    PUNCTUATION_CATEGORIES,
    CONTROL_CATEGORIES,
    NUMERIC_CATEGORIES,
    SPACE_SEPARATOR_CATEGORY,
)

_LINE_CONTROLS = "\t\n\r"


def is_whitespace(ch: str) -> bool:
    """Space, tab, newline, carriage return, NUL or a space separator."""
    if ch in " \t\n\r\x00":
        return True
    return unicodedata.category(ch) == SPACE_SEPARATOR_CATEGORY


def is_punctuation(ch: str) -> bool:
    """ASCII symbols/punctuation or any Unicode punctuation category."""
    cp = ord(ch)
    if any(low <= cp <= high for low, high in ASCII_PUNCTUATION_RANGES):
        return True
    return unicodedata.category(ch) in PUNCTUATION_CATEGORIES


def is_control(ch: str) -> bool:
    """Control or format characters; tab, newline and CR count as whitespace."""
    if ch in _LINE_CONTROLS:
        return False
    return unicodedata.category(ch) in CONTROL_CATEGORIES


def is_numeric(ch: str) -> bool:
    return unicodedata.category(ch) in NUMERIC_CATEGORIES


def is_valuable_char(ch: str) -> bool:
    return not (
        is_punctuation(ch)
        or is_control(ch)
        or is_whitespace(ch)
        or is_numeric(ch)
    )


def is_valuable_text(text: str) -> bool:
    """
    Whether text carries any content worth keeping.

    True if at least one character is not whitespace, punctuation,
    control or numeric. Empty text is not valuable.
    """
    return any(is_valuable_char(ch) for ch in text)
