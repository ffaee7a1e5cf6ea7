"""
Translation Output Repair

Normalizes one machine-translated string against its source query:
- collapses whitespace
- fixes spacing around sentence marks (. , ; ! ?)
- replaces degenerate repeated-token output with the repeating unit,
  re-cased after the query
- reshapes Arabic into joined presentation forms

All functions here are pure and never raise on any str input.
"""

import math
from typing import Optional

import regex
import arabic_reshaper
from arabic_reshaper import ArabicReshaper

from config.constants import SENTENCE_MARKS
from core.language import Language

_MARK = "[" + regex.escape(SENTENCE_MARKS) + "]"

# "word.word" -> "word. word"
_ATTACH_PATTERN = regex.compile(r"([^" + regex.escape(SENTENCE_MARKS) + r"\s])(" + _MARK + r")(?=\w)")
# ". ." -> ".." and trailing ". " -> "."
_MARK_RUN_PATTERN = regex.compile(r"(" + _MARK + r")\s+(?=" + _MARK + r"|$)")
# "word ." -> "word."
_SPACE_BEFORE_MARK_PATTERN = regex.compile(r"([" + regex.escape(SENTENCE_MARKS) + r"\w])\s+(" + _MARK + r")")
# "... word" -> "...word"
_ELLIPSIS_PATTERN = regex.compile(r"((?:\s|^)\.+)\s+(?=\w)")


def repeating_sequence(text: str) -> str:
    """
    Find the minimal repeating unit of text.

    Returns the shortest prefix that, repeated and truncated to len(text),
    rebuilds text exactly; text itself if there is none.

    >>> repeating_sequence("abcabcabca")
    'abc'
    """
    length = len(text)
    for size in range(1, length // 2 + 1):
        unit = text[:size]
        repeats, remainder = divmod(length, size)
        if unit * repeats + unit[:remainder] == text:
            return unit
    return text


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def fix_mark_spacing(text: str) -> str:
    """Attach a space after marks glued to the next word, drop spaces between marks."""
    text = _ATTACH_PATTERN.sub(r"\1\2 ", text)
    return _MARK_RUN_PATTERN.sub(r"\1", text)


def tighten_marks(text: str) -> str:
    """Pull marks onto the preceding word and keep ellipses on the next one."""
    text = _SPACE_BEFORE_MARK_PATTERN.sub(r"\1\2", text)
    return _ELLIPSIS_PATTERN.sub(r"\1", text)


def repair_degenerate_repeat(query: str, text: str) -> str:
    """
    Replace repeated-token babble with its unit, cased after the query.

    Output counts as babble when its minimal repeating unit is shorter than
    the query and repeats more than twice over the text.
    """
    unit = repeating_sequence(text.lower())
    if not (len(unit) < len(query) and len(text) // 2 > len(unit)):
        return text

    rebuilt = unit * max(1, math.ceil(len(query) / len(unit)))
    return "".join(
        target.upper()[0] if source.isupper() else target
        for source, target in zip(query, rebuilt)
    )


def clean_translation_output(
    query: str,
    text: str,
    to_lang: Language,
    reshaper: Optional[ArabicReshaper] = None,
) -> str:
    """
    Run the repair pipeline over one translated string.

    Args:
        query: Source text the translation was produced from
        text: Raw translated text
        to_lang: Target language
        reshaper: Arabic reshaper to use; the library default if None

    Returns:
        Repaired text
    """
    text = collapse_whitespace(text)
    text = fix_mark_spacing(text)

    is_arabic = to_lang == Language.ARABIC
    if not is_arabic:
        text = tighten_marks(text)

    text = repair_degenerate_repeat(query, text)

    if is_arabic:
        text = reshaper.reshape(text) if reshaper is not None else arabic_reshaper.reshape(text)
    return text
