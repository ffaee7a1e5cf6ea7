"""
Post-Processing Modules

Repairs machine-translation artifacts in translated text.
"""

from .char_classes import (
    is_whitespace,
    is_punctuation,
    is_control,
    is_numeric,
    is_valuable_char,
    is_valuable_text,
)
from .text_repair import (
    repeating_sequence,
    collapse_whitespace,
    fix_mark_spacing,
    tighten_marks,
    repair_degenerate_repeat,
    clean_translation_output,
)

__all__ = [
    'is_whitespace',
    'is_punctuation',
    'is_control',
    'is_numeric',
    'is_valuable_char',
    'is_valuable_text',
    'repeating_sequence',
    'collapse_whitespace',
    'fix_mark_spacing',
    'tighten_marks',
    'repair_degenerate_repeat',
    'clean_translation_output',
]
