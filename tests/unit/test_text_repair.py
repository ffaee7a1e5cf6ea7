"""
Unit tests for core/postprocess/text_repair.py

Tests the repair pipeline:
- Whitespace and mark spacing normalization
- Minimal repeating unit detection
- Degenerate repeat repair with case transfer
- Arabic branch
"""

import pytest
import arabic_reshaper

from core.language import Language
from core.postprocess.text_repair import (
    repeating_sequence,
    collapse_whitespace,
    fix_mark_spacing,
    tighten_marks,
    repair_degenerate_repeat,
    clean_translation_output,
)


class TestRepeatingSequence:
    """Test minimal repeating unit detection"""

    @pytest.mark.parametrize("text,unit", [
        ("ababab", "ab"),
        ("abcabcabca", "abc"),
        ("abcdef", "abcdef"),
        ("aaaa", "a"),
        ("a", "a"),
        ("", ""),
        ("はいはいはい", "はい"),
        ("مرمرمر", "مر"),
    ])
    def test_units(self, text, unit):
        """Test smallest matching prefix wins"""
        assert repeating_sequence(text) == unit

    def test_partial_tail_must_match(self):
        """Test a truncated tail that differs from the unit prefix"""
        assert repeating_sequence("abcabcabx") == "abcabcabx"


class TestSpacingPasses:
    """Test the individual spacing passes"""

    def test_collapse_whitespace(self):
        assert collapse_whitespace("  a \t b\n\nc  ") == "a b c"

    def test_mark_glued_to_next_word(self):
        """Test 'wordA.wordB' → 'wordA. wordB'"""
        assert fix_mark_spacing("wordA.wordB") == "wordA. wordB"

    def test_mark_after_mark_not_split(self):
        """Test marks preceded by another mark are left alone"""
        assert fix_mark_spacing("wait..what") == "wait..what"

    def test_spaces_between_marks_removed(self):
        assert fix_mark_spacing("Really ! ?") == "Really !?"

    def test_trailing_space_after_mark_removed(self):
        assert fix_mark_spacing("Done. ") == "Done."

    def test_space_before_mark_removed(self):
        assert tighten_marks("Hello , world !") == "Hello, world!"

    def test_leading_ellipsis_kept_on_word(self):
        assert tighten_marks("... hello") == "...hello"


class TestDegenerateRepeat:
    """Test repeated-token babble repair"""

    def test_case_transferred_from_query(self):
        """Test the repeating unit is re-cased after the query"""
        assert repair_degenerate_repeat("AbAbAbAbAbAbAbAbAb", "cdcdcdcdcdcdcdcdcd") == "CdCdCdCdCdCdCdCdCd"

    def test_rebuild_covers_whole_query(self):
        """Test the rebuild spans the query when lengths don't divide"""
        assert repair_degenerate_repeat("ABCDE", "xyxyxyxy") == "XYXYX"

    def test_rebuild_truncated_to_query(self):
        assert repair_degenerate_repeat("ab", "aaaaaa") == "aa"

    def test_unit_not_shorter_than_query(self):
        """Test output is kept when the unit is as long as the query"""
        assert repair_degenerate_repeat("ab", "cdcdcd") == "cdcdcd"

    def test_too_few_repeats(self):
        """Test output repeating only twice is kept"""
        assert repair_degenerate_repeat("A long query", "abcabc") == "abcabc"

    def test_uppercase_expanding_to_two_chars(self):
        """Test only the first character of a multi-char uppercase is used"""
        assert repair_degenerate_repeat("AAAA", "ßßßßßß") == "SSSS"

    def test_empty_text(self):
        assert repair_degenerate_repeat("query", "") == ""


class TestCleanTranslationOutput:
    """Test the full pipeline"""

    def test_punctuation_repair(self):
        """Test glued marks get a following space"""
        query = "Hello,world!How are you?"
        trans = "Hello,world!How are you?"
        assert clean_translation_output(query, trans, Language.ENGLISH) == "Hello, world! How are you?"

    def test_repeating_sequence_repair(self):
        """Test babble is replaced and re-cased"""
        query = "AbAbAbAbAbAbAbAbAb"
        trans = "cdcdcdcdcdcdcdcdcd"
        assert clean_translation_output(query, trans, Language.ENGLISH) == "CdCdCdCdCdCdCdCdCd"

    @pytest.mark.parametrize("text", [
        "Hello, world! How are you?",
        "Ceci est une phrase. Et une autre!",
        "こんにちは、世界。",
        "",
    ])
    def test_clean_text_is_fixed_point(self, text):
        """Test already-clean text is left unchanged"""
        assert clean_translation_output("Some source sentence here.", text, Language.FRENCH) == text

    def test_idempotent(self, sample_texts):
        """Test repairing twice equals repairing once"""
        once = clean_translation_output("Hello", sample_texts["extra_whitespace"], Language.ENGLISH)
        assert once == "Hello, world! How are you?"
        assert clean_translation_output("Hello", once, Language.ENGLISH) == once

    def test_spaced_marks(self, sample_texts):
        result = clean_translation_output("Hello", sample_texts["spaced_marks"], Language.ENGLISH)
        assert result == "Hello, world! How are you?"

    def test_spaced_ellipsis(self):
        assert clean_translation_output("Wait . . .", "Wait . . .", Language.ENGLISH) == "Wait..."


class TestArabicBranch:
    """Test Arabic targets skip mark tightening and get reshaped"""

    def test_space_before_mark_kept(self):
        """Test step-4 tightening does not apply to Arabic"""
        trans = "مرحبا بالعالم ."
        result = clean_translation_output("Hello world .", trans, Language.ARABIC)
        assert result == arabic_reshaper.reshape("مرحبا بالعالم .")
        assert result.endswith(" .")

    def test_same_text_tightened_for_other_targets(self):
        trans = "مرحبا بالعالم ."
        assert clean_translation_output("Hello world .", trans, Language.PERSIAN) == "مرحبا بالعالم."

    def test_leading_ellipsis_kept_apart(self):
        result = clean_translation_output("... hello", "... hello", Language.ARABIC)
        assert result == arabic_reshaper.reshape("... hello")

    def test_reshaped_into_presentation_forms(self):
        """Test Arabic letters are replaced by joined forms"""
        result = clean_translation_output("Hello", "مرحبا", Language.ARABIC)
        assert result != "مرحبا"
        assert any("\ufb50" <= ch <= "\ufeff" for ch in result)

    def test_custom_reshaper(self):
        """Test a configured reshaper is used instead of the default"""
        class RecordingReshaper:
            def __init__(self):
                self.seen = []

            def reshape(self, text):
                self.seen.append(text)
                return text

        reshaper = RecordingReshaper()
        result = clean_translation_output("Hello", "مرحبا ,عالم", Language.ARABIC, reshaper=reshaper)
        assert reshaper.seen == ["مرحبا ,عالم"]
        assert result == "مرحبا ,عالم"
