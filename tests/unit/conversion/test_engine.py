"""
Unit tests for the Hanja -> Hangul conversion engine.

Covers the word-level match, single-character fallback, the initial-sound
(dueum) adjustment and the suffix-only retry behaviour of the scan.
"""

import pytest

from hanja_hangul.conversion import (
    ConversionResult,
    build_dictionary,
    convert,
    convert_text,
)


@pytest.mark.unit
class TestUnchanged:
    """Inputs that must report "unchanged" (None)."""

    @pytest.mark.parametrize(
        "text",
        ["", "hello world", "이씨", "안녕하세요, 세계!", "123 !?", "가나다라"],
    )
    def test_no_hanja_returns_none(self, dictionary, text):
        assert convert_text(text, dictionary) is None

    def test_unmapped_hanja_returns_none(self, dictionary):
        """Hanja without any table entry leave the flag unset."""
        assert convert_text("山川", dictionary) is None

    def test_empty_dictionary_returns_none(self, empty_dictionary):
        assert convert_text("女子李", empty_dictionary) is None
        assert convert_text("李씨", empty_dictionary) is None

    def test_none_is_distinct_from_identical_output(self):
        """A mapping onto itself still counts as a conversion."""
        identity = build_dictionary("李,李\n", "", "")
        assert convert_text("李", identity) == "李"


@pytest.mark.unit
class TestWordMatch:
    def test_exact_word_match(self, dictionary):
        assert convert_text("女子", dictionary) == "여자"

    def test_word_inside_hangul_text(self, dictionary):
        assert convert_text("그 女子는 왔다", dictionary) == "그 여자는 왔다"

    def test_word_match_skips_dueum(self, dictionary):
        """The word reading is emitted as-is, even before Hangul."""
        assert convert_text("六月에", dictionary) == "유월에"


@pytest.mark.unit
class TestSingleCharacter:
    def test_no_next_character_skips_dueum(self, dictionary):
        assert convert_text("李", dictionary) == "리"

    def test_hangul_next_character_applies_dueum(self, dictionary):
        assert convert_text("李씨", dictionary) == "이씨"

    def test_hanja_next_character_applies_dueum(self, dictionary):
        """Unmapped Hanja still trigger the adjustment and pass through."""
        assert convert_text("李山", dictionary) == "이山"

    @pytest.mark.parametrize("text,expected", [("李 씨", "리 씨"), ("李a", "리a"), ("李.", "리.")])
    def test_non_korean_next_character_skips_dueum(self, dictionary, text, expected):
        assert convert_text(text, dictionary) == expected

    def test_unmapped_hanja_passes_through(self, dictionary):
        assert convert_text("山李", dictionary) == "山리"

    def test_dueum_applies_to_substituted_character(self):
        dictionary = build_dictionary("女,녀\n", "녀,여\n", "")
        assert convert_text("女女", dictionary) == "여녀"

    def test_hangul_source_never_adjusted(self, dictionary):
        """Only Hanja go through the dueum table, not existing Hangul."""
        assert convert_text("리씨 李", dictionary) == "리씨 리"


@pytest.mark.unit
class TestRunRetry:
    def test_full_run_miss_falls_back_to_characters(self, dictionary):
        """女子李 is not a word: 女 alone, then 子李 rescanned, then 李."""
        assert convert_text("女子李", dictionary) == "여자리"

    def test_suffix_of_run_is_matched(self, dictionary):
        """After consuming 大, the remaining run 六月 is a word."""
        assert convert_text("大六月", dictionary) == "대유월"

    def test_suffix_match_after_dueum_prefix(self, dictionary):
        assert convert_text("李女子", dictionary) == "이여자"

    def test_prefix_of_run_is_not_matched(self, dictionary):
        """六月 is a prefix of 六月大, so the irregular reading 유월 is missed."""
        assert convert_text("六月大", dictionary) == "육월대"

    def test_runs_separated_by_hangul_are_independent(self, dictionary):
        assert convert_text("女子와 六月", dictionary) == "여자와 유월"


@pytest.mark.unit
class TestIdempotence:
    @pytest.mark.parametrize("text", ["李씨", "女子", "大韓民國", "그 女子는 六月에"])
    def test_reconverting_output_is_unchanged(self, dictionary, text):
        converted = convert_text(text, dictionary)
        assert converted is not None
        assert convert_text(converted, dictionary) is None


@pytest.mark.unit
class TestConvertResult:
    def test_changed_result(self, dictionary):
        result = convert("李씨", dictionary)
        assert isinstance(result, ConversionResult)
        assert result.changed is True
        assert result.converted == "이씨"
        assert result.source == "李씨"

    def test_unchanged_result(self, dictionary):
        result = convert("안녕", dictionary)
        assert result.changed is False
        assert result.converted is None
