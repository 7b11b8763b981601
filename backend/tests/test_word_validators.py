"""
Tests for the keyword rule cascade.
"""
import pytest
from textfreq.services.normalizer import NormalizationMode
from textfreq.services.word_validators import (
    has_banned_ending,
    has_stem_residue,
    is_adnominal,
    is_function_noun,
    is_keyword,
    is_predicate,
    is_pronoun_form,
    is_strong_noun,
)

PERMISSIVE = NormalizationMode.PERMISSIVE
HANGUL_ONLY = NormalizationMode.HANGUL_ONLY


def _b(text: str) -> bytes:
    return text.encode("utf-8")


class TestRules:
    """Tests for individual rules."""

    def test_pronoun_forms(self):
        """Pronouns with particles should be detected."""
        assert is_pronoun_form(_b("나는")) is True
        assert is_pronoun_form(_b("그것은")) is True
        assert is_pronoun_form(_b("학교")) is False

    def test_banned_endings(self):
        """Predicate and relational endings should be detected."""
        assert has_banned_ending(_b("간다")) is True
        assert has_banned_ending(_b("진행한다")) is True
        assert has_banned_ending(_b("환경에관한")) is True
        assert has_banned_ending(_b("학교")) is False

    def test_function_nouns(self):
        """Semantically weak nouns should be detected."""
        assert is_function_noun(_b("경우")) is True
        assert is_function_noun(_b("정도")) is True
        assert is_function_noun(_b("학교")) is False

    def test_strong_nouns(self):
        """Noun-like suffixes should be detected."""
        assert is_strong_noun(_b("정책")) is True
        assert is_strong_noun(_b("경쟁력")) is True
        assert is_strong_noun(_b("학교")) is False

    def test_predicate_final(self):
        """'다' endings should only count past two syllables."""
        assert is_predicate(_b("아름답다")) is True
        assert is_predicate(_b("바다")) is False

    def test_two_syllable_predicates(self):
        """Short adjectives ending in '다' are predicates too."""
        for word in ["좋다", "많다", "크다", "높다", "작다", "싫다", "쉽다"]:
            assert is_predicate(_b(word)) is True

    def test_da_nouns_kept(self):
        """Nouns ending in '다' are listed explicitly."""
        assert is_predicate(_b("소다")) is False
        assert is_predicate(_b("판다")) is False

    def test_adnominal(self):
        """Modifier forms ending in '한' should be detected."""
        assert is_adnominal(_b("다양한")) is True
        assert is_adnominal(_b("중요한")) is True
        assert is_adnominal(_b("필요한")) is True
        assert has_banned_ending(_b("중요한")) is True

    def test_han_nouns_kept(self):
        """Nouns ending in '한' should not count as modifiers."""
        assert is_adnominal(_b("권한")) is False
        assert is_adnominal(_b("제한")) is False
        assert is_adnominal(_b("한")) is False

    def test_stem_residue(self):
        """A stem left after stripping should be detected on longer words."""
        assert has_stem_residue(_b("공부하")) is True
        assert has_stem_residue(_b("확인되")) is True
        assert has_stem_residue(_b("지하")) is False


class TestIsKeywordHangul:
    """Tests for is_keyword in hangul_only mode."""

    def test_nouns_accepted(self):
        """Plain nouns should be keywords."""
        assert is_keyword(_b("학교")) is True
        assert is_keyword(_b("정책")) is True
        assert is_keyword(_b("튜토리얼")) is True
        assert is_keyword(_b("바다")) is True

    def test_empty_rejected(self):
        assert is_keyword(b"") is False

    def test_non_hangul_rejected(self):
        """ASCII words are not targets in hangul_only mode."""
        assert is_keyword(b"python", HANGUL_ONLY) is False

    def test_pronoun_rejected(self):
        assert is_keyword(_b("나는")) is False
        assert is_keyword(_b("그녀가")) is False

    def test_stopword_rejected(self):
        assert is_keyword(_b("그리고")) is False
        assert is_keyword(_b("하지만")) is False

    def test_single_syllable_rejected(self):
        """One Hangul syllable is too short."""
        assert is_keyword(_b("책")) is False
        assert is_keyword(_b("년")) is False

    def test_predicates_rejected(self):
        """Verb and adjective forms should be rejected."""
        assert is_keyword(_b("간다")) is False
        assert is_keyword(_b("진행했다")) is False
        assert is_keyword(_b("아름답다")) is False

    def test_function_noun_rejected(self):
        assert is_keyword(_b("경우")) is False
        assert is_keyword(_b("부분")) is False

    def test_stem_residue_rejected(self):
        assert is_keyword(_b("공부하")) is False

    def test_short_adjectives_rejected(self):
        for word in ["좋다", "많다", "크다", "높다", "작다"]:
            assert is_keyword(_b(word)) is False

    def test_adnominal_rejected(self):
        assert is_keyword(_b("다양한")) is False
        assert is_keyword(_b("중요한")) is False
        assert is_keyword(_b("권한")) is True


class TestIsKeywordPermissive:
    """Tests for is_keyword in permissive mode."""

    def test_ascii_length(self):
        """ASCII words of two bytes or less should be rejected."""
        assert is_keyword(b"a", PERMISSIVE) is False
        assert is_keyword(b"bb", PERMISSIVE) is False
        assert is_keyword(b"ccc", PERMISSIVE) is True

    def test_all_digits_rejected(self):
        assert is_keyword(b"123", PERMISSIVE) is False
        assert is_keyword(b"2025", PERMISSIVE) is False
        assert is_keyword(b"web3", PERMISSIVE) is True

    def test_english_stopwords(self):
        assert is_keyword(b"the", PERMISSIVE) is False
        assert is_keyword(b"with", PERMISSIVE) is False
        assert is_keyword(b"from", PERMISSIVE) is False
        assert is_keyword(b"python", PERMISSIVE) is True

    def test_hangul_still_filtered(self):
        """Korean rules should still apply in permissive mode."""
        assert is_keyword(_b("학교"), PERMISSIVE) is True
        assert is_keyword(_b("간다"), PERMISSIVE) is False

    def test_other_rejected(self):
        """OTHER language words are never keywords."""
        assert is_keyword(_b("café"), PERMISSIVE) is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
