"""
Tests for language classification.
"""
import pytest
from textfreq.services.language import LanguageClass, detect_language, is_hangul


def _b(text: str) -> bytes:
    return text.encode("utf-8")


class TestDetectLanguage:
    """Tests for detect_language function."""

    def test_korean_word(self):
        """Hangul syllables should be detected as HANGUL."""
        assert detect_language(_b("학교")) is LanguageClass.HANGUL
        assert detect_language(_b("안녕하세요")) is LanguageClass.HANGUL

    def test_ascii_word(self):
        """ASCII-only words should be detected as ASCII."""
        assert detect_language(b"hello") is LanguageClass.ASCII
        assert detect_language(b"123") is LanguageClass.ASCII
        assert detect_language(b"node.js") is LanguageClass.ASCII

    def test_mixed_word_is_hangul(self):
        """Any Hangul syllable should win over ASCII."""
        assert detect_language(_b("python튜토리얼")) is LanguageClass.HANGUL
        assert detect_language(_b("AI기술")) is LanguageClass.HANGUL

    def test_other_scripts(self):
        """Non-ASCII, non-Hangul words should be OTHER."""
        assert detect_language(_b("漢字")) is LanguageClass.OTHER
        assert detect_language(_b("café")) is LanguageClass.OTHER
        assert detect_language(_b("ㄱㄴㄷ")) is LanguageClass.OTHER

    def test_empty_word(self):
        """Empty input should be OTHER."""
        assert detect_language(b"") is LanguageClass.OTHER

    def test_malformed_bytes(self):
        """Malformed UTF-8 should be OTHER, not an error."""
        assert detect_language(b"\xff\xfe") is LanguageClass.OTHER
        # Truncated 가
        assert detect_language(b"\xea\xb0") is LanguageClass.OTHER

    def test_hangul_after_garbage(self):
        """Hangul after a bad byte should still be found."""
        assert detect_language(b"\xff" + _b("가")) is LanguageClass.HANGUL


class TestIsHangul:
    """Tests for is_hangul function."""

    def test_is_hangul(self):
        assert is_hangul(_b("학교")) is True
        assert is_hangul(b"school") is False
        assert is_hangul(b"") is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
