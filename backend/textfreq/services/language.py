"""
Language classification for tokens.
Hangul wins over ASCII: any Hangul syllable makes the token Hangul.
"""
from enum import Enum

from textfreq.services.utf8 import iter_chars


class LanguageClass(str, Enum):
    """Language class of a single token."""
    HANGUL = "hangul"
    ASCII = "ascii"
    OTHER = "other"


def detect_language(word: bytes) -> LanguageClass:
    """
    Detect the language class of a token.

    Args:
        word: UTF-8 encoded token (may be malformed)

    Returns:
        HANGUL if any Hangul syllable is present, ASCII if every byte is
        below 0x80, OTHER for everything else (including empty input)
    """
    if not word:
        return LanguageClass.OTHER

    if word.isascii():
        return LanguageClass.ASCII

    for char in iter_chars(word):
        if char.is_hangul:
            return LanguageClass.HANGUL

    return LanguageClass.OTHER


def is_hangul(word: bytes) -> bool:
    """Check if a token classifies as Hangul."""
    return detect_language(word) is LanguageClass.HANGUL
