"""
Token normalization.

Trims surrounding punctuation, then keeps only the characters the selected
normalization mode allows:

- permissive: ASCII letters/digits (lowercased) plus Hangul syllables,
  whatever the token's language
- hangul_only: non-Hangul tokens are dropped; Hangul tokens keep only their
  Hangul syllables
"""
from enum import Enum

from textfreq.services.language import LanguageClass, detect_language
from textfreq.services.utf8 import iter_chars

PUNCTUATION = b".,!?;:\"'()[]{}<>"


class NormalizationMode(str, Enum):
    """Character policy applied to every token."""
    PERMISSIVE = "permissive"
    HANGUL_ONLY = "hangul_only"


def trim_punctuation(token: bytes) -> bytes:
    """
    Strip leading and trailing punctuation from a token.

    Punctuation inside the token is left alone.

    Args:
        token: Raw token bytes

    Returns:
        Trimmed token, possibly empty
    """
    return token.strip(PUNCTUATION)


def _keep_permissive(token: bytes) -> bytes:
    if token.isascii():
        return bytes(c for c in token.lower() if chr(c).isalnum())

    result = bytearray()
    for char in iter_chars(token):
        if char.is_ascii:
            if char.raw.isalnum():
                result += char.raw.lower()
        elif char.is_hangul:
            result += char.raw
    return bytes(result)


def _keep_hangul(token: bytes) -> bytes:
    return b"".join(char.raw for char in iter_chars(token) if char.is_hangul)


def normalize_word(
    token: bytes,
    mode: NormalizationMode = NormalizationMode.HANGUL_ONLY,
) -> bytes:
    """
    Normalize a raw token.

    Args:
        token: Raw token bytes (may contain malformed UTF-8)
        mode: Character policy to apply

    Returns:
        Normalized word, empty if nothing eligible remains
    """
    trimmed = trim_punctuation(token)
    if not trimmed:
        return b""

    if mode is NormalizationMode.PERMISSIVE:
        return _keep_permissive(trimmed)

    if detect_language(trimmed) is not LanguageClass.HANGUL:
        return b""

    return _keep_hangul(trimmed)
