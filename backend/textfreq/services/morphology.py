"""
Korean particle (josa) stripping.

Particles are removed from the end of a word, one at a time, by scanning
JOSA_ENDINGS in authored order. After every strip the scan restarts from the
top against the shorter word, so stacked particles ("에서는", "들은") come
off over several passes. Every strip shortens the word, so the loop ends.
"""
from typing import Optional, Sequence

from textfreq.services.language import is_hangul
from textfreq.utils.korean_rules import JOSA_ENDINGS

# Two Hangul syllables
MIN_RESIDUAL_BYTES = 6


def _strip_once(word: bytes, endings: Sequence[bytes]) -> Optional[bytes]:
    for suffix in endings:
        if not word.endswith(suffix):
            continue
        residual = word[: len(word) - len(suffix)]
        if not residual:
            continue
        if len(residual) > len(suffix) or len(residual) >= MIN_RESIDUAL_BYTES:
            return residual
    return None


def strip_josa(word: bytes, endings: Sequence[bytes] = JOSA_ENDINGS) -> bytes:
    """
    Remove trailing particles from a Hangul word.

    A particle is removed only when the remaining stem is longer than the
    particle or at least two syllables long. Non-Hangul words are returned
    unchanged.

    Args:
        word: Normalized word bytes
        endings: Ordered particle candidates (first match wins)

    Returns:
        Word with particles removed
    """
    if not is_hangul(word):
        return word

    while True:
        stripped = _strip_once(word, endings)
        if stripped is None:
            return word
        word = stripped
