"""
Keyword validation.

A word that survived normalization and particle stripping is checked
against an ordered rule cascade. The first rule that fires rejects the word;
a word that passes every rule is a keyword. The order matters: later, broader
rules catch what earlier specific ones miss, and the stem-residue rule relies
on the banned-ending rule having already run.
"""
from typing import Optional

from textfreq.services.language import LanguageClass, detect_language
from textfreq.services.normalizer import NormalizationMode
from textfreq.utils.korean_rules import (
    ADNOMINAL_FINAL,
    BANNED_ENDINGS,
    DA_NOUNS,
    FUNCTION_NOUNS,
    HAN_NOUNS,
    PREDICATE_FINAL,
    PRONOUN_FORMS,
    STEM_RESIDUES,
    STRONG_NOUN_SUFFIX,
    ends_with_any,
    is_stopword,
)

# Length floors in bytes: one Hangul syllable, two ASCII characters
MIN_HANGUL_BYTES = 3
MIN_ASCII_BYTES = 2

# Stem residue must follow at least one more syllable
STEM_MARGIN_BYTES = 3

TARGET_LANGUAGES = {
    NormalizationMode.HANGUL_ONLY: frozenset({LanguageClass.HANGUL}),
    NormalizationMode.PERMISSIVE: frozenset({LanguageClass.HANGUL, LanguageClass.ASCII}),
}


def is_pronoun_form(word: bytes) -> bool:
    """Pronoun or demonstrative with a particle attached (나는, 그것은, ...)."""
    return word in PRONOUN_FORMS


def is_too_short(word: bytes, language: LanguageClass) -> bool:
    floor = MIN_ASCII_BYTES if language is LanguageClass.ASCII else MIN_HANGUL_BYTES
    return len(word) <= floor


def is_adnominal(word: bytes) -> bool:
    """Adjective modifier form ending in '한' (다양한, 중요한), except nouns like 권한."""
    return (
        word.endswith(ADNOMINAL_FINAL)
        and len(word) > MIN_HANGUL_BYTES
        and word not in HAN_NOUNS
    )


def has_banned_ending(word: bytes) -> bool:
    """Verb/adjective inflection, adverbial connector or relational ending."""
    return ends_with_any(word, BANNED_ENDINGS) or is_adnominal(word)


def is_function_noun(word: bytes) -> bool:
    return word in FUNCTION_NOUNS


def is_strong_noun(word: bytes) -> bool:
    """Ends with a suffix that is almost always a noun (정책, 경쟁력, ...)."""
    return ends_with_any(word, STRONG_NOUN_SUFFIX)


def is_predicate(word: bytes) -> bool:
    """Multi-syllable word ending in '다', except nouns like 바다."""
    return (
        word.endswith(PREDICATE_FINAL)
        and len(word) > MIN_HANGUL_BYTES
        and word not in DA_NOUNS
    )


def has_stem_residue(word: bytes) -> bool:
    """
    Leftover verb/adjective stem after particle stripping.

    "공부하는" loses "는" to the particle stripper and leaves "공부하";
    the trailing "하" marks it as a predicate, not a noun.
    """
    for stem in STEM_RESIDUES:
        if word.endswith(stem) and len(word) > len(stem) + STEM_MARGIN_BYTES:
            return True
    return False


def _is_ascii_keyword(word: bytes) -> bool:
    if is_stopword(word):
        return False
    if is_too_short(word, LanguageClass.ASCII):
        return False
    # All-digit tokens are numbers, not keywords
    if word.isdigit():
        return False
    return True


def _is_hangul_keyword(word: bytes) -> bool:
    if is_pronoun_form(word):
        return False
    if is_stopword(word):
        return False
    if is_too_short(word, LanguageClass.HANGUL):
        return False
    if has_banned_ending(word):
        return False
    if is_function_noun(word):
        return False
    if is_strong_noun(word):
        return True
    if is_predicate(word):
        return False
    if has_stem_residue(word):
        return False
    return True


def is_keyword(
    word: bytes,
    mode: NormalizationMode = NormalizationMode.HANGUL_ONLY,
    language: Optional[LanguageClass] = None,
) -> bool:
    """
    Decide whether a normalized, particle-stripped word is a keyword.

    Args:
        word: Word bytes after normalize_word and strip_josa
        mode: Normalization mode the word was produced under
        language: Precomputed language class (detected when omitted)

    Returns:
        True if the word should be counted
    """
    if not word:
        return False

    if language is None:
        language = detect_language(word)
    if language not in TARGET_LANGUAGES[mode]:
        return False

    if language is LanguageClass.ASCII:
        return _is_ascii_keyword(word)
    return _is_hangul_keyword(word)
