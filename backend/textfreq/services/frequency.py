"""
Keyword frequency analysis.

Splits text on ASCII whitespace, runs every token through
normalize -> strip particles -> keyword cascade, counts the survivors and
ranks them by count. Ties keep first-occurrence order.
"""
import re
from collections import Counter
from typing import Iterator, List, Optional, Union

import structlog

from textfreq.config import get_settings
from textfreq.models.schemas import AnalysisReport, FrequencyRecord
from textfreq.services.morphology import strip_josa
from textfreq.services.normalizer import NormalizationMode, normalize_word
from textfreq.services.utf8 import count_invalid_bytes, to_utf8
from textfreq.services.word_validators import is_keyword

logger = structlog.get_logger()

# Same set as C isspace(): space, \t, \n, \v, \f, \r
_TOKEN_RE = re.compile(rb"[^ \t\n\v\f\r]+")


def tokenize(text: bytes) -> Iterator[bytes]:
    """
    Split text into raw tokens on ASCII whitespace.

    Multi-byte whitespace (e.g. U+3000) is not a separator.

    Args:
        text: UTF-8 encoded text

    Yields:
        Non-empty raw tokens, left to right
    """
    for match in _TOKEN_RE.finditer(text):
        yield match.group()


def extract_keyword(
    token: bytes,
    mode: NormalizationMode = NormalizationMode.HANGUL_ONLY,
) -> Optional[bytes]:
    """
    Run one raw token through the keyword pipeline.

    Returns:
        The keyword bytes, or None if the token was rejected
    """
    word = normalize_word(token, mode)
    if not word:
        return None

    word = strip_josa(word)
    return word if is_keyword(word, mode) else None


def rank(counts: Counter, top_n: Optional[int] = None) -> List[FrequencyRecord]:
    """
    Turn a counter into records sorted by count, highest first.

    Counter keeps insertion order and most_common() sorts stably, so equal
    counts stay in first-occurrence order.
    """
    return [
        FrequencyRecord(word=word.decode("utf-8"), count=count)
        for word, count in counts.most_common(top_n)
    ]


def _resolve_mode(mode: Union[NormalizationMode, str, None]) -> NormalizationMode:
    if mode is None:
        return get_settings().normalization_mode
    return NormalizationMode(mode)


def analyze_text(
    text: Union[str, bytes],
    mode: Union[NormalizationMode, str, None] = None,
    top_n: Optional[int] = None,
) -> AnalysisReport:
    """
    Analyze keyword frequencies and collect counters.

    Malformed UTF-8 never raises: undecodable bytes are dropped during
    normalization, so a token made only of them yields no keyword.

    Args:
        text: Text to analyze (str or UTF-8 bytes)
        mode: Normalization mode (configured default when None)
        top_n: Keep only the N most frequent keywords

    Returns:
        AnalysisReport with ranked records

    Raises:
        TypeError: If text is neither str nor bytes
        ValueError: If mode is unknown or top_n < 1
    """
    if top_n is not None and top_n < 1:
        raise ValueError(f"top_n must be >= 1, got {top_n}")

    data = to_utf8(text)
    mode = _resolve_mode(mode)

    counts: Counter = Counter()
    token_count = 0
    malformed_tokens = 0
    malformed_bytes = 0

    for token in tokenize(data):
        token_count += 1
        invalid = count_invalid_bytes(token)
        if invalid:
            malformed_tokens += 1
            malformed_bytes += invalid

        keyword = extract_keyword(token, mode)
        if keyword is not None:
            counts[keyword] += 1

    if malformed_bytes:
        logger.warning(
            "Malformed UTF-8 in input",
            malformed_tokens=malformed_tokens,
            malformed_bytes=malformed_bytes,
        )

    report = AnalysisReport(
        mode=mode,
        records=rank(counts, top_n),
        token_count=token_count,
        keyword_token_count=sum(counts.values()),
        unique_keywords=len(counts),
        malformed_token_count=malformed_tokens,
    )

    logger.info(
        "Text analyzed",
        mode=mode.value,
        tokens=token_count,
        keyword_tokens=report.keyword_token_count,
        unique_keywords=report.unique_keywords,
    )

    return report


def analyze(
    text: Union[str, bytes],
    mode: Union[NormalizationMode, str, None] = None,
    top_n: Optional[int] = None,
) -> List[FrequencyRecord]:
    """
    Count keywords in text.

    Args:
        text: Text to analyze (str or UTF-8 bytes)
        mode: "hangul_only" or "permissive" (configured default when None)
        top_n: Keep only the N most frequent keywords

    Returns:
        List of FrequencyRecord sorted by count descending
    """
    return analyze_text(text, mode=mode, top_n=top_n).records
