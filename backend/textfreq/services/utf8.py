"""
UTF-8 decoding primitives.

Wraps Python's UTF-8 codec so callers can walk a byte buffer character by
character while keeping the raw bytes of every character. Bytes that the
codec rejects (bad lead bytes, stray continuation bytes, truncated sequences,
encoded surrogates) are reported one byte at a time with no codepoint.
"""
from typing import Iterator, NamedTuple, Optional, Union

# surrogateescape maps each undecodable byte 0xXY to U+DCXY
_ESCAPE_LOW = 0xDC80
_ESCAPE_HIGH = 0xDCFF

HANGUL_SYLLABLE_FIRST = 0xAC00
HANGUL_SYLLABLE_LAST = 0xD7A3


class Utf8Char(NamedTuple):
    """One decoded character, or one unrecoverable byte when codepoint is None."""
    codepoint: Optional[int]
    raw: bytes

    @property
    def is_valid(self) -> bool:
        return self.codepoint is not None

    @property
    def is_ascii(self) -> bool:
        return self.codepoint is not None and self.codepoint < 0x80

    @property
    def is_hangul(self) -> bool:
        return self.codepoint is not None and is_hangul_codepoint(self.codepoint)


def is_hangul_codepoint(codepoint: int) -> bool:
    """Check if a codepoint is a precomposed Hangul syllable (가..힣)."""
    return HANGUL_SYLLABLE_FIRST <= codepoint <= HANGUL_SYLLABLE_LAST


def iter_chars(data: bytes) -> Iterator[Utf8Char]:
    """
    Walk a UTF-8 buffer one character at a time.

    The raw bytes of the yielded records concatenate back to ``data``.
    Invalid input never raises: every byte the codec cannot decode is
    yielded on its own with ``codepoint=None`` and the walk resumes at the
    next byte.

    Args:
        data: UTF-8 (possibly malformed) byte sequence

    Yields:
        Utf8Char records in buffer order
    """
    decoded = data.decode("utf-8", errors="surrogateescape")
    for char in decoded:
        codepoint = ord(char)
        if _ESCAPE_LOW <= codepoint <= _ESCAPE_HIGH:
            yield Utf8Char(None, bytes((codepoint - 0xDC00,)))
        else:
            yield Utf8Char(codepoint, char.encode("utf-8"))


def count_invalid_bytes(data: bytes) -> int:
    """Count bytes that fall back to the one-byte recovery policy."""
    if data.isascii():
        return 0
    return sum(1 for char in iter_chars(data) if not char.is_valid)


def to_utf8(text: Union[str, bytes]) -> bytes:
    """
    Coerce analyzer input to bytes.

    Lone surrogates in ``str`` input are kept as their (invalid) three-byte
    encodings so they go through the same recovery path as malformed bytes.

    Raises:
        TypeError: If text is neither str nor bytes
    """
    if isinstance(text, str):
        return text.encode("utf-8", errors="surrogatepass")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"text must be str or bytes, not {type(text).__name__}")
