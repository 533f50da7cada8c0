"""Code point predicates for Hanja and Hangul detection."""

from __future__ import annotations

from hanja_hangul.conversion.constants import (
    HANGUL_END,
    HANGUL_START,
    LOGOGRAPHIC_RANGES,
)


def is_logographic(char: str) -> bool:
    """Return True if ``char`` falls in one of the CJK ideograph ranges.

    Examples:
        >>> is_logographic("李")
        True
        >>> is_logographic("이")
        False
    """
    code = ord(char)
    for start, end in LOGOGRAPHIC_RANGES:
        if start <= code <= end:
            return True
    return False


def is_hangul_or_logographic(char: str) -> bool:
    """Return True for Hangul syllables and for anything ``is_logographic`` accepts."""
    return HANGUL_START <= ord(char) <= HANGUL_END or is_logographic(char)
