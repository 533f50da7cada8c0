"""
Hanja -> Hangul conversion engine.

Single-pass scan over the input. At each cursor position:

1. Look ahead for the maximal run of Hanja starting at the cursor
2. If the whole run is an irregular word, emit its reading and skip the run
3. Otherwise consume one character; Hanja go through the character table and,
   when the next character is Hangul or Hanja, through the initial-sound
   (dueum) table

A failed word lookup never retries shorter prefixes of the run. The next
iteration starts one character later, so only suffixes of a run are ever
offered to the word table.

Usage:
    from hanja_hangul.conversion import convert_text, load_dictionary

    dictionary = load_dictionary()
    convert_text("李씨", dictionary)
    # Returns: "이씨"
"""

from __future__ import annotations

from typing import List, Optional

from hanja_hangul.conversion.classifier import (
    is_hangul_or_logographic,
    is_logographic,
)
from hanja_hangul.conversion.dictionary import Dictionary
from hanja_hangul.conversion.result import ConversionResult


def _run_end(text: str, start: int) -> int:
    """Return the end index of the Hanja run beginning at ``start``."""
    end = start
    length = len(text)
    while end < length and is_logographic(text[end]):
        end += 1
    return end


def convert_text(text: str, dictionary: Dictionary) -> Optional[str]:
    """
    Convert Hanja in ``text`` to Hangul.

    Args:
        text: Arbitrary input text.
        dictionary: Loaded lookup tables.

    Returns:
        The converted text, or None when no substitution happened anywhere.
        None is distinct from an unchanged-looking string.
    """
    char_map = dictionary.char_map
    initial_sound_map = dictionary.initial_sound_map
    word_map = dictionary.word_map

    buf: List[str] = []
    converted = False
    length = len(text)
    i = 0

    while i < length:
        end = _run_end(text, i)
        if end > i:
            reading = word_map.get(text[i:end])
            if reading is not None:
                buf.append(reading)
                converted = True
                i = end
                continue

        char = text[i]
        i += 1

        if is_logographic(char):
            substitute = char_map.get(char)
            if substitute is not None:
                char = substitute
                converted = True

            # dueum: only when something Korean or Hanja follows
            if i < length and is_hangul_or_logographic(text[i]):
                char = initial_sound_map.get(char, char)

        buf.append(char)

    if not converted:
        return None
    return "".join(buf)


def convert(text: str, dictionary: Dictionary) -> ConversionResult:
    """Run ``convert_text`` and wrap the outcome in a ConversionResult."""
    return ConversionResult(source=text, converted=convert_text(text, dictionary))
