"""Hanja -> Hangul conversion core.

Primary exports:
    load_dictionary / build_dictionary: build the shared lookup tables
    convert_text: core conversion, returns None when nothing converted
    convert: same, wrapped in a ConversionResult
"""

from hanja_hangul.conversion.classifier import (
    is_hangul_or_logographic,
    is_logographic,
)
from hanja_hangul.conversion.constants import FALLBACK_MESSAGE
from hanja_hangul.conversion.dictionary import (
    Dictionary,
    build_dictionary,
    load_dictionary,
    parse_char_table,
    parse_word_table,
    resolve_data_dir,
)
from hanja_hangul.conversion.engine import convert, convert_text
from hanja_hangul.conversion.exceptions import DictionaryLoadError
from hanja_hangul.conversion.result import ConversionResult

__all__ = [
    "ConversionResult",
    "Dictionary",
    "DictionaryLoadError",
    "FALLBACK_MESSAGE",
    "build_dictionary",
    "convert",
    "convert_text",
    "is_hangul_or_logographic",
    "is_logographic",
    "load_dictionary",
    "parse_char_table",
    "parse_word_table",
    "resolve_data_dir",
]
