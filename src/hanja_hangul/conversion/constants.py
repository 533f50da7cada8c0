"""Unicode range constants for Hanja/Hangul classification.

All ranges are inclusive code point bounds.
"""

from typing import Tuple

# Hangul syllables block (U+AC00 to U+D7A3)
HANGUL_START = 44032  # 가
HANGUL_END = 55203  # 힣

# CJK ideograph blocks treated as Hanja
LOGOGRAPHIC_RANGES: Tuple[Tuple[int, int], ...] = (
    (13312, 19903),  # CJK Unified Ideographs Extension A
    (19968, 40959),  # CJK Unified Ideographs
    (63744, 64045),  # CJK Compatibility Ideographs
    (64048, 64109),  # CJK Compatibility Ideographs (continued)
)

# Returned to clients when the input contains nothing convertible
FALLBACK_MESSAGE = "변환할 수 없습니다."
