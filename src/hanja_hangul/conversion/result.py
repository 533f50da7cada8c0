"""Conversion result signal consumed by the web and CLI layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a single conversion call.

    Attributes:
        source: Original input text
        converted: Converted text, or None when nothing was converted
    """

    source: str
    converted: Optional[str]

    @property
    def changed(self) -> bool:
        return self.converted is not None

    def text_or(self, fallback: str) -> str:
        """Return the converted text, or ``fallback`` when nothing changed.

        Examples:
            >>> ConversionResult("abc", None).text_or("변환할 수 없습니다.")
            '변환할 수 없습니다.'
            >>> ConversionResult("李", "리").text_or("변환할 수 없습니다.")
            '리'
        """
        if self.converted is None:
            return fallback
        return self.converted

    def __repr__(self) -> str:
        return f"ConversionResult(changed={self.changed}, length={len(self.source)})"
