"""Exceptions raised by the conversion package."""

from pathlib import Path
from typing import Optional


class DictionaryLoadError(Exception):
    """Raised when a dictionary source table cannot be read.

    Malformed lines inside a readable table never raise; they are skipped.
    Only a missing or unreadable table is fatal.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.path = path
        self.cause = cause
