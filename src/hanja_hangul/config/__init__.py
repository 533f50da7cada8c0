"""Configuration management for Hanja-Hangul.

Usage:
    >>> from hanja_hangul.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.ENVIRONMENT, settings.https_address)
"""

from hanja_hangul.config.settings import MODE_DEFAULTS, Settings, get_settings

__all__ = [
    "MODE_DEFAULTS",
    "Settings",
    "get_settings",
]
