"""
Hanja-Hangul - Hanja to Hangul text conversion service.

Converts Hanja (CJK ideographs) embedded in mixed-script text into their
Hangul readings using three flat lookup tables: irregular words, single
characters, and the initial-sound (dueum) adjustment table.
"""

__version__ = "0.1.0"
