"""Command-line interface for Hanja-Hangul."""
