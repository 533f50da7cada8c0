"""HTTP boundary for the conversion service."""

from hanja_hangul.web.app import create_app, create_redirect_app

__all__ = ["create_app", "create_redirect_app"]
