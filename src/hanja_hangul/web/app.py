"""
Flask boundary for the conversion service.

Routes:
    GET  /           index.html from the static directory
    GET  /css/<path> stylesheet assets
    GET  /js/<path>  script assets
    POST /convert    {"text": "..."} -> {"converted_text": "..."}

The dictionary is loaded once when the app is created and shared read-only by
every request. A request whose text contains nothing convertible receives the
configured fallback message, not an error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from flask import Flask, current_app, jsonify, redirect, request, send_from_directory

from hanja_hangul.config import Settings, get_settings
from hanja_hangul.conversion import Dictionary, convert, load_dictionary
from hanja_hangul.utils.logging import get_logger

logger = get_logger(__name__)

DICTIONARY_EXTENSION = "hanja_dictionary"


def _dictionary() -> Dictionary:
    return current_app.extensions[DICTIONARY_EXTENSION]


def create_app(
    dictionary: Optional[Dictionary] = None,
    settings: Optional[Settings] = None,
) -> Flask:
    """
    Build the conversion web app.

    Args:
        dictionary: Pre-built dictionary. Loaded from the configured data
            directory when omitted.
        settings: Settings instance. Defaults to get_settings().

    Returns:
        Configured Flask application.

    Raises:
        DictionaryLoadError: If the dictionary tables cannot be read.
    """
    settings = settings or get_settings()
    if dictionary is None:
        dictionary = load_dictionary(settings=settings)

    static_dir = Path(settings.static_dir)
    fallback_message = settings.fallback_message

    app = Flask(__name__, static_folder=None)
    app.json.ensure_ascii = False
    app.extensions[DICTIONARY_EXTENSION] = dictionary

    @app.get("/")
    def index():
        index_path = static_dir / "index.html"
        try:
            html = index_path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(
                "web.index_read_failed", file_path=str(index_path), error=str(e)
            )
            return "Error reading file"
        return html

    @app.get("/css/<path:filename>")
    def css(filename: str):
        return send_from_directory(static_dir / "css", filename)

    @app.get("/js/<path:filename>")
    def js(filename: str):
        return send_from_directory(static_dir / "js", filename)

    @app.post("/convert")
    def convert_handler():
        payload = request.get_json(silent=True)
        text = payload.get("text") if isinstance(payload, dict) else None
        if not isinstance(text, str):
            logger.warning("web.convert_bad_request")
            return jsonify({"error": "Request body must be JSON with a 'text' string"}), 400

        result = convert(text, _dictionary())
        logger.debug(
            "web.convert_completed",
            changed=result.changed,
            input_length=len(text),
        )
        return jsonify({"converted_text": result.text_or(fallback_message)})

    logger.info(
        "web.app_created",
        mode=settings.ENVIRONMENT,
        static_dir=str(static_dir),
    )
    return app


def create_redirect_app(target: str) -> Flask:
    """Build a plain-HTTP app that sends every request to ``target`` (307)."""
    app = Flask(f"{__name__}.redirect", static_folder=None)

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def redirect_to_https(path: str):
        return redirect(target, code=307)

    return app
