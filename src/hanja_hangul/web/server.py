"""
Listener setup for the conversion service.

Runs the HTTPS app with the configured certificate and, optionally, a plain
HTTP listener in a background thread that redirects to the HTTPS address.

werkzeug's ``make_server`` reports a failed bind by logging it and calling
``sys.exit(1)``, so callers must be prepared for ``SystemExit`` as well as
``OSError``.
"""

from __future__ import annotations

import threading
from typing import Optional, Tuple

from werkzeug.serving import BaseWSGIServer, make_server

from hanja_hangul.config import Settings
from hanja_hangul.conversion import Dictionary
from hanja_hangul.utils.logging import bind_context
from hanja_hangul.web.app import create_app, create_redirect_app


def start_redirect_listener(settings: Settings) -> BaseWSGIServer:
    """Start the HTTP -> HTTPS redirect listener on a daemon thread."""
    logger = bind_context(mode=settings.ENVIRONMENT, listener="http")
    server = make_server(
        settings.http_host,
        settings.http_port,
        create_redirect_app(settings.https_redirect),
        threaded=True,
    )
    thread = threading.Thread(
        target=server.serve_forever, name="http-redirect", daemon=True
    )
    thread.start()
    logger.info(
        "web.listener_started",
        address=settings.http_address,
        redirect_to=settings.https_redirect,
    )
    return server


def make_app_server(
    settings: Settings,
    dictionary: Dictionary,
    plain: bool = False,
) -> Tuple[BaseWSGIServer, str]:
    """
    Bind the conversion app without serving it yet.

    Returns:
        The bound server and the ``host:port`` it was asked to listen on.
    """
    app = create_app(dictionary=dictionary, settings=settings)

    if plain:
        server = make_server(settings.http_host, settings.http_port, app, threaded=True)
        return server, settings.http_address

    server = make_server(
        settings.https_host,
        settings.https_port,
        app,
        threaded=True,
        ssl_context=(settings.ssl_cert, settings.ssl_key),
    )
    return server, settings.https_address


def serve(
    settings: Settings,
    dictionary: Dictionary,
    redirect: bool = True,
    plain: bool = False,
) -> None:
    """
    Serve the conversion app until interrupted.

    Args:
        settings: Active settings (mode, listeners, TLS paths).
        dictionary: Loaded dictionary shared by all requests.
        redirect: Also run the HTTP -> HTTPS redirect listener.
        plain: Serve the app over plain HTTP on the HTTP listener, no TLS.

    Raises:
        OSError: If the TLS files cannot be loaded.
        SystemExit: If a listener cannot bind its address.
    """
    logger = bind_context(
        mode=settings.ENVIRONMENT, listener="http" if plain else "https"
    )
    server, address = make_app_server(settings, dictionary, plain=plain)

    redirect_server: Optional[BaseWSGIServer] = None
    try:
        if redirect and not plain:
            redirect_server = start_redirect_listener(settings)

        logger.info("web.listener_started", address=address)
        server.serve_forever()
    finally:
        server.server_close()
        if redirect_server is not None:
            redirect_server.shutdown()
            redirect_server.server_close()
        logger.info("web.listener_stopped", address=address)
