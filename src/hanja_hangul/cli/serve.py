"""
CLI for running the conversion web service.

Usage:
    # Dev mode: HTTPS on 127.0.0.1:443 plus redirect listener on 127.0.0.1:8000
    python -m hanja_hangul.cli serve

    # Prod mode with letsencrypt certificates
    python -m hanja_hangul.cli serve --mode prod

    # Plain HTTP only, no certificates needed
    python -m hanja_hangul.cli serve --plain
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from hanja_hangul.config import Settings
from hanja_hangul.conversion import DictionaryLoadError, load_dictionary
from hanja_hangul.utils.logging import get_logger

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanja_hangul.cli serve",
        description="Run the Hanja-Hangul conversion web service",
    )
    parser.add_argument(
        "--mode",
        choices=["dev", "prod"],
        default=None,
        help="Deployment mode (overrides ENVIRONMENT)",
    )
    parser.add_argument(
        "--no-redirect",
        action="store_true",
        help="Do not start the HTTP -> HTTPS redirect listener",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Serve over plain HTTP on the HTTP listener (no TLS)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = Settings(ENVIRONMENT=args.mode) if args.mode else Settings()
    logger.info(
        "cli.serve_starting",
        mode=settings.ENVIRONMENT,
        plain=args.plain,
        settings=settings.model_dump(),
    )

    try:
        dictionary = load_dictionary(settings=settings)
    except DictionaryLoadError as e:
        logger.error("cli.dictionary_load_failed", error=str(e))
        return 1

    from hanja_hangul.web.server import serve

    try:
        serve(
            settings,
            dictionary,
            redirect=not args.no_redirect,
            plain=args.plain,
        )
    except KeyboardInterrupt:
        logger.info("cli.serve_interrupted")
    except (OSError, SystemExit) as e:
        # werkzeug exits with status 1 when a listener address is taken
        logger.error(
            "cli.serve_failed",
            mode=settings.ENVIRONMENT,
            error=str(e),
            ssl_cert=settings.ssl_cert,
        )
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
