"""Structured JSON logging for the conversion service.

Events are rendered as one JSON object per line on stderr, with Hangul left
unescaped. Keys naming TLS private keys or credentials are redacted at any
depth, so a whole settings dump can be attached to an event:

    >>> logger = get_logger(__name__)
    >>> logger.info("cli.serve_starting", settings=settings.model_dump())

The level comes from ``LOG_LEVEL`` (via Settings).
"""

import logging
import os
import re
from typing import Any, Mapping, Optional

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, WrappedLogger

from hanja_hangul.config import get_settings

REDACTED_VALUE = "[REDACTED]"

_SENSITIVE_KEY = re.compile(
    r"^ssl_key$|^private_key|password|secret|token", re.IGNORECASE
)


def _redact(value: Any) -> Any:
    if isinstance(value, Mapping):
        return sanitize_for_logging(value)
    return value


def sanitize_for_logging(data: Mapping[str, Any]) -> dict:
    """Copy ``data`` with sensitive values replaced, recursing into mappings.

    Example:
        >>> sanitize_for_logging({"ssl_key": "/etc/key.pem", "mode": "dev"})
        {'ssl_key': '[REDACTED]', 'mode': 'dev'}
    """
    return {
        key: REDACTED_VALUE if _SENSITIVE_KEY.search(str(key)) else _redact(value)
        for key, value in data.items()
    }


def _sanitize_event(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    return sanitize_for_logging(event_dict)


def _resolve_level(level: Optional[str]) -> int:
    if level is None:
        try:
            level = get_settings().LOG_LEVEL
        except ValidationError:
            # broken HH_* values are reported by whoever builds Settings next
            level = os.getenv("LOG_LEVEL", "INFO")
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> None:
    """Route structlog through stdlib logging with the JSON pipeline."""
    global _handler
    resolved = _resolve_level(level)

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_handler)
    root.setLevel(resolved)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            _sanitize_event,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Logger carrying ``kwargs`` on every event, e.g. mode and listener."""
    return structlog.get_logger().bind(**kwargs)
