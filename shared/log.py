"""structlog setup shared by every server.

Logs go to stderr only: with the stdio transport, stdout carries the
protocol stream and any stray write would corrupt it.
"""

from __future__ import annotations

import logging
import re
import sys

import structlog

# Keys whose values should be redacted before logging tool arguments.
_SECRET_KEY_PATTERN = re.compile(
    r"(token|secret|password|credential|auth|api_key|^key$)",
    re.IGNORECASE,
)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(level: str = "info") -> None:
    """Configure structlog to emit JSON lines on stderr."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS.get(level.lower(), logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def sanitize_args(args: dict | None) -> dict | None:
    """Strip secret-looking values from tool arguments before logging."""
    if not args:
        return args
    sanitized = {}
    for k, v in args.items():
        if _SECRET_KEY_PATTERN.search(k):
            sanitized[k] = "[REDACTED]"
        else:
            sanitized[k] = v
    return sanitized
