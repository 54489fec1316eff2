"""Process-wide logging setup for the CLI and HTTP server."""

from __future__ import annotations

import logging

import structlog
from rich.logging import RichHandler

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "anthropic", "instructor")


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Render stdlib records as one JSON object per line."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )


def configure_logging(level: str = "info", fmt: str = "text") -> None:
    """Install a single root handler; safe to call more than once."""
    if fmt == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(json_formatter())
    else:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(_LEVELS.get(level, logging.INFO))
    # SDK request logs are noisy at info
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
