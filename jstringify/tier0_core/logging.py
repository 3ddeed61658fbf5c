"""
jstringify.tier0_core.logging
──────────────────────────────
Structured logs for the serializer. Configured lazily on first use so that
importing jstringify never touches the host application's logging setup
until a logger is actually requested.

Minimal stack: structlog (stdout JSON or console)
Configure via: JSTRINGIFY_LOG_LEVEL, JSTRINGIFY_LOG_FORMAT=json|console
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog


# ── Configuration ─────────────────────────────────────────────────────────────

def _configure_structlog() -> None:
    # Read the environment directly: config loading may itself need to log.
    log_level = os.getenv("JSTRINGIFY_LOG_LEVEL", "WARNING").upper()
    log_format = os.getenv("JSTRINGIFY_LOG_FORMAT", "console").lower()
    level = getattr(logging, log_level, logging.WARNING)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("jstringify")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


# ── Public API ────────────────────────────────────────────────────────────────

_configured = False


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Return a structured logger bound to the given name.

    Usage:
        log = get_logger(__name__)
        log.debug("stringify.call", indent=2, replacer="none")
    """
    global _configured
    if not _configured:
        _configure_structlog()
        _configured = True
    return structlog.get_logger(name or __name__)


__sdk_export__ = {
    "exports": ["get_logger"],
    "description": "Lazily configured structlog loggers",
    "tier": "tier0_core",
    "module": "logging",
}
