"""Logging configuration for js-dependency-update."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

DEFAULT_PREFIX = "[js-dependency-update] : "
REDACTED = "***"

_secrets: set[str] = set()


def register_secret(value: str) -> None:
    """Redact ``value`` from every subsequent log line."""
    if value:
        _secrets.add(value)


def clear_secrets() -> None:
    _secrets.clear()


def _redact(value: Any) -> Any:
    if isinstance(value, str):
        for secret in _secrets:
            value = value.replace(secret, REDACTED)
        return value
    if isinstance(value, dict):
        return {k: _redact(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return type(value)(_redact(v) for v in value)
    return value


def redact_secrets(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """structlog processor replacing registered secrets with ``***``."""
    if not _secrets:
        return event_dict
    return {key: _redact(value) for key, value in event_dict.items()}


def _prefix_processor(prefix: str) -> structlog.types.Processor:
    def add_prefix(
        logger: Any, method_name: str, event_dict: structlog.types.EventDict
    ) -> structlog.types.EventDict:
        event_dict["event"] = f"{prefix}{event_dict.get('event', '')}"
        return event_dict

    return add_prefix


def setup_logging(debug: bool = False, prefix: str | None = DEFAULT_PREFIX) -> None:
    """Configure structured logging.

    Debug messages are emitted only when ``debug`` is true; info and error
    always are. Every message carries ``prefix`` when one is given.
    """
    log_level = logging.DEBUG if debug else logging.INFO

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if prefix:
        processors.append(_prefix_processor(prefix))
    processors.extend(
        [
            redact_secrets,
            structlog.dev.ConsoleRenderer(colors=False),
        ]
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # The level changes once the debug input is known.
        cache_logger_on_first_use=False,
    )

    # Also configure standard library logging for third-party packages
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance."""
    return structlog.get_logger(name)
