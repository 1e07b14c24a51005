"""Logging setup for the generator: structlog for our own events, stdlib records bridged in.

Everything is written to stderr. The CLI prints decrypted configuration and
summaries on stdout, so log lines must never be interleaved there.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.typing import EventDict, WrappedLogger

from cicd_generator.infrastructure.observability.logging.event_schema_processor import (
    event_schema_processor,
)
from cicd_generator.infrastructure.observability.redaction_service import redact_dict

LogFormat = Literal["auto", "json", "console"]

_JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})
_configured = False


def redact_event_processor(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Mask credential-looking keys and values before anything is rendered."""
    return redact_dict(event_dict)


def configure_logging(
    level: str = "INFO",
    *,
    log_format: LogFormat = "auto",
    app_env: str = "local",
) -> None:
    """Install the structlog pipeline once per process; later calls are no-ops."""
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    json_output = _wants_json(log_format, app_env)
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_event_processor,
    ]
    # Schema reshaping must come after remove_processors_meta in the stdlib bridge
    finish: list[Any] = [event_schema_processor, renderer] if json_output else [renderer]

    structlog.configure(
        processors=[*chain, *finish],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    _bridge_stdlib(chain, finish, numeric_level)


def _bridge_stdlib(chain: list[Any], finish: list[Any], level: int) -> None:
    # Route logging.getLogger() records (uvicorn, the use case) through the same chain
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *finish],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def _wants_json(log_format: LogFormat, app_env: str) -> bool:
    if log_format != "auto":
        return log_format == "json"
    return app_env.lower() in _JSON_ENVIRONMENTS


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger pre-bound with context_component."""
    return structlog.get_logger().bind(context_component=component)
