"""Event schema processor for structlog.

Reshapes the flat structlog event_dict into a nested record with a fixed set of
root fields plus optional ``error`` and ``context`` blocks.
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

import os
from typing import Any

SERVICE_NAME = "cicd-generator"


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    """Extract root-level fields: timestamp, level, service, environment, message."""
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", SERVICE_NAME),
        "environment": os.environ.get("APP_ENV", "local"),
        "message": event_dict.pop("event", ""),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
        "artifact": event_dict.pop("error_artifact", None),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract execution context block."""
    component = event_dict.pop("context_component", None)
    if component is None:
        return None
    return {
        "component": component,
        "project": event_dict.pop("context_project", None),
        "provider": event_dict.pop("context_provider", None),
        "endpoint": event_dict.pop("context_endpoint", None),
    }


def event_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that nests error_* and context_* keys."""
    result = _build_root_fields(event_dict)

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
