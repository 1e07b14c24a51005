import pytest

from cicd_generator.infrastructure.observability.logger_factory_service import (
    _wants_json,
    redact_event_processor,
)
from cicd_generator.infrastructure.observability.redaction_service import REDACTED


@pytest.mark.parametrize(
    ("log_format", "app_env", "expected"),
    [
        ("json", "local", True),
        ("console", "prod", False),
        ("auto", "PROD", True),
        ("auto", "staging", True),
        ("auto", "local", False),
    ],
)
def test_renderer_choice(log_format, app_env, expected):
    assert _wants_json(log_format, app_env) is expected


def test_events_are_redacted_before_rendering():
    event = {
        "event": "Webhook https://hooks.slack.com/services/T000/B000/XYZ rejected",
        "api_token": "dop_v1_abc123",
        "context_project": "Orders API",
    }

    redacted = redact_event_processor(None, "info", event)

    assert "T000/B000/XYZ" not in redacted["event"]
    assert redacted["api_token"] == REDACTED
    assert redacted["context_project"] == "Orders API"
