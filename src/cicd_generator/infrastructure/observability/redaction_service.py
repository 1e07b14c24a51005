import re
from typing import Any

REDACTED = "[REDACTED]"

# Each pattern is (kept prefix)(secret)
_SECRET_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
        r"(AKIA)([A-Z0-9]{16})",
        r"(dop_v1_)([a-f0-9]+)",
        r"((?:api_token|access_key|client_secret|secret_access_key)\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=]+['\"]?)",
        r"(https://hooks\.slack\.com/services/)(\S+)",
        r"(https://discord(?:app)?\.com/api/webhooks/)(\S+)",
        r"(https://api\.telegram\.org/bot)(\S+)",
    )
)

# Matched as substrings of the lower-cased key, so camelCase aliases need their own entry
SENSITIVE_KEYS = frozenset(
    {
        "access_key",
        "accesskey",
        "api_token",
        "apitoken",
        "client_id",
        "clientid",
        "encryption_key",
        "key_file",
        "keyfile",
        "password",
        "project_id",
        "projectid",
        "secret",
        "subscription_id",
        "subscriptionid",
        "tenant_id",
        "tenantid",
        "token",
        "webhook",
    }
)


def is_sensitive_key(key: object) -> bool:
    lowered = str(key).lower()
    return any(sensitive in lowered for sensitive in SENSITIVE_KEYS)


def redact_text(text: str) -> str:
    """Replace known secret shapes inside free text, keeping their recognizable prefix."""
    if not text:
        return text
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(rf"\1{REDACTED}", text)
    return text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return redact_dict(value)
    if isinstance(value, (list, tuple)):
        return type(value)(redact_value(item) for item in value)
    return value


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    """
    Copy of obj with sensitive keys masked and every nested string scanned.
    Keys holding None stay None so optional fields keep their meaning.
    """
    return {
        key: REDACTED if value is not None and is_sensitive_key(key) else redact_value(value)
        for key, value in obj.items()
    }


def mask_secret(value: str | None, visible: int = 4) -> str:
    """Keep the last few characters of a secret for recognition, mask the rest."""
    if not value:
        return ""
    if len(value) <= visible * 2:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
