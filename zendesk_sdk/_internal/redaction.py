"""Redaction of credentials in request parameters before debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "password",
    "token",
    "api_token",
    "access_token",
    "refresh_token",
    "authorization",
    "secret",
    "client_secret",
    "shared_secret",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Return a copy of request params with sensitive values masked.

    Keys are matched case-insensitively at any depth, so a user created with
    ``{"user": {"password": ...}}`` prints as ``[REDACTED]``. The input is
    never mutated.
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            if isinstance(key, str) and key.lower() in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
