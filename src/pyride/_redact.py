"""Redaction of request/response traces.

Only JSON-shaped values (dicts, lists, scalars) pass through the transport
trace, so that is all this handles.
"""

from __future__ import annotations

from typing import Any

_REDACTED = "<redacted>"

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "access_token",
        "refresh_token",
        "token",
        "authorization",
        "password",
        # Personal and payout fields in profile payloads
        "phone",
        "account_number",
        "bank_code",
        "license_no",
        "nin",
    }
)


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Copy *value* with sensitive keys masked and long strings cut."""
    if isinstance(value, dict):
        return {
            key: _REDACTED if str(key).lower() in _SENSITIVE_KEYS else redact_for_log(item, max_string=max_string)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact_for_log(item, max_string=max_string) for item in value]
    if isinstance(value, str) and len(value) > max_string:
        return f"{value[:max_string]}…<truncated>"
    return value
