# File: src/things_mcp/infrastructure/logging/formatters.py
# Purpose: Redact auth tokens from structured log events.
import re
from typing import Any

_URL_TOKEN = re.compile(r"(auth-token=)[^&\s]*")


class SensitiveDataFilter:
    """
    Filter to redact sensitive information from logs.
    Covers sensitive keys and the auth-token parameter of things:/// URLs.
    """

    SENSITIVE_KEYS = {
        "password",
        "secret",
        "token",
        "authorization",
        "auth",
    }

    REDACTED = "***REDACTED***"

    @classmethod
    def redact(cls, data: Any) -> Any:
        """
        Recursively redact sensitive data from dictionaries, lists and strings.

        Args:
            data: Data to redact (dict, list, or primitive)

        Returns:
            Data with sensitive fields redacted
        """
        if isinstance(data, dict):
            return {
                key: cls.REDACTED if cls._is_sensitive_key(key) else cls.redact(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [cls.redact(item) for item in data]
        elif isinstance(data, str):
            return _URL_TOKEN.sub(rf"\g<1>{cls.REDACTED}", data)
        else:
            return data

    @classmethod
    def _is_sensitive_key(cls, key: Any) -> bool:
        """Check if a key name indicates sensitive data"""
        key_lower = str(key).lower()
        return any(sensitive in key_lower for sensitive in cls.SENSITIVE_KEYS)


def redact_sensitive(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor applying ``SensitiveDataFilter`` to every event."""
    return SensitiveDataFilter.redact(event_dict)
