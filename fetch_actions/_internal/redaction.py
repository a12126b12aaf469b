"""Redaction of sensitive request data before it is written to diagnostics."""

from collections.abc import Mapping
from typing import Any

import httpx

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "proxy_authorization",
    "cookie",
    "set_cookie",
    "x_api_key",
    "api_key",
    "token",
    "access_token",
    "refresh_token",
    "password",
    "secret",
})

REDACTED_VALUE = "[REDACTED]"


def _normalize_key(key: str) -> str:
    return key.lower().replace("-", "_")


def redact_headers(headers: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a copy of the headers with sensitive values masked.

    Header names are matched case-insensitively; ``X-Api-Key`` and
    ``x_api_key`` are the same key. The original mapping is never mutated.
    """
    if not headers:
        return {}
    return {
        name: REDACTED_VALUE if _normalize_key(name) in REDACT_KEYS else value
        for name, value in headers.items()
    }


def redact_params(obj: Any) -> Any:
    """Recursively mask sensitive keys in query/body data."""
    if isinstance(obj, Mapping):
        result = {}
        for key, value in obj.items():
            if isinstance(key, str) and _normalize_key(key) in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_params(value)
        return result
    elif isinstance(obj, list):
        return [redact_params(item) for item in obj]
    else:
        return obj


def redact_url(url: str) -> str:
    """Mask sensitive query parameters of a URL before it is logged."""
    base, sep, query_string = url.partition("?")
    if not sep:
        return url
    params = [
        (key, REDACTED_VALUE if _normalize_key(key) in REDACT_KEYS else value)
        for key, value in httpx.QueryParams(query_string).multi_items()
    ]
    return f"{base}?{httpx.QueryParams(params)}"
