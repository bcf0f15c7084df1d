"""The error body contract between this client and the backend.

Failed responses carry ``{"error": "<message>"}``. Anything else is treated
as an empty body and the failure message falls back to the status code.
"""

import json
from typing import Any, TypedDict


class ErrorBody(TypedDict, total=False):
    error: str


def parse_error_body(raw: bytes) -> dict[str, Any]:
    """Parse a failed response body, or return ``{}`` if it isn't a JSON object."""
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def error_message(body: ErrorBody | dict[str, Any], status: int) -> str:
    """Return the backend's ``error`` field, or a message naming *status*."""
    error = body.get("error")
    if error:
        return str(error)
    return f"HTTP error! status: {status}"
