"""Tasklane exception hierarchy.

Shared across the page router, the API client, and the CLI so every module
raises and catches the same types.
"""

from typing import Any


class TasklaneError(Exception):
    """Base for all tasklane-specific errors."""


class ConfigurationError(TasklaneError):
    """Raised when client configuration or the route table is invalid."""


class RequestFailure(TasklaneError):  # noqa: N818 — mirrors the backend contract name
    """An API call did not succeed.

    Raised for non-2xx responses and for network-level failures alike.
    ``status`` is ``None`` when no HTTP response was received. ``body`` is
    the parsed error body, ``{}`` when the backend sent nothing usable.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        body: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.status = status
        self.body = body if body is not None else {}
        super().__init__(message)


class NotFound(TasklaneError):  # noqa: N818 — conventional name in routers
    """No page route matched the navigated path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No page matches {path!r}")
