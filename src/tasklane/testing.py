"""In-process backend for exercising ``ApiClient`` without a server.

Usage::

    backend = FakeBackend()
    backend.reply(200, json_body=[{"id": 1}])
    api = ApiClient(transport=httpx.MockTransport(backend))
    await api.get_todos()
    backend.last.url.path   # "/api/todos"
"""

import json
from collections.abc import Callable
from typing import Any

import httpx


class FakeBackend:
    """Records every request and answers it with the configured response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda _req: httpx.Response(204)

    def reply(
        self,
        status: int = 200,
        *,
        json_body: Any = None,
        content: bytes | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Answer every following request with the given response."""

        def handler(_request: httpx.Request) -> httpx.Response:
            if json_body is not None:
                return httpx.Response(status, json=json_body, headers=headers)
            return httpx.Response(status, content=content, headers=headers)

        self.handler = handler

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)
