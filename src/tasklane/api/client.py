"""Async REST client for the todo/list backend.

One generic ``request()`` does the work: it joins the endpoint to the
configured base URL, sends JSON headers, decodes JSON responses, and turns
every failure into ``RequestFailure``. The resource methods only pick a
path and a method.

Concurrency:
    - ClientConfig is frozen and shared freely
    - outside ``async with``, each call opens its own httpx.AsyncClient
    - inside ``async with``, calls share one connection pool
"""

import json
import logging
from typing import Any, Self

import httpx

from tasklane.api.options import DEFAULT_HEADERS, RequestOptions, merge_headers
from tasklane.api.schema import error_message, parse_error_body
from tasklane.config import ClientConfig
from tasklane.errors import RequestFailure

logger = logging.getLogger("tasklane.api")

JSON_CONTENT_TYPE = "application/json"

Id = str | int


class ApiClient:
    """Client for the ``/todos`` and ``/lists`` resources.

    Usage::

        api = ApiClient(ClientConfig(base_url="http://localhost:8080/api"))
        todo = await api.get_todo("42")

        # Reuse one connection pool for several calls
        async with ApiClient() as api:
            lists = await api.get_lists()
            todos = await api.get_todos()

    Payloads are plain JSON values. Nothing is validated here; the backend
    rejects malformed payloads and the rejection surfaces as
    ``RequestFailure``.
    """

    __slots__ = ("_client", "_transport", "config")

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, timeout=self.config.timeout)

    async def __aenter__(self) -> Self:
        if self._client is not None:
            msg = "ApiClient is already open."
            raise RuntimeError(msg)
        self._client = self._new_client()
        return self

    async def __aexit__(self, *args: object) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    # -- generic request ---------------------------------------------------

    async def request(self, endpoint: str, options: RequestOptions | None = None) -> Any | None:
        """Send one request and decode the response.

        Returns the parsed JSON body for a 2xx JSON response and ``None``
        for any other 2xx response. Raises ``RequestFailure`` for non-2xx
        statuses and for network-level errors.
        """
        if not endpoint or not endpoint.startswith("/"):
            msg = f"endpoint must be a non-empty path starting with '/', got {endpoint!r}"
            raise ValueError(msg)

        options = options or RequestOptions()
        url = f"{self.config.base_url}{endpoint}"
        headers = merge_headers(DEFAULT_HEADERS, dict(self.config.headers), options.headers)

        try:
            response = await self._send(options.method, url, headers, options.body)
        except httpx.RequestError as exc:
            logger.error("API request failed: %s %s: %s", options.method, url, exc)
            raise RequestFailure(f"Request to {url} failed: {exc}") from exc

        logger.debug("API Response: %d %s", response.status_code, response.reason_phrase)

        if not response.is_success:
            body = parse_error_body(response.content)
            logger.warning("API Error: %s", body)
            message = error_message(body, response.status_code)
            logger.error("API request failed: %s %s: %s", options.method, url, message)
            raise RequestFailure(message, status=response.status_code, body=body)

        content_type = response.headers.get("content-type", "")
        if JSON_CONTENT_TYPE not in content_type or not response.content:
            return None

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error("API request failed: %s %s: invalid JSON body", options.method, url)
            raise RequestFailure(
                f"Invalid JSON in response from {url}",
                status=response.status_code,
            ) from exc

        logger.debug("API Response data: %s", data)
        return data

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | None,
    ) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(method, url, headers=headers, content=body)
        async with self._new_client() as client:
            return await client.request(method, url, headers=headers, content=body)

    # -- todos -------------------------------------------------------------

    async def get_todos(self) -> Any | None:
        return await self.request("/todos")

    async def get_todo(self, todo_id: Id) -> Any | None:
        return await self.request(f"/todos/{todo_id}")

    async def create_todo(self, todo: Any) -> Any | None:
        return await self.request("/todos", RequestOptions(method="POST", body=json.dumps(todo)))

    async def update_todo(self, todo_id: Id, todo: Any) -> Any | None:
        return await self.request(
            f"/todos/{todo_id}", RequestOptions(method="PUT", body=json.dumps(todo))
        )

    async def delete_todo(self, todo_id: Id) -> Any | None:
        return await self.request(f"/todos/{todo_id}", RequestOptions(method="DELETE"))

    # -- lists -------------------------------------------------------------

    async def get_lists(self) -> Any | None:
        return await self.request("/lists")

    async def get_list(self, list_id: Id) -> Any | None:
        return await self.request(f"/lists/{list_id}")

    async def create_list(self, todo_list: Any) -> Any | None:
        return await self.request(
            "/lists", RequestOptions(method="POST", body=json.dumps(todo_list))
        )

    async def update_list(self, list_id: Id, todo_list: Any) -> Any | None:
        return await self.request(
            f"/lists/{list_id}", RequestOptions(method="PUT", body=json.dumps(todo_list))
        )

    async def delete_list(self, list_id: Id) -> Any | None:
        return await self.request(f"/lists/{list_id}", RequestOptions(method="DELETE"))

    # -- backend -----------------------------------------------------------

    async def health(self) -> Any | None:
        """Probe ``GET /health``; the backend answers ``{"message": ...}``."""
        return await self.request("/health")
