"""Backend commands: ``todos``, ``lists``, ``health``, ``snapshot``."""

import argparse
import json
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import anyio

from tasklane.api.client import ApiClient
from tasklane.config import ClientConfig
from tasklane.errors import ConfigurationError, RequestFailure


def build_config(args: argparse.Namespace) -> ClientConfig:
    """Environment config, with ``--base-url`` taking precedence."""
    config = ClientConfig.from_env()
    if args.base_url:
        config = ClientConfig(base_url=args.base_url, timeout=config.timeout)
    return config


async def snapshot(api: ApiClient) -> dict[str, Any]:
    """Fetch todos and lists concurrently.

    If either call fails, the first ``RequestFailure`` is raised on its own
    rather than wrapped in an ``ExceptionGroup``.
    """
    result: dict[str, Any] = {}

    async def _fetch(key: str, fetch: Callable[[], Awaitable[Any]]) -> None:
        result[key] = await fetch()

    try:
        async with anyio.create_task_group() as tg:
            tg.start_soon(_fetch, "todos", api.get_todos)
            tg.start_soon(_fetch, "lists", api.get_lists)
    except ExceptionGroup as group:
        raise group.exceptions[0] from group

    return {"todos": result["todos"], "lists": result["lists"]}


async def _run(command: str, config: ClientConfig) -> Any:
    async with ApiClient(config) as api:
        if command == "todos":
            return await api.get_todos()
        if command == "lists":
            return await api.get_lists()
        if command == "health":
            return await api.health()
        return await snapshot(api)


def run_fetch(args: argparse.Namespace) -> None:
    """Run one backend command and print its JSON result."""
    try:
        config = build_config(args)
        data = anyio.run(_run, args.command, config)
    except (ConfigurationError, RequestFailure) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.command == "health" and isinstance(data, dict) and "message" in data:
        print(data["message"])
        return
    print(json.dumps(data, indent=2))
