"""Tasklane CLI — inspect the page table and query the backend.

Entry point registered as ``tasklane`` in ``pyproject.toml``::

    [project.scripts]
    tasklane = "tasklane.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``tasklane`` command."""
    parser = argparse.ArgumentParser(
        prog="tasklane",
        description="Tasklane — page routing and REST client for the todo/list app.",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="API base URL (default: TASKLANE_API_URL or http://localhost:8080/api)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP traffic")
    subparsers = parser.add_subparsers(dest="command")

    # -- tasklane routes --------------------------------------------------
    subparsers.add_parser("routes", help="List the page routes")

    # -- tasklane resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a path to its view")
    resolve_parser.add_argument("path", help="Navigated path (e.g. /list/9)")

    # -- backend commands -------------------------------------------------
    subparsers.add_parser("todos", help="Print all todos as JSON")
    subparsers.add_parser("lists", help="Print all lists as JSON")
    subparsers.add_parser("health", help="Check that the backend is running")
    subparsers.add_parser("snapshot", help="Fetch todos and lists together")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from tasklane.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from tasklane.cli._routes import run_resolve

        run_resolve(args)
    else:
        from tasklane.cli._fetch import run_fetch

        run_fetch(args)
