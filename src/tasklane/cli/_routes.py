"""``tasklane routes`` and ``tasklane resolve`` — inspect the page table."""

import argparse
import sys

from tasklane.errors import NotFound
from tasklane.routing.table import ROUTES, resolve


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATH, VIEW, and NAME for every page route."""
    rows = [(route.path, str(route.view), route.name) for route in ROUTES]

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_view = max(max(len(r[1]) for r in rows), 4)  # "VIEW" header

    fmt = f"{{:<{max_path}}}  {{:<{max_view}}}  {{}}"
    print(fmt.format("PATH", "VIEW", "NAME"))
    sep_len = max_path + max_view + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, view, name in rows:
        print(fmt.format(path, view, name))


def run_resolve(args: argparse.Namespace) -> None:
    """Print the view and parameters *args.path* resolves to."""
    try:
        match = resolve(args.path)
    except NotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"view: {match.view}")
    for name, value in match.params.items():
        print(f"{name}: {value}")
